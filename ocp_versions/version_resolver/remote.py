"""
Remote command execution on the cluster host.

A CommandExecutor runs one shell command on the host and returns its output.
SSHCommander does this with the ssh binary; tests supply their own executor.
"""

import subprocess
from typing import List, Optional, Protocol

from ocp_versions.common.errors import ExecutionError
from ocp_versions.common.utils import logger


class CommandExecutor(Protocol):
    def ssh_command(self, command: str) -> str:
        """Run command on the remote host and return its standard output."""


class SSHCommander:
    """Run commands on a remote host through the system ssh client."""

    def __init__(self, host: str, user: Optional[str] = None, identity_file: Optional[str] = None,
                 port: Optional[int] = None, timeout_sec: Optional[float] = None):
        if not host:
            raise ValueError("host must be specified")
        self.host = host
        self.user = user
        self.identity_file = identity_file
        self.port = port
        self.timeout_sec = timeout_sec

    def build_command(self, command: str) -> List[str]:
        cmd = ["ssh", "-o", "BatchMode=yes"]
        if self.identity_file:
            cmd += ["-i", self.identity_file]
        if self.port:
            cmd += ["-p", str(self.port)]
        cmd.append(f"{self.user}@{self.host}" if self.user else self.host)
        cmd.append(command)
        return cmd

    def ssh_command(self, command: str) -> str:
        cmd = self.build_command(command)
        logger.debug(f'Running "{command}" on {self.host}')
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
            )
        except FileNotFoundError as e:
            raise ExecutionError(cmd, reason="ssh client not found") from e
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(cmd, reason=f"timed out after {self.timeout_sec}s") from e

        if proc.returncode != 0:
            raise ExecutionError(cmd, returncode=proc.returncode, stderr=proc.stderr or "")
        return proc.stdout


class DockerCommander:
    """Wrap commands into `docker exec` calls run through a CommandExecutor."""

    def __init__(self, executor: CommandExecutor):
        self.executor = executor

    def exec(self, options: str, container: str, command: str, args: str = "") -> str:
        cmd = f"docker exec {options} {container} {command} {args}"
        return self.executor.ssh_command(cmd)
