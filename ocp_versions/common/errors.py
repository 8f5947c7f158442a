"""
Errors raised while resolving OpenShift versions.
All of them derive from VersionResolverError so callers can catch one type.
"""

from typing import Optional, Sequence


class VersionResolverError(Exception):
    """Base class for all version resolution failures."""


class ExecutionError(VersionResolverError):
    """A remote command could not be run or exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: Optional[int] = None,
                 stderr: str = "", reason: str = ""):
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        cmd_str = " ".join(self.command)
        if reason:
            message = f"Command '{cmd_str}' failed: {reason}"
        else:
            message = f"Command '{cmd_str}' failed (exit {returncode})"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)


class UnexpectedOutputError(VersionResolverError):
    """Remote output did not have the expected layout."""


class NetworkError(VersionResolverError):
    """HTTP transport failure or a non-successful HTTP status."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Request to {url} failed: {reason}")


class DecodeError(VersionResolverError):
    """Response body is not valid JSON of the expected shape."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Unable to decode response from {url}: {reason}")


class InvalidVersionFormat(VersionResolverError, ValueError):
    """A version string cannot be parsed as a semantic version."""

    def __init__(self, version: str, reason: str):
        self.version = version
        super().__init__(f"Invalid version format '{version}': {reason}")
