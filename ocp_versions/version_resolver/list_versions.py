#!/usr/bin/env python
"""
List the OpenShift versions available for provisioning, or show the version
running on a cluster host.

Examples:
    python -m ocp_versions.version_resolver.list_versions upstream
    python -m ocp_versions.version_resolver.list_versions registry --min-version v3.6.0
    python -m ocp_versions.version_resolver.list_versions runtime --host 192.168.42.10 --bare
"""

import argparse
import logging
import sys
from typing import List, Optional

from ocp_versions.common.errors import VersionResolverError
from ocp_versions.common.utils import logger, set_log_level
from ocp_versions.version_resolver.settings import Settings
from ocp_versions.version_resolver.remote import SSHCommander
from ocp_versions.version_resolver.resolver import VersionResolver


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve OpenShift versions")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="source", required=True)

    upstream = subparsers.add_parser("upstream", help="List origin releases from GitHub")
    upstream.add_argument("--min-version", default=settings.min_supported_version,
                          help="Minimum supported version (default: %(default)s)")
    upstream.add_argument("--default-version", default=settings.default_version,
                          help="Default version; pre-releases below it are hidden (default: %(default)s)")

    registry = subparsers.add_parser("registry", help="List OpenShift image tags from the Red Hat registry")
    registry.add_argument("--min-version", default=settings.min_supported_version,
                          help="Minimum supported version (default: %(default)s)")

    runtime = subparsers.add_parser("runtime", help="Show the OpenShift version running on a host")
    runtime.add_argument("--host", required=True, help="Host running the OpenShift container")
    runtime.add_argument("--user", help="SSH user")
    runtime.add_argument("--identity-file", help="SSH private key")
    runtime.add_argument("--port", type=int, help="SSH port")
    runtime.add_argument("--bare", action="store_true",
                         help="Print only the OpenShift version, e.g. 3.6.1")
    return parser


def run(args: argparse.Namespace, settings: Settings) -> None:
    if args.source == "upstream":
        VersionResolver(settings).list_upstream_versions(args.min_version, args.default_version, sys.stdout)
    elif args.source == "registry":
        VersionResolver(settings).list_registry_versions(args.min_version, sys.stdout)
    else:
        executor = SSHCommander(args.host, user=args.user, identity_file=args.identity_file,
                                port=args.port, timeout_sec=settings.ssh_timeout_sec)
        resolver = VersionResolver(settings, executor=executor)
        if args.bare:
            print(resolver.get_bare_version())
        else:
            print(resolver.get_runtime_version(), end="")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    settings = Settings()
    args = build_parser(settings).parse_args(argv)
    if args.debug:
        set_log_level(logging.DEBUG)

    try:
        run(args, settings)
    except VersionResolverError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
