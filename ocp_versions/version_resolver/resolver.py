"""
Resolve the OpenShift version running on a cluster host and list the versions
available from the Red Hat registry and from the upstream origin releases.
"""

from typing import Iterable, List, Optional, TextIO

from ocp_versions.common.utils import logger
from ocp_versions.version_resolver.settings import Settings
from ocp_versions.version_resolver.remote import CommandExecutor, DockerCommander
from ocp_versions.version_resolver.http_fetcher import (
    JsonFetcher,
    RequestsFetcher,
    decode_registry_tags,
    decode_release_tags,
)
from ocp_versions.version_resolver.version_utils import (
    filter_registry_tags,
    filter_upstream_releases,
    parse_bare_version,
)

AVAILABLE_VERSIONS_HEADER = "The following OpenShift versions are available:"


def write_versions(output: TextIO, versions: Iterable[str]):
    output.write(AVAILABLE_VERSIONS_HEADER + "\n")
    for version in versions:
        output.write(f"\t- {version}\n")


class VersionResolver:

    def __init__(self, settings: Settings, executor: Optional[CommandExecutor] = None,
                 fetcher: Optional[JsonFetcher] = None):
        self.settings = settings
        self.executor = executor
        self.fetcher = fetcher or RequestsFetcher(timeout_sec=settings.request_timeout_sec)

    def get_runtime_version(self) -> str:
        """
        Return the raw output of `openshift version` run inside the OpenShift container.

        Raises:
            ExecutionError: If the remote command fails
        """
        if self.executor is None:
            raise ValueError("A command executor is required to query the runtime version")
        container = self.settings.openshift_container_name
        logger.info(f'Querying OpenShift version from container "{container}"')
        return DockerCommander(self.executor).exec(" ", container, "openshift", "version")

    def get_bare_version(self) -> str:
        """Return the running OpenShift version without prefix and commit, e.g. "3.6.1"."""
        return parse_bare_version(self.get_runtime_version())

    def list_registry_versions(self, min_supported_version: str, output: TextIO) -> List[str]:
        """
        Write the registry tags at or above min_supported_version to output.

        Raises:
            NetworkError: If the registry cannot be reached
            DecodeError: If the registry response is not a JSON object of strings
        """
        url = self.settings.registry_tags_url
        logger.info(f'Listing OpenShift image tags from {url}')
        tags = decode_registry_tags(url, self.fetcher.get_json(url))

        versions = filter_registry_tags(tags.keys(), min_supported_version)
        write_versions(output, versions)
        return versions

    def list_upstream_versions(self, min_supported_version: str, default_version: str,
                               output: TextIO) -> List[str]:
        """
        Write the origin releases that satisfy the following conditions to output:
            1. Greater than or equal to the minimum supported version
            2. Pre-releases only when greater than or equal to the default version

        Raises:
            NetworkError: If the release list cannot be fetched
            DecodeError: If the response is not a JSON array of releases
            InvalidVersionFormat: If min_supported_version or default_version is invalid
        """
        url = self.settings.releases_url
        logger.info(f'Listing OpenShift releases from {url}')
        releases = decode_release_tags(url, self.fetcher.get_json(url))

        versions = filter_upstream_releases((r.name for r in releases),
                                            min_supported_version, default_version)
        write_versions(output, versions)
        return versions
