"""Version parsing and comparison helpers for OpenShift version strings."""

import re
from typing import Iterable, List

from semver import Version

from ocp_versions.common.errors import InvalidVersionFormat, UnexpectedOutputError
from ocp_versions.common.utils import logger

VERSION_PREFIX = "v"

_digits = re.compile(r'[0-9]+')
_prerelease = re.compile(r'alpha|beta|rc')


def strip_version_prefix(version: str) -> str:
    if version.startswith(VERSION_PREFIX):
        return version[len(VERSION_PREFIX):]
    return version


def version_ordinal(version: str) -> str:
    """
    Build a string that compares like the version it was built from.

    Each run of digits becomes a length marker followed by the digits without
    leading zeros, so numeric components compare by magnitude. Other characters
    are kept as-is and compare lexically.

    Examples:
        >>> version_ordinal("v3.10.0") > version_ordinal("v3.9.0")
        True
        >>> version_ordinal("latest") < version_ordinal("v3.5.0")
        True
    """
    def pad(match: re.Match) -> str:
        digits = match.group().lstrip('0') or '0'
        return chr(len(digits)) + digits

    return _digits.sub(pad, version)


def is_prerelease(tag: str) -> bool:
    return _prerelease.search(tag) is not None


def parse_version(version: str) -> Version:
    try:
        return Version.parse(strip_version_prefix(version))
    except (ValueError, TypeError) as e:
        raise InvalidVersionFormat(version, str(e)) from e


def is_greater_or_equal_to_base_version(version: str, base_version: str) -> bool:
    """
    Check whether version is greater than or equal to base_version.

    Both arguments may carry the "v" prefix.

    Raises:
        InvalidVersionFormat: If either version is not a semantic version
    """
    v = parse_version(version)
    base = parse_version(base_version)
    return v.match(f">={base}")


def parse_bare_version(version_info: str) -> str:
    """
    Extract the bare OpenShift version from `openshift version` output.

    The output looks like:
        openshift v3.6.1+c4dd4cf
        kubernetes v1.6.1+5115d708d7
        etcd 3.2.1

    The second token of the first line is taken, the "+<commit>" suffix and the
    "v" prefix are dropped, giving "3.6.1". The token is not checked to be a
    valid version.

    Raises:
        UnexpectedOutputError: If the first line has fewer than two tokens
    """
    first_line = version_info.split("\n")[0]
    tokens = first_line.split()
    if len(tokens) < 2:
        raise UnexpectedOutputError(f"Unexpected 'openshift version' output: {first_line!r}")
    version_with_commit = tokens[1]
    return strip_version_prefix(version_with_commit.split("+")[0]).strip()


def filter_registry_tags(tags: Iterable[str], min_supported_version: str) -> List[str]:
    """
    Keep the registry tags at or above min_supported_version (ordinal comparison),
    skipping "latest" tags and hyphenated tags. The result is sorted lexically.
    """
    min_ordinal = version_ordinal(min_supported_version)
    tags_list = []
    for tag in tags:
        if version_ordinal(tag) < min_ordinal:
            continue
        if "latest" in tag or "-" in tag:
            continue
        tags_list.append(tag)
    return sorted(tags_list)


def filter_upstream_releases(names: Iterable[str], min_supported_version: str,
                             default_version: str) -> List[str]:
    """
    Keep the release names that satisfy both of:
        1. Greater than or equal to the minimum supported version
        2. Greater than or equal to the default version, unless not a pre-release

    Names that are not semantic versions are dropped with a warning.
    The result is sorted lexically, not semantically.

    Raises:
        InvalidVersionFormat: If min_supported_version or default_version is invalid
    """
    parse_version(min_supported_version)
    parse_version(default_version)

    release_list = []
    for name in names:
        if "latest" in name:
            continue
        try:
            if not is_greater_or_equal_to_base_version(name, min_supported_version):
                continue
            if is_greater_or_equal_to_base_version(name, default_version) or not is_prerelease(name):
                release_list.append(name)
        except InvalidVersionFormat as e:
            logger.warning(f'Skipping release "{name}": {e}')
    return sorted(release_list)
