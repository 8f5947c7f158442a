"""
HTTP access to the version catalogs.

A JsonFetcher returns the decoded JSON document found at a URL. RequestsFetcher
is the implementation backed by requests; tests supply their own fetcher.
"""

from typing import Any, Dict, List, Optional, Protocol

import requests
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from ocp_versions.common.errors import DecodeError, NetworkError
from ocp_versions.common.utils import logger


class ReleaseTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def untitled_release(cls, value: Any) -> Any:
        # GitHub reports untitled releases with a null name
        return "" if value is None else value


_registry_tags = TypeAdapter(Dict[str, str])
_release_tags = TypeAdapter(List[ReleaseTag])


class JsonFetcher(Protocol):
    def get_json(self, url: str) -> Any:
        """Fetch url and return the decoded JSON body."""


class RequestsFetcher:

    def __init__(self, timeout_sec: int = 30, session: Optional[requests.Session] = None):
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    def get_json(self, url: str) -> Any:
        """
        Send an HTTP GET request and return the JSON response.

        The response is closed before returning, whether decoding succeeds or not.

        Raises:
            NetworkError: If the request fails or the status is not successful
            DecodeError: If the body is not valid JSON
        """
        try:
            response = self.session.get(url, headers={'Accept': 'application/json'},
                                        timeout=self.timeout_sec)
        except requests.RequestException as e:
            raise NetworkError(url, str(e)) from e

        with response:
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise NetworkError(url, str(e)) from e
            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(url, str(e)) from e


def decode_registry_tags(url: str, data: Any) -> Dict[str, str]:
    """Validate the registry response, a JSON object mapping tag names to image IDs."""
    try:
        tags = _registry_tags.validate_python(data)
    except ValidationError as e:
        raise DecodeError(url, str(e)) from e
    logger.debug(f"Received {len(tags)} registry tags")
    return tags


def decode_release_tags(url: str, data: Any) -> List[ReleaseTag]:
    """Validate the release list response, a JSON array of release objects."""
    try:
        releases = _release_tags.validate_python(data)
    except ValidationError as e:
        raise DecodeError(url, str(e)) from e
    logger.debug(f"Received {len(releases)} releases")
    return releases
