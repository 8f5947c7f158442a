import os
import json
from pathlib import Path

DEFAULT_REGISTRY_TAGS_URL = "https://registry.access.redhat.com/v1/repositories/openshift3/ose/tags"
DEFAULT_RELEASES_URL = "https://api.github.com/repos/openshift/origin/releases"
DEFAULT_CONTAINER_NAME = "origin"


class Settings:
    settings_file_path: str
    request_timeout_sec: int
    ssh_timeout_sec: int
    registry_tags_url: str
    releases_url: str
    openshift_container_name: str
    min_supported_version: str
    default_version: str

    def __init__(self):
        self.request_timeout_sec = self._int_env("REQUEST_TIMEOUT_SECONDS", 30)
        self.ssh_timeout_sec = self._int_env("SSH_COMMAND_TIMEOUT_SECONDS", 60)

        # Settings file can be specified via env var or defaults to settings.json in same directory
        self.settings_file_path = os.getenv(
            "SETTINGS_FILE_PATH",
            str(Path(__file__).parent / "settings.json")
        )
        defaults = self._load_defaults()

        self.registry_tags_url = os.getenv(
            "REGISTRY_TAGS_URL", defaults.get("registry_tags_url", DEFAULT_REGISTRY_TAGS_URL))
        self.releases_url = os.getenv(
            "RELEASES_URL", defaults.get("releases_url", DEFAULT_RELEASES_URL))
        self.openshift_container_name = os.getenv(
            "OPENSHIFT_CONTAINER_NAME", defaults.get("openshift_container_name", DEFAULT_CONTAINER_NAME))
        self.min_supported_version = os.getenv(
            "MIN_SUPPORTED_VERSION", defaults.get("minimum_supported_version", ""))
        self.default_version = os.getenv(
            "DEFAULT_VERSION", defaults.get("default_version", ""))

        if not self.min_supported_version:
            raise ValueError("MIN_SUPPORTED_VERSION must be specified")
        if not self.default_version:
            raise ValueError("DEFAULT_VERSION must be specified")

    @staticmethod
    def _int_env(name: str, default: int) -> int:
        value = os.getenv(name, str(default))
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"{name} must be an integer, got '{value}'") from e

    def _load_defaults(self) -> dict:
        """Load the default endpoints and versions."""
        try:
            with open(self.settings_file_path, 'r') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise FileNotFoundError(
                f"Settings file not found: {self.settings_file_path}. "
                f"This file provides the catalog endpoints and the minimum supported and default "
                f"OpenShift versions. Please ensure the file exists."
            ) from e
