"""
Common utilities shared across the OpenShift version tooling.
"""

from ocp_versions.common.utils import get_logger, set_log_level, logger
from ocp_versions.common.errors import (
    VersionResolverError,
    ExecutionError,
    UnexpectedOutputError,
    NetworkError,
    DecodeError,
    InvalidVersionFormat,
)

__all__ = [
    # Utils
    "get_logger",
    "set_log_level",
    "logger",

    # Errors
    "VersionResolverError",
    "ExecutionError",
    "UnexpectedOutputError",
    "NetworkError",
    "DecodeError",
    "InvalidVersionFormat",
]
