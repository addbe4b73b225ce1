"""Configuration system for autobackup.

This module provides loading, environment substitution, and versioned
decoding of the automatic backup/restore configuration file.
"""

from .duration import format_duration, parse_duration
from .envsubst import expand_env, substitute_env
from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    InvalidVersionError,
    SubConfigError,
    UnsupportedStorageTypeError,
)
from .loader import load_config, unmarshal
from .reader import read_config_file
from .schema import (
    DEFAULT_TIMEOUT,
    SUPPORTED_VERSION,
    Config,
    S3Config,
    StorageConfig,
    StorageType,
)

__all__ = [
    "Config",
    "S3Config",
    "StorageConfig",
    "StorageType",
    "SUPPORTED_VERSION",
    "DEFAULT_TIMEOUT",
    "load_config",
    "unmarshal",
    "read_config_file",
    "expand_env",
    "substitute_env",
    "parse_duration",
    "format_duration",
    "ConfigError",
    "ConfigReadError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "InvalidVersionError",
    "UnsupportedStorageTypeError",
    "SubConfigError",
]
