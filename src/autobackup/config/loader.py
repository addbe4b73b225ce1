"""JSON configuration loading and validation.

Parses the configuration envelope, checks the schema version, and hands
the 'sub' payload to the decoder registered for the storage type.
"""

import json
import logging
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Optional

from .duration import parse_duration
from .errors import (
    ConfigParseError,
    InvalidVersionError,
    SubConfigError,
    UnsupportedStorageTypeError,
)
from .reader import read_config_file
from .schema import (
    DEFAULT_TIMEOUT,
    SUPPORTED_VERSION,
    Config,
    S3Config,
    StorageConfig,
    StorageType,
)

logger = logging.getLogger(__name__)

# Sentinel for "key not present", so explicit false/0/null stay distinct
_MISSING = object()


def _where(source: Optional[str]) -> str:
    return f" in {source}" if source else ""


def _get_typed(
    data: dict[str, Any],
    key: str,
    expected: type,
    source: Optional[str],
) -> Any:
    """Fetch an optional envelope field, checking its JSON type."""
    value = data.get(key, _MISSING)
    if value is _MISSING:
        return _MISSING

    # bool is an int subclass, but true/false is never a valid number here
    if not isinstance(value, expected) or (
        expected is int and isinstance(value, bool)
    ):
        raise ConfigParseError(
            f"Field '{key}'{_where(source)} must be of type "
            f"{expected.__name__}, got {type(value).__name__}"
        )
    return value


def _check_fields(
    storage_type: StorageType,
    data: dict[str, Any],
    required: dict[str, type],
    optional: dict[str, type],
) -> None:
    """Validate presence and types of backend payload fields."""
    missing = [key for key in required if key not in data]
    if missing:
        raise SubConfigError(
            storage_type, f"missing required field(s): {', '.join(missing)}"
        )

    for key, expected in {**required, **optional}.items():
        if key in data and not isinstance(data[key], expected):
            raise SubConfigError(
                storage_type,
                f"field '{key}' must be of type {expected.__name__}, "
                f"got {type(data[key]).__name__}",
            )

    unknown = sorted(set(data) - set(required) - set(optional))
    if unknown:
        logger.warning(
            "Ignoring unknown '%s' field(s): %s", storage_type, ", ".join(unknown)
        )


def _decode_s3(data: dict[str, Any]) -> S3Config:
    """Decode the 's3' sub-configuration."""
    _check_fields(
        StorageType.S3,
        data,
        required={
            "access_key_id": str,
            "secret_access_key": str,
            "region": str,
            "bucket": str,
            "path": str,
        },
        optional={"endpoint": str, "force_path_style": bool},
    )

    return S3Config(
        access_key_id=data["access_key_id"],
        secret_access_key=data["secret_access_key"],
        region=data["region"],
        bucket=data["bucket"],
        path=data["path"],
        endpoint=data.get("endpoint", ""),
        force_path_style=data.get("force_path_style", False),
    )


# One decoder per storage type. A new backend adds a StorageType member,
# a schema dataclass and an entry here.
DECODERS: dict[StorageType, Callable[[dict[str, Any]], StorageConfig]] = {
    StorageType.S3: _decode_s3,
}


def _parse_timeout(value: Any, source: Optional[str]) -> timedelta:
    if value is _MISSING:
        return DEFAULT_TIMEOUT
    if not isinstance(value, str):
        raise ConfigParseError(
            f"Field 'timeout'{_where(source)} must be a duration string, "
            f"got {type(value).__name__}"
        )
    try:
        return parse_duration(value)
    except ValueError as e:
        raise ConfigParseError(f"Invalid 'timeout'{_where(source)}: {e}") from e


def unmarshal(
    data: bytes | str, source: Optional[str] = None
) -> tuple[Config, StorageConfig]:
    """Decode a configuration document.

    Args:
        data: JSON document, with environment references already expanded
        source: Name of the file the data came from, used in error messages

    Returns:
        Tuple of (Config envelope, backend-specific configuration)

    Raises:
        ConfigParseError: If the JSON is malformed or a field has the wrong type
        InvalidVersionError: If the version is not SUPPORTED_VERSION
        UnsupportedStorageTypeError: If the type has no registered decoder
        SubConfigError: If the 'sub' payload does not fit the storage type
    """
    try:
        doc = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Invalid JSON{_where(source)}: {e}") from e

    if not isinstance(doc, dict):
        raise ConfigParseError(
            f"Configuration{_where(source)} must be a JSON object, "
            f"got {type(doc).__name__}"
        )

    version = _get_typed(doc, "version", int, source)
    type_name = _get_typed(doc, "type", str, source)
    continue_on_failure = _get_typed(doc, "continue_on_failure", bool, source)
    timeout = _parse_timeout(doc.get("timeout", _MISSING), source)

    try:
        storage_type = StorageType(type_name)
    except ValueError:
        raise UnsupportedStorageTypeError(
            None if type_name is _MISSING else type_name
        ) from None

    # An absent version decodes as 0, which is not a supported version
    if version is _MISSING or version != SUPPORTED_VERSION:
        raise InvalidVersionError(None if version is _MISSING else version)

    sub = doc.get("sub", _MISSING)
    if sub is _MISSING:
        raise SubConfigError(storage_type, "missing 'sub' section")
    if not isinstance(sub, dict):
        raise SubConfigError(
            storage_type, f"'sub' must be an object, got {type(sub).__name__}"
        )

    storage_config = DECODERS[storage_type](sub)

    config = Config(
        version=version,
        type=storage_type,
        timeout=timeout,
        continue_on_failure=(
            False if continue_on_failure is _MISSING else continue_on_failure
        ),
        sub=sub,
    )

    logger.debug(
        "Decoded %s config%s (version %d, timeout %s, continue_on_failure %s)",
        storage_type,
        _where(source),
        config.version,
        config.timeout,
        config.continue_on_failure,
    )
    return config, storage_config


def load_config(path: Path | str) -> tuple[Config, StorageConfig]:
    """Load and validate configuration from a JSON file.

    Environment references in the file are expanded before parsing.

    Args:
        path: Path to configuration file

    Returns:
        Tuple of (Config envelope, backend-specific configuration)

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    data = read_config_file(path)
    return unmarshal(data, source=str(path))


def generate_example_config() -> str:
    """Generate example configuration file content."""
    return """{
    "version": 1,
    "type": "s3",
    "timeout": "60s",
    "continue_on_failure": false,
    "sub": {
        "access_key_id": "$AWS_ACCESS_KEY_ID",
        "secret_access_key": "$AWS_SECRET_ACCESS_KEY",
        "region": "us-east-1",
        "bucket": "my-backups",
        "path": "backups/db.sqlite.gz"
    }
}
"""
