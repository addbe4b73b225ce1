"""Configuration schema definitions using dataclasses.

Defines the top-level configuration envelope shared by every storage
backend and one structured type per supported backend.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

from .duration import format_duration

SUPPORTED_VERSION = 1
DEFAULT_TIMEOUT = timedelta(seconds=30)

REDACTED = "********"


class StorageType(str, Enum):
    """Storage backends a configuration can select."""

    S3 = "s3"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class S3Config:
    """S3-compatible object store configuration.

    Attributes:
        access_key_id: Access key ID
        secret_access_key: Secret access key
        region: Bucket region (e.g., "us-west-2")
        bucket: Bucket name
        path: Object key (or key prefix) inside the bucket
        endpoint: Custom endpoint for S3-compatible stores (empty for AWS)
        force_path_style: Use path-style rather than virtual-host addressing
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)
    region: str
    bucket: str
    path: str
    endpoint: str = ""
    force_path_style: bool = False

    def to_dict(self, redact: bool = True) -> dict[str, Any]:
        """Render in the on-disk 'sub' shape, hiding credentials by default."""
        data: dict[str, Any] = {
            "access_key_id": REDACTED if redact else self.access_key_id,
            "secret_access_key": REDACTED if redact else self.secret_access_key,
            "region": self.region,
            "bucket": self.bucket,
            "path": self.path,
        }
        if self.endpoint:
            data["endpoint"] = self.endpoint
        if self.force_path_style:
            data["force_path_style"] = True
        return data


# Union of all backend configurations; grows with StorageType.
StorageConfig = Union[S3Config]


def _freeze(value: Any) -> Any:
    """Return a read-only deep copy of a decoded JSON value."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class Config:
    """Top-level configuration envelope.

    Attributes:
        version: Schema version, always SUPPORTED_VERSION once validated
        type: Storage backend that 'sub' is decoded for
        timeout: Time limit for a single backup or restore operation
        continue_on_failure: Whether the service keeps starting up if the
            operation fails
        sub: Raw backend payload, deeply read-only (objects become
            mappings, arrays become tuples)
    """

    version: int
    type: StorageType
    timeout: timedelta = DEFAULT_TIMEOUT
    continue_on_failure: bool = False
    sub: Mapping[str, Any] = field(
        default_factory=dict, repr=False, compare=False
    )

    def __post_init__(self):
        object.__setattr__(self, "sub", _freeze(self.sub))

    def to_dict(self) -> dict[str, Any]:
        """Render the envelope fields in the on-disk shape, without 'sub'."""
        return {
            "version": self.version,
            "type": str(self.type),
            "timeout": format_duration(self.timeout),
            "continue_on_failure": self.continue_on_failure,
        }
