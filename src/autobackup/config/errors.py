"""Exception hierarchy for configuration loading.

Every failure raised while loading a configuration derives from
ConfigError, so callers that only care about "the config is unusable"
can catch that. The subclasses let callers tell the failure kinds apart
without looking at message text.
"""


class ConfigError(Exception):
    """Configuration loading or validation error."""

    pass


class ConfigReadError(ConfigError, OSError):
    """The configuration file could not be read."""

    pass


class ConfigNotFoundError(ConfigReadError, FileNotFoundError):
    """The configuration file does not exist."""

    pass


class ConfigParseError(ConfigError):
    """The configuration is not well-formed JSON or has wrongly typed fields."""

    pass


class InvalidVersionError(ConfigError):
    """The configuration declares an unsupported schema version."""

    def __init__(self, version):
        super().__init__(f"Invalid config version: {version!r}")
        self.version = version


class UnsupportedStorageTypeError(ConfigError):
    """The configuration names a storage type with no registered decoder."""

    def __init__(self, storage_type):
        super().__init__(f"Unsupported storage type: {storage_type!r}")
        self.storage_type = storage_type


class SubConfigError(ConfigError):
    """The backend-specific 'sub' payload could not be decoded."""

    def __init__(self, storage_type: str, message: str):
        super().__init__(f"Invalid '{storage_type}' sub-configuration: {message}")
        self.storage_type = storage_type
