"""Raw configuration file reading."""

import logging
from pathlib import Path

from .envsubst import substitute_env
from .errors import ConfigNotFoundError, ConfigReadError

logger = logging.getLogger(__name__)


def read_config_file(path: Path | str) -> bytes:
    """Read a configuration file and expand environment references.

    The content is not parsed, so any file format works here.

    Args:
        path: Path to configuration file

    Returns:
        File content with ``$NAME`` / ``${NAME}`` references substituted

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigReadError: If the file exists but cannot be read
    """
    path = Path(path)

    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError as e:
        raise ConfigNotFoundError(e.errno, "Config file not found", str(path)) from e
    except OSError as e:
        raise ConfigReadError(
            e.errno, f"Cannot read config file: {e.strerror}", str(path)
        ) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return substitute_env(data)
