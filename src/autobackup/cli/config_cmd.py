"""Config command: Configuration inspection."""

import argparse
import logging

from ..__logger__ import create_logger
from ..config import ConfigError, load_config
from ..config.loader import generate_example_config
from .common import get_log_level

logger = logging.getLogger(__name__)


def execute_config(args: argparse.Namespace) -> int:
    """Execute the config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    create_logger(get_log_level(args))

    action = getattr(args, "config_action", None)

    if action == "validate":
        return _validate_config(args)
    elif action == "init":
        return _init_config(args)
    else:
        print("Usage: autobackup config <validate|init>")
        return 1


def _validate_config(args: argparse.Namespace) -> int:
    """Validate configuration file."""
    config_path = args.file
    print(f"Validating: {config_path}")

    try:
        config, storage = load_config(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    print("")
    print("Configuration is valid.")
    for key, value in config.to_dict().items():
        print(f"  {key}: {value}")

    print(f"  sub ({config.type}):")
    for key, value in storage.to_dict(redact=not args.show_secrets).items():
        print(f"    {key}: {value}")

    return 0


def _init_config(args: argparse.Namespace) -> int:
    """Generate example configuration."""
    content = generate_example_config()

    output = getattr(args, "output", None)
    if output:
        try:
            with open(output, "w") as f:
                f.write(content)
            print(f"Example configuration written to: {output}")
        except OSError as e:
            print(f"Error writing file: {e}")
            return 1
    else:
        print(content, end="")

    return 0
