"""CLI argument parsing and subcommand routing."""

import argparse
import sys

from .. import __version__
from .common import add_verbosity_args
from .config_cmd import execute_config


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="autobackup",
        description="Inspect automatic backup/restore configuration files",
    )

    add_verbosity_args(parser)

    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands (use 'command --help' for details)",
    )

    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
        description="Validate or generate configuration files",
    )
    config_subs = config_parser.add_subparsers(dest="config_action")

    validate_parser = config_subs.add_parser(
        "validate",
        help="Load a configuration file and show the decoded result",
    )
    validate_parser.add_argument("file", metavar="FILE", help="Configuration file")
    validate_parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print credentials instead of masking them",
    )

    init_parser = config_subs.add_parser(
        "init",
        help="Generate an example configuration",
    )
    init_parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Write to FILE instead of stdout",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"autobackup {__version__}")
        return 0

    if args.command == "config":
        return execute_config(args)

    parser.print_help()
    return 1
