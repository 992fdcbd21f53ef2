#!/usr/bin/env python3
"""
domains - Command Line Interface

Main entry point. Reads the global options every command shares, loads the
configuration, sets up logging and output, and runs the requested command.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .. import PACKAGE_NAME, __version__
from ..commands import COMMANDS
from ..core.config import ConfigError, apply_overrides, config_logger, load_config
from ..providers.dns_client import DNSClient
from ..utils import output
from .args import ArgumentParseError, GLOBAL_FLAGS, FlagSchema

logger = logging.getLogger(__name__)

GLOBAL_SCHEMA = FlagSchema(GLOBAL_FLAGS)


def _parse_global_options(argv: Sequence[str]):
    """Pick the global options out of ``argv``, leaving command flags alone."""
    parser = GLOBAL_SCHEMA.build_parser(prog=PACKAGE_NAME)
    namespace, remaining = parser.parse_known_args(list(argv))
    return vars(namespace), remaining


def usage() -> str:
    commands = ", ".join(sorted(COMMANDS))
    return (
        f"\n  [bold]{PACKAGE_NAME}[/bold] {__version__}\n\n"
        f"  [dim]Usage:[/dim] {PACKAGE_NAME} <command> \\[options]\n\n"
        f"  [dim]Commands:[/dim] {commands}\n\n"
        f"  Run `{PACKAGE_NAME} <command> --help` for help on a command.\n"
    )


def run(argv: Optional[List[str]] = None, client: Optional[DNSClient] = None) -> int:
    """
    Run the command named in ``argv`` and return its exit status.

    Args:
        argv: Arguments after the program name (defaults to ``sys.argv[1:]``)
        client: Client to use instead of one built from configuration

    Returns:
        Process exit status
    """
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        options, remaining = _parse_global_options(argv)
    except ArgumentParseError as e:
        output.handle_error(e)
        return 1

    output.configure_console(no_color=options.get("--no-color", False))

    command = next((arg for arg in remaining if arg in COMMANDS), None)
    if command is None:
        output.show(usage())
        unknown = [arg for arg in remaining if not arg.startswith("-")]
        if unknown:
            output.error_message(f"Unknown command: {unknown[0]}")
            return 1
        return 2

    if client is None:
        try:
            config = load_config(
                options.get("--global-config"), options.get("--local-config")
            )
        except ConfigError as e:
            output.handle_error(e)
            return 1

        apply_overrides(config, token=options.get("--token"), scope=options.get("--scope"))
        config_logger(config, debug=options.get("--debug", False))
        client = DNSClient(config)

    logger.debug(f"Running command '{command}' with {argv}")
    return COMMANDS[command](client, argv)


def main():
    """Main CLI entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
