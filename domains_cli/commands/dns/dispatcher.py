"""
DNS command - Dispatch for `domains dns`

Parses the command's arguments, shows help when asked, and hands the
remaining arguments to the add, import, rm or ls handler.
"""

import logging
from typing import Sequence

from ...cli.args import ArgumentParseError, FlagSchema, parse_args
from ...cli.subcommand import SubcommandTable, resolve_subcommand
from ...providers.dns_client import DNSClient
from ...utils import output
from .add import add
from .help import print_help
from .import_zone import import_zone
from .ls import ls
from .rm import rm

logger = logging.getLogger(__name__)

FLAG_SCHEMA = FlagSchema.with_globals(
    {
        "--next": int,
        "-N": "--next",
        "--limit": int,
    }
)

COMMAND_CONFIG = SubcommandTable(
    {
        "add": ["add"],
        "import": ["import"],
        "ls": ["ls", "list"],
        "rm": ["rm", "remove"],
    }
)


def main(client: DNSClient, argv: Sequence[str]) -> int:
    """
    Run the `dns` command.

    Args:
        client: Client the handlers use to reach the DNS provider
        argv: Arguments after the program name; the first positional one is
            the command name (``dns``) and is skipped

    Returns:
        Exit status: the handler's, 1 for invalid arguments, 2 after help
    """
    try:
        parsed = parse_args(argv, FLAG_SCHEMA)
    except ArgumentParseError as e:
        output.handle_error(e)
        return 1

    if parsed.get("--help"):
        print_help()
        return 2

    resolution = resolve_subcommand(parsed.args[1:], COMMAND_CONFIG)
    logger.debug(f"Dispatching dns subcommand {resolution.subcommand} with {resolution.args}")

    if resolution.subcommand == "add":
        return add(client, parsed, resolution.args)
    elif resolution.subcommand == "import":
        return import_zone(client, parsed, resolution.args)
    elif resolution.subcommand == "rm":
        return rm(client, parsed, resolution.args)
    elif resolution.subcommand == "ls":
        return ls(client, parsed, resolution.args)

    # Unmatched: `dns` alone lists everything, `dns <domain>` lists that domain
    return ls(client, parsed, resolution.args)
