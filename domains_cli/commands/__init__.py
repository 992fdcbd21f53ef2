"""
Commands available from the command line.

Each command is called as ``command(client, argv)`` and returns the process
exit status.
"""

from . import dns

COMMANDS = {
    "dns": dns.main,
}

__all__ = ["COMMANDS"]
