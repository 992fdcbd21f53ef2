"""
The `dns` command.

Subcommands: add, import, ls (list), rm (remove). Anything else lists.
"""

from .dispatcher import COMMAND_CONFIG, FLAG_SCHEMA, main

__all__ = ["COMMAND_CONFIG", "FLAG_SCHEMA", "main"]
