"""
Command-line interface components.

This package contains the argument tokenizer, the subcommand resolver and
the ``domains`` entry point (``domains_cli.cli.main``).
"""

from .args import ArgumentParseError, FlagSchema, ParsedInvocation, parse_args
from .subcommand import Resolution, SubcommandTable, resolve_subcommand

__all__ = [
    "ArgumentParseError",
    "FlagSchema",
    "ParsedInvocation",
    "Resolution",
    "SubcommandTable",
    "parse_args",
    "resolve_subcommand",
]
