"""
Argument Tokenizer - Schema driven parsing of command arguments

A command declares its flags as a mapping from flag name to either a value
type (``bool``, ``int``, ``str``) or to the name of another flag it stands
in for::

    {"--next": int, "-N": "--next", "--limit": int}

``parse_args`` turns a raw argument list into a ``ParsedInvocation`` keyed by
canonical flag names. Unknown flags, missing values and values that fail
coercion raise ``ArgumentParseError``.
"""

import argparse
import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

FlagRule = Union[type, str]

# Same shape argparse uses to tell negative numbers from options
NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")

GLOBAL_FLAGS: Mapping[str, FlagRule] = MappingProxyType(
    {
        "--help": bool,
        "-h": "--help",
        "--debug": bool,
        "-d": "--debug",
        "--no-color": bool,
        "--local-config": str,
        "-A": "--local-config",
        "--global-config": str,
        "-Q": "--global-config",
        "--token": str,
        "-t": "--token",
        "--scope": str,
        "-S": "--scope",
    }
)


class ArgumentParseError(ValueError):
    """Raised when command-line arguments do not match the flag schema."""

    def __init__(self, message: str, flag: Optional[str] = None):
        super().__init__(message)
        self.flag = flag


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise ArgumentParseError(message)


class FlagSchema:
    """Immutable set of flags a command accepts, with aliases resolved."""

    def __init__(self, rules: Mapping[str, FlagRule]):
        """Validate ``rules`` and resolve every alias to its canonical flag."""
        types: Dict[str, type] = {}
        aliases: Dict[str, list] = {}

        for name, rule in rules.items():
            if not name.startswith("-") or name in ("-", "--"):
                raise ValueError(f"Invalid flag name: {name!r}")
            if isinstance(rule, str):
                continue
            if not callable(rule):
                raise ValueError(f"Flag {name} must map to a type or a flag name")
            types[name] = rule
            aliases[name] = []

        for name, rule in rules.items():
            if isinstance(rule, str):
                aliases[self._follow(rules, name)].append(name)

        self._types = MappingProxyType(types)
        self._aliases = MappingProxyType(
            {name: tuple(names) for name, names in aliases.items()}
        )
        self._rules = MappingProxyType(dict(rules))

    @staticmethod
    def _follow(rules: Mapping[str, FlagRule], name: str) -> str:
        """Follow an alias chain to the canonical flag it ends on."""
        seen = [name]
        target = rules[name]
        while isinstance(target, str):
            if target not in rules:
                raise ValueError(f"Flag {name} is an alias of unknown flag {target}")
            if target in seen:
                chain = " -> ".join(seen + [target])
                raise ValueError(f"Alias cycle in flag schema: {chain}")
            seen.append(target)
            target = rules[target]
        return seen[-1]

    @classmethod
    def with_globals(cls, rules: Mapping[str, FlagRule]) -> "FlagSchema":
        """Build a schema from the global flags plus command-specific ``rules``."""
        merged = dict(GLOBAL_FLAGS)
        merged.update(rules)
        return cls(merged)

    @property
    def types(self) -> Mapping[str, type]:
        """Canonical flag name -> value type."""
        return self._types

    @property
    def aliases(self) -> Mapping[str, Tuple[str, ...]]:
        """Canonical flag name -> names that resolve to it."""
        return self._aliases

    def canonical(self, name: str) -> str:
        """Return the canonical flag ``name`` resolves to."""
        if name not in self._rules:
            raise KeyError(name)
        return self._follow(self._rules, name)

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def build_parser(self, prog: Optional[str] = None) -> argparse.ArgumentParser:
        """Build an argparse parser that only records flags actually given."""
        parser = _RaisingArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
        for canonical, value_type in self._types.items():
            names = [canonical, *self._aliases[canonical]]
            if value_type is bool:
                parser.add_argument(
                    *names,
                    dest=canonical,
                    action="store_true",
                    default=argparse.SUPPRESS,
                )
            else:
                parser.add_argument(
                    *names,
                    dest=canonical,
                    type=value_type,
                    default=argparse.SUPPRESS,
                    metavar="VALUE",
                )
        return parser


@dataclass(frozen=True)
class ParsedInvocation:
    """Flags given on the command line, by canonical name, and positional args."""

    flags: Mapping[str, Any]
    args: Tuple[str, ...]

    def get(self, flag: str, default: Any = None) -> Any:
        return self.flags.get(flag, default)

    def __getitem__(self, flag: str) -> Any:
        return self.flags[flag]

    def __contains__(self, flag: str) -> bool:
        return flag in self.flags


def _looks_like_flag(token: str) -> bool:
    if not token.startswith("-") or len(token) == 1:
        return False
    if NEGATIVE_NUMBER.match(token):
        return False
    # argparse treats "-x y" style strings with spaces as values
    return " " not in token


def parse_args(argv: Sequence[str], schema: FlagSchema) -> ParsedInvocation:
    """
    Tokenize ``argv`` against ``schema``.

    Args:
        argv: Arguments after the program name
        schema: Flags the command accepts

    Returns:
        ParsedInvocation with coerced flag values and positional arguments

    Raises:
        ArgumentParseError: Unknown flag, missing value or bad value
    """
    argv = list(argv)

    # Everything after a bare "--" is positional
    trailing = []
    if "--" in argv:
        split = argv.index("--")
        argv, trailing = argv[:split], argv[split + 1 :]

    parser = schema.build_parser()
    namespace, extras = parser.parse_known_args(argv)

    positionals = []
    for token in extras:
        if _looks_like_flag(token):
            flag = token.split("=", 1)[0]
            raise ArgumentParseError(f"unknown or unexpected option: {flag}", flag=flag)
        positionals.append(token)
    positionals.extend(trailing)

    flags = vars(namespace)
    logger.debug(f"Parsed flags {flags} and arguments {positionals}")
    return ParsedInvocation(
        flags=MappingProxyType(dict(flags)), args=tuple(positionals)
    )
