"""
Subcommand Resolver

Maps the leading positional argument of a command to a canonical
subcommand using a table of accepted aliases.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class SubcommandTable:
    """Canonical subcommand -> aliases. An alias may belong to one subcommand only."""

    def __init__(self, config: Mapping[str, Iterable[str]]):
        lookup = {}
        for subcommand, aliases in config.items():
            for alias in aliases:
                if alias in lookup and lookup[alias] != subcommand:
                    raise ValueError(
                        f"Alias '{alias}' is used by both "
                        f"'{lookup[alias]}' and '{subcommand}'"
                    )
                lookup[alias] = subcommand

        self._aliases = MappingProxyType(
            {subcommand: frozenset(aliases) for subcommand, aliases in config.items()}
        )
        self._lookup = MappingProxyType(lookup)

    @property
    def subcommands(self) -> Tuple[str, ...]:
        return tuple(self._aliases)

    def aliases(self, subcommand: str) -> frozenset:
        return self._aliases[subcommand]

    def lookup(self, token: str) -> Optional[str]:
        """Return the subcommand ``token`` is an alias of, or None."""
        return self._lookup.get(token)


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of subcommand resolution.

    ``subcommand`` is None when the first argument is not a known alias
    (or there are no arguments). In that case ``args`` holds every
    positional argument, so the default handler sees them untouched.
    """

    subcommand: Optional[str]
    args: Tuple[str, ...]

    @property
    def matched(self) -> bool:
        return self.subcommand is not None


def resolve_subcommand(args: Sequence[str], table: SubcommandTable) -> Resolution:
    """Resolve the first of ``args`` against ``table``."""
    args = tuple(args)
    if not args:
        return Resolution(subcommand=None, args=())

    subcommand = table.lookup(args[0])
    if subcommand is None:
        logger.debug(f"'{args[0]}' is not a subcommand")
        return Resolution(subcommand=None, args=args)

    return Resolution(subcommand=subcommand, args=args[1:])
