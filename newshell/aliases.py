"""Named command aliases for the shell."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

MAX_ALIASES = 50


class AliasLimitError(Exception):
    """Raised when a new alias would exceed the table's capacity."""


class AliasFormatError(ValueError):
    """Raised when an alias definition is not of the form name=command."""


class AliasTable:
    """A bounded, insertion-ordered mapping of alias names to commands."""

    def __init__(self, limit: int = MAX_ALIASES) -> None:
        self.limit = limit
        self._aliases: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def set(self, name: str, command: str) -> None:
        """Define or replace an alias."""
        if name not in self._aliases and len(self._aliases) >= self.limit:
            raise AliasLimitError("Alias limit reached")
        self._aliases[name] = command

    def get(self, name: str) -> Optional[str]:
        """Return the command for an alias, or None if it is not defined."""
        return self._aliases.get(name)

    def listing(self) -> list[str]:
        """Return every alias formatted as name='command', in definition order."""
        return [f"{name}='{command}'" for name, command in self._aliases.items()]

    def handle(self, args: Sequence[str], out: Optional[TextIO] = None) -> None:
        """Run the alias built-in: list aliases, or define one from args[1]."""
        out = out if out is not None else sys.stdout
        if len(args) < 2:
            for line in self.listing():
                print(line, file=out)
            return

        name, sep, command = args[1].partition("=")
        if not sep:
            raise AliasFormatError("Invalid alias format")
        if command.startswith("'"):
            command = command[1:]
        if command.endswith("'"):
            command = command[:-1]
        self.set(name, command)