"""Splitting command lines into arguments and output redirection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

MAX_ARGS = 100


class ParseError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass
class ParsedCommand:
    """The arguments of one command and its optional output file."""

    args: list[str] = field(default_factory=list)
    outfile: Optional[str] = None


def parse_command(line: str) -> ParsedCommand:
    """Split a command on spaces, pulling out a '>' redirection target."""
    result = ParsedCommand()
    tokens = iter(token for token in line.split(" ") if token)
    for token in tokens:
        if len(result.args) >= MAX_ARGS - 1:
            break
        if token == ">":
            target = next(tokens, None)
            if target is None:
                raise ParseError("missing file after '>'")
            result.outfile = target
        else:
            result.args.append(token)
    return result


def split_commands(line: str) -> list[str]:
    """Split a line into the commands separated by ';', dropping empty ones."""
    return [command for command in line.split(";") if command]