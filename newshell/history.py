"""Bounded command history with the myhistory built-in."""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import Callable, Optional, TextIO

MAX_HISTORY = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class HistoryError(Exception):
    """Raised for a bad history index or a malformed myhistory command."""


def _to_int(text: str) -> int:
    """Read a leading integer from text, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class History:
    """Keeps the most recent command lines, oldest first."""

    def __init__(self, capacity: int = MAX_HISTORY) -> None:
        self.capacity = capacity
        self._lines: deque[str] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, line: Optional[str]) -> None:
        """Record a line, skipping trivial lines and myhistory commands."""
        if not line or len(line) <= 1 or line.startswith("myhistory"):
            return
        self._lines.append(line)

    def entries(self) -> list[str]:
        """Return the recorded lines, oldest first."""
        return list(self._lines)

    def show(self, out: Optional[TextIO] = None) -> None:
        """Write the numbered history."""
        out = out if out is not None else sys.stdout
        for number, line in enumerate(self._lines):
            print(f"{number}: {line}", file=out)

    def clear(self) -> None:
        """Forget every recorded line."""
        self._lines.clear()

    def execute(
        self,
        index: int,
        reexecute: Callable[[str], object],
        out: Optional[TextIO] = None,
    ) -> None:
        """Announce and re-run the entry at index."""
        if index < 0 or index >= len(self._lines):
            raise HistoryError("Invalid history index")
        out = out if out is not None else sys.stdout
        line = self._lines[index]
        print(f"Executing: {line}", file=out)
        reexecute(line)

    def handle(
        self,
        line: str,
        reexecute: Callable[[str], object],
        out: Optional[TextIO] = None,
    ) -> None:
        """Run the myhistory built-in for a full command line."""
        tokens = line.replace("\t", " ").split()
        option = tokens[1] if len(tokens) > 1 else None

        if option is None:
            self.show(out)
        elif option == "-c":
            self.clear()
        elif option == "-e":
            if len(tokens) < 3:
                raise HistoryError("Usage: myhistory -e <index>")
            self.execute(_to_int(tokens[2]), reexecute, out)
        else:
            raise HistoryError("Invalid myhistory usage")