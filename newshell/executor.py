"""Program lookup along the shell's search path and execution with redirection."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable, Optional, Sequence

from newshell.signals import setup_child_signals

DEFAULT_PATH = ("/bin",)
ERROR_MESSAGE = "There is an error"

_CHILD_SETUP = setup_child_signals if os.name == "posix" else None


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, ValueError, OSError):
            pass


class SearchPath:
    """The ordered directories searched for programs to run."""

    def __init__(self, directories: Iterable[str] = DEFAULT_PATH) -> None:
        self.directories = list(directories)

    def set(self, args: Sequence[str]) -> None:
        """Replace the directories with those given after the command name."""
        self.directories = list(args[1:])

    def resolve(self, program: str) -> Optional[str]:
        """Return the first executable directory/program, or None."""
        for directory in self.directories:
            candidate = f"{directory}/{program}"
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
        return None


def execute_with_redirection(
    args: Sequence[str],
    outfile: Optional[str] = None,
    search_path: Optional[SearchPath] = None,
) -> int:
    """Run a program found on the search path, optionally writing its output to outfile.

    Returns the program's exit status, or 1 when it could not be started.
    """
    if search_path is None:
        search_path = SearchPath()
    _flush_standard_streams()

    fd: Optional[int] = None
    if outfile is not None:
        try:
            fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError as exc:
            print(f"open: {exc.strerror or exc}", file=sys.stderr)
            return 1

    try:
        program = search_path.resolve(args[0]) if args else None
        if program is None:
            print(ERROR_MESSAGE, file=sys.stderr)
            return 1
        try:
            completed = subprocess.run(
                list(args),
                executable=program,
                stdout=fd,
                preexec_fn=_CHILD_SETUP,
            )
        except OSError:
            print(ERROR_MESSAGE, file=sys.stderr)
            return 1
        return completed.returncode
    finally:
        if fd is not None:
            os.close(fd)