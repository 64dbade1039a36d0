"""Running commands connected by the pipe operator."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import IO, Optional

from newshell.signals import setup_child_signals

MAX_COMMANDS = 3
MAX_ARGS = 100

_ARG_SEPARATORS = re.compile(r"[ \t\n]+")
_CHILD_SETUP = setup_child_signals if os.name == "posix" else None


def split_pipeline(line: str) -> list[list[str]]:
    """Split a line on '|' into at most three commands, each a list of arguments."""
    segments = [segment for segment in line.split("|") if segment][:MAX_COMMANDS]
    return [
        [arg for arg in _ARG_SEPARATORS.split(segment) if arg][: MAX_ARGS - 1]
        for segment in segments
    ]


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, ValueError, OSError):
            pass


def handle_pipeline(line: str) -> list[int]:
    """Run the commands of a pipeline, found on PATH, and return their exit statuses."""
    commands = split_pipeline(line)
    _flush_standard_streams()

    processes: list[Optional[subprocess.Popen]] = []
    previous: Optional[IO[bytes]] = None
    for position, args in enumerate(commands):
        last = position == len(commands) - 1
        if previous is not None:
            stdin = previous
        elif position > 0:
            stdin = subprocess.DEVNULL
        else:
            stdin = None

        process: Optional[subprocess.Popen] = None
        if not args:
            print("execvp: empty command", file=sys.stderr)
        else:
            try:
                process = subprocess.Popen(
                    args,
                    stdin=stdin,
                    stdout=None if last else subprocess.PIPE,
                    preexec_fn=_CHILD_SETUP,
                )
            except OSError as exc:
                print(f"execvp: {exc.strerror or exc}", file=sys.stderr)

        if previous is not None:
            previous.close()
        previous = process.stdout if process is not None and not last else None
        processes.append(process)

    return [process.wait() if process is not None else 1 for process in processes]