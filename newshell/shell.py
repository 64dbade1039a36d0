"""The interactive and batch command shell."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterable, Optional, Sequence, TextIO

from newshell.aliases import AliasFormatError, AliasLimitError, AliasTable
from newshell.executor import ERROR_MESSAGE, SearchPath, execute_with_redirection
from newshell.history import History, HistoryError
from newshell.parser import ParseError, parse_command, split_commands
from newshell.pipeline import handle_pipeline
from newshell.signals import setup_shell_signals

PROMPT = "Newshell> "

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class ShellExit(Exception):
    """Raised by the exit built-in to end the shell with a status."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


class Shell:
    """Runs command lines: built-ins, aliases, pipelines and external programs."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.aliases = AliasTable()
        self.history = History()
        self.search_path = SearchPath()
        self._expanding: set[str] = set()

    def _error(self, message: str = ERROR_MESSAGE) -> None:
        print(message, file=self.err)

    def _exit(self, args: Sequence[str]) -> None:
        raise ShellExit(_to_int(args[1]) if len(args) > 1 else 0)

    def _cd(self, args: Sequence[str]) -> None:
        target = args[1] if len(args) > 1 else os.environ.get("HOME")
        if target is None:
            self._error()
            return
        try:
            os.chdir(target)
        except OSError:
            self._error()

    def execute_command(self, line: str) -> None:
        """Execute one command (no ';' separators)."""
        if "|" in line:
            self.out.flush()
            handle_pipeline(line)
            return

        try:
            parsed = parse_command(line)
        except ParseError:
            self._error()
            return
        args = parsed.args
        if not args:
            return

        name = args[0]
        if name == "exit":
            self._exit(args)
        if name == "cd":
            self._cd(args)
            return
        if name.startswith("myhistory"):
            try:
                self.history.handle(line, self.execute_command, self.out)
            except HistoryError as exc:
                self._error(str(exc))
            self.history.add(line)
            return
        if name == "path":
            self.search_path.set(args)
            return
        if name == "alias":
            try:
                self.aliases.handle(args, self.out)
            except (AliasFormatError, AliasLimitError) as exc:
                self._error(str(exc))
            return

        expansion = self.aliases.get(name)
        if expansion is not None and name not in self._expanding:
            self._expanding.add(name)
            try:
                self.execute_command(expansion)
            finally:
                self._expanding.discard(name)
            return

        self.out.flush()
        execute_with_redirection(args, parsed.outfile, self.search_path)

    def run_line(self, line: str) -> None:
        """Record and execute each ';'-separated command of an input line."""
        if line.endswith("\n"):
            line = line[:-1]
        for command in split_commands(line):
            self.history.add(command)
            self.execute_command(command)

    def run(self, stream: Iterable[str], interactive: bool = False) -> int:
        """Read and run lines until end of input or exit; return the exit status."""
        lines = iter(stream)
        try:
            while True:
                if interactive:
                    self.out.write(PROMPT)
                    self.out.flush()
                line = next(lines, None)
                if line is None:
                    return 0
                self.run_line(line)
        except ShellExit as exc:
            return exc.status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the shell: batch mode with one file argument, interactive otherwise."""
    args = sys.argv[1:] if argv is None else list(argv)
    setup_shell_signals()
    shell = Shell()
    if len(args) > 1:
        shell._error()
        return 1
    if args:
        try:
            stream = open(args[0], encoding="utf-8")
        except OSError:
            shell._error()
            return 1
        with stream:
            return shell.run(stream, interactive=False)
    return shell.run(sys.stdin, interactive=True)


if __name__ == "__main__":
    sys.exit(main())