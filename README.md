# newshell

A small command shell for POSIX systems. It runs commands interactively or
from a batch file, and supports:

- several commands on one line, separated by `;`
- output redirection with `>` (`ls > listing.txt`); the file is created or
  truncated
- pipelines of up to three commands (`ls | grep py | wc -l`); any commands
  after the third are dropped
- built-in commands: `exit [status]`, `cd [dir]`, `path [dir ...]`,
  `alias [name=command]` and `myhistory [-c | -e <index>]`

Ctrl-C and Ctrl-Z are ignored by the shell itself; programs it starts get the
default handling back. When a command fails, the shell prints
`There is an error` on standard error and carries on.

## Installing

```
pip install .
```

## Running

Interactive mode shows a `Newshell> ` prompt:

```
newshell
```

Batch mode reads commands from a file, one line at a time, without a prompt:

```
newshell commands.txt
```

Giving more than one argument, or a file that cannot be opened, is an error
and the shell exits with status 1.

## Built-in commands

| Command | Effect |
| --- | --- |
| `exit [status]` | Leave the shell with the given status (default 0). |
| `cd [dir]` | Change directory; with no argument, go to `$HOME`. |
| `path [dir ...]` | Replace the directories searched for programs. The default is `/bin`; `path` with no arguments clears it. |
| `alias` | List all aliases as `name='command'`, in the order they were defined. |
| `alias name=command` | Define or replace an alias. At most 50 aliases are kept. |
| `myhistory` | List up to the 20 most recent commands, numbered from 0. |
| `myhistory -c` | Clear the history. |
| `myhistory -e <index>` | Print `Executing: <command>` and run that command again. |

Every command that is run is recorded in the history, except one-character
commands and `myhistory` itself.

Command lines are split on spaces only; there is no quoting. An alias
definition therefore takes only one word: `alias ll=ls` works, while in
`alias hi='echo hello'` only `echo` becomes the alias. Surrounding single
quotes around that word are removed.

Programs run outside a pipeline are searched for only in the directories set
with `path`. Commands inside a pipeline are looked up on the regular `PATH`,
and built-ins, aliases and `>` are not recognised there.

## What it does not do

There is no input redirection (`<`), no appending (`>>`), no background jobs
(`&`), no variables or globbing, and no quoting or escaping of arguments.

## Using it from Python

```python
import sys
from newshell.shell import Shell, ShellExit

shell = Shell(sys.stdout, sys.stderr)
shell.run_line("alias ll=ls; alias")   # prints ll='ls'
try:
    shell.run_line("exit 3")
except ShellExit as exc:
    print(exc.status)                  # 3
```

- `Shell(out, err)` writes built-in output and error messages to the given
  streams; programs it starts write to the process's real standard output.
- `Shell.execute_command(line)` runs one command; `Shell.run_line(line)` runs
  every `;`-separated command of a line and records each in the history.
- `Shell.run(stream, interactive)` reads and runs every line from a text
  stream and returns the exit status.
- `newshell.parser.parse_command(line)` returns a `ParsedCommand` with `args`
  and `outfile`, raising `ParseError` when `>` has no file after it;
  `split_commands(line)` splits on `;`.
- `newshell.aliases.AliasTable` and `newshell.history.History` hold aliases and
  history on their own.
- `newshell.executor.SearchPath` and `execute_with_redirection(args, outfile,
  search_path)` run a program with optional output redirection and return its
  exit status.
- `newshell.pipeline.split_pipeline(line)` and `handle_pipeline(line)` split
  and run a pipeline, the latter returning the exit status of each command.

## Tests

```
pip install .[test]
pytest
```