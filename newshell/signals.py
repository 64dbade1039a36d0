"""Signal dispositions for the shell and the programs it starts."""

from __future__ import annotations

import signal


def _job_control_signals() -> list[signal.Signals]:
    names = ("SIGINT", "SIGTSTP")
    return [getattr(signal, name) for name in names if hasattr(signal, name)]


def setup_shell_signals() -> None:
    """Make the shell ignore Ctrl-C and Ctrl-Z."""
    for signum in _job_control_signals():
        signal.signal(signum, signal.SIG_IGN)


def setup_child_signals() -> None:
    """Restore default handling of Ctrl-C and Ctrl-Z, as a started program expects."""
    for signum in _job_control_signals():
        signal.signal(signum, signal.SIG_DFL)