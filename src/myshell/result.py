"""Result type shared by every evaluation path."""

from __future__ import annotations

from dataclasses import dataclass

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 127
SIGNAL_EXIT_BASE = 128


@dataclass(frozen=True)
class EvalResult:
    """Outcome of evaluating one command line.

    Attributes:
        output: Text for the read-print loop to show. Empty means print nothing.
        exit_code: Command-level exit status.
        should_exit: Whether the shell itself should terminate.
    """

    output: str = ""
    exit_code: int = EXIT_SUCCESS
    should_exit: bool = False
