"""Builtin command abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from myshell.result import EvalResult


class Builtin(ABC):
    """Base class for commands implemented inside the shell.

    ``writes_line`` marks builtins whose output is always a line, so empty
    output still writes a line break when stdout is redirected.
    """

    writes_line = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the command name the builtin answers to."""

    @abstractmethod
    def execute(self, args: list[str]) -> EvalResult:
        """Run the builtin with the arguments following its name.

        Args:
            args: Command arguments, redirections already removed.

        Returns:
            EvalResult with the builtin's output, exit code and termination flag.
        """
