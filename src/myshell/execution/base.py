"""Execution base types and interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO

from myshell.parsing.redirection import RedirectionSpec
from myshell.result import EvalResult


@dataclass(frozen=True)
class ExternalCommand:
    """A resolved external command ready to be spawned.

    Attributes:
        path: Absolute path of the executable.
        argv: Argument vector, starting with the command name as typed.
        stdin: Redirected input handle, or None to inherit the shell's stdin.
        stdout: Redirected output handle, or None to inherit the shell's stdout.
        stderr: Redirected error handle, or None to inherit the shell's stderr.
    """

    path: str
    argv: list[str]
    stdin: IO[str] | None = None
    stdout: IO[str] | None = None
    stderr: IO[str] | None = None


class CommandResolver(ABC):
    """Locates executables by name."""

    @abstractmethod
    def resolve(self, name: str) -> str | None:
        """Return the absolute path of ``name`` or None when it cannot be found."""


class CommandExecutor(ABC):
    """Abstract base class for external command execution."""

    @abstractmethod
    def run(self, name: str, args: list[str], redirections: RedirectionSpec) -> EvalResult:
        """Run an external command and wait for it to finish.

        Args:
            name: Command name as typed by the user.
            args: Arguments following the command name.
            redirections: Stream bindings for the child process.

        Returns:
            EvalResult carrying the child's exit status. Output is always empty
            since the child writes to its own bound streams.
        """
