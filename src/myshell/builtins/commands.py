"""The exit, echo and type builtins."""

from __future__ import annotations

import re
from dataclasses import dataclass

from myshell.builtins.base import Builtin
from myshell.execution.base import CommandResolver
from myshell.result import EXIT_FAILURE, EXIT_SUCCESS, EXIT_USAGE, EvalResult

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_STATUS_MIN = -(2**63)
_STATUS_MAX = 2**63 - 1


@dataclass(frozen=True)
class ExitBuiltin(Builtin):
    """Request shell termination with an optional status."""

    @property
    def name(self) -> str:
        return "exit"

    def execute(self, args: list[str]) -> EvalResult:
        if not args:
            return EvalResult("", EXIT_SUCCESS, should_exit=True)
        # Only the first argument is consulted.
        raw = args[0]
        status = _parse_status(raw)
        if status is None:
            return EvalResult(
                f"exit: {raw}: numeric argument required", EXIT_USAGE, should_exit=True
            )
        return EvalResult("", status, should_exit=True)


@dataclass(frozen=True)
class EchoBuiltin(Builtin):
    """Print arguments separated by single spaces."""

    writes_line = True

    @property
    def name(self) -> str:
        return "echo"

    def execute(self, args: list[str]) -> EvalResult:
        return EvalResult(" ".join(args), EXIT_SUCCESS)


@dataclass(frozen=True)
class TypeBuiltin(Builtin):
    """Describe how a command name would be interpreted.

    Attributes:
        resolver: Resolver used for names that are not builtins.
        builtin_names: Names reported as shell builtins.
    """

    resolver: CommandResolver
    builtin_names: frozenset[str]

    @property
    def name(self) -> str:
        return "type"

    def execute(self, args: list[str]) -> EvalResult:
        if not args:
            return EvalResult("type: usage: type name", EXIT_FAILURE)
        target = args[0]
        if target in self.builtin_names:
            return EvalResult(f"{target} is a shell builtin", EXIT_SUCCESS)
        path = self.resolver.resolve(target)
        if path is not None:
            return EvalResult(f"{target} is {path}", EXIT_SUCCESS)
        return EvalResult(f"{target}: not found", EXIT_FAILURE)


def _parse_status(raw: str) -> int | None:
    """Parse a base-10 status that fits in a signed 64-bit integer."""

    if not _DECIMAL.fullmatch(raw):
        return None
    try:
        status = int(raw)
    except ValueError:
        return None
    if not _STATUS_MIN <= status <= _STATUS_MAX:
        return None
    return status
