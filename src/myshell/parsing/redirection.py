"""Extraction of redirection operators from a token sequence."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import IO, Final

from myshell.errors import RedirectionOpenError, RedirectionSyntaxError
from myshell.util.logging import get_logger

STDIN: Final[str] = "stdin"
STDOUT: Final[str] = "stdout"
STDERR: Final[str] = "stderr"


@dataclass(frozen=True)
class RedirectionOperator:
    """A recognized redirection operator.

    Attributes:
        stream: Stream the operator rebinds.
        mode: Mode passed to ``open`` for the target file.
    """

    stream: str
    mode: str


OPERATORS: Final[dict[str, RedirectionOperator]] = {
    ">": RedirectionOperator(STDOUT, "w"),
    "1>": RedirectionOperator(STDOUT, "w"),
    ">>": RedirectionOperator(STDOUT, "a"),
    "1>>": RedirectionOperator(STDOUT, "a"),
    "2>": RedirectionOperator(STDERR, "w"),
    "2>>": RedirectionOperator(STDERR, "a"),
    "<": RedirectionOperator(STDIN, "r"),
}

_LOGGER = get_logger("myshell.parsing.redirection")


class RedirectionSpec:
    """Owned file handles for the standard streams of one evaluation.

    Instances are context managers; leaving the ``with`` block closes every
    handle it still holds. ``close`` is idempotent.
    """

    def __init__(self) -> None:
        self._handles: dict[str, IO[str]] = {}

    @property
    def stdin(self) -> IO[str] | None:
        return self._handles.get(STDIN)

    @property
    def stdout(self) -> IO[str] | None:
        return self._handles.get(STDOUT)

    @property
    def stderr(self) -> IO[str] | None:
        return self._handles.get(STDERR)

    def handles(self) -> list[IO[str]]:
        """Return the handles currently held."""

        return list(self._handles.values())

    def bind(self, stream: str, handle: IO[str]) -> None:
        """Bind ``handle`` to ``stream``, closing any handle it replaces."""

        previous = self._handles.get(stream)
        self._handles[stream] = handle
        if previous is not None:
            previous.close()

    def close(self) -> None:
        """Close all held handles.

        Every handle is closed even if an earlier one fails to flush; such
        failures are logged rather than raised.
        """

        handles, self._handles = self._handles, {}
        for stream, handle in handles.items():
            try:
                handle.close()
            except OSError as exc:
                _LOGGER.warning("Failed to close redirected %s: %s", stream, exc)

    def __enter__(self) -> RedirectionSpec:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def extract_redirections(tokens: list[str]) -> tuple[list[str], RedirectionSpec]:
    """Remove redirection operators from ``tokens`` and open their targets.

    Operators are scanned left to right. Each consumes the token after it as a
    filename; a later operator for the same stream replaces an earlier one.

    Args:
        tokens: Tokens produced by the tokenizer.

    Returns:
        The remaining command tokens and a RedirectionSpec owning the opened handles.

    Raises:
        RedirectionSyntaxError: If an operator is the last token.
        RedirectionOpenError: If a target file cannot be opened. Handles
            opened earlier in the scan are closed first.
    """

    remaining: list[str] = []
    spec = RedirectionSpec()
    index = 0
    try:
        while index < len(tokens):
            token = tokens[index]
            operator = OPERATORS.get(token)
            if operator is None:
                remaining.append(token)
                index += 1
                continue
            if index + 1 >= len(tokens):
                raise RedirectionSyntaxError(token)
            path = tokens[index + 1]
            spec.bind(operator.stream, _open_target(path, operator.mode))
            _LOGGER.debug("Redirected %s to '%s' (mode %s).", operator.stream, path, operator.mode)
            index += 2
    except BaseException:
        spec.close()
        raise
    return remaining, spec


def _open_target(path: str, mode: str) -> IO[str]:
    try:
        return open(path, mode, encoding="utf-8")
    except OSError as exc:
        raise RedirectionOpenError(path, exc) from exc
