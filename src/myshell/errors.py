"""Exception types raised while evaluating a command line."""

from __future__ import annotations


class ShellError(RuntimeError):
    """Base class for recoverable shell errors."""


class RedirectionError(ShellError):
    """Raised when a redirection cannot be applied."""


class RedirectionSyntaxError(RedirectionError):
    """Raised when a redirection operator has no filename after it."""

    def __init__(self, operator: str) -> None:
        super().__init__(f"syntax error: expected filename after '{operator}'")
        self.operator = operator


class RedirectionOpenError(RedirectionError):
    """Raised when a redirection target cannot be opened."""

    def __init__(self, path: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.cause = cause
