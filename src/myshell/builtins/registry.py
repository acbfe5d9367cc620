"""Immutable registry of builtin commands."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from myshell.builtins.base import Builtin
from myshell.builtins.commands import EchoBuiltin, ExitBuiltin, TypeBuiltin
from myshell.errors import ShellError
from myshell.execution.base import CommandResolver


class BuiltinRegistrationError(ShellError):
    """Raised when two builtins claim the same name."""


class BuiltinRegistry:
    """Read-only mapping from command name to builtin.

    The set of builtins is fixed at construction.
    """

    def __init__(self, builtins: Iterable[Builtin]) -> None:
        table: dict[str, Builtin] = {}
        for builtin in builtins:
            if builtin.name in table:
                raise BuiltinRegistrationError(f"Builtin '{builtin.name}' is already registered")
            table[builtin.name] = builtin
        self._builtins: Mapping[str, Builtin] = MappingProxyType(table)

    def get(self, name: str) -> Builtin | None:
        """Return the builtin registered under ``name``, if any."""

        return self._builtins.get(name)

    def names(self) -> frozenset[str]:
        """Return all registered builtin names."""

        return frozenset(self._builtins)

    def __contains__(self, name: object) -> bool:
        return name in self._builtins

    def __len__(self) -> int:
        return len(self._builtins)


def build_default_builtin_registry(
    resolver: CommandResolver, extra_builtins: Iterable[Builtin] = ()
) -> BuiltinRegistry:
    """Create the registry holding exit, echo, type and any extra builtins.

    The type builtin reports exactly the names registered alongside it.

    Args:
        resolver: Resolver the type builtin uses for non-builtin names.
        extra_builtins: Additional builtins to register.

    Returns:
        BuiltinRegistry with the default builtins.
    """

    handlers: list[Builtin] = [ExitBuiltin(), EchoBuiltin(), *extra_builtins]
    type_builtin = TypeBuiltin(
        resolver=resolver,
        builtin_names=frozenset(handler.name for handler in handlers) | {"type"},
    )
    return BuiltinRegistry([*handlers, type_builtin])
