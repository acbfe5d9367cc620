"""Commands implemented inside the shell."""

from myshell.builtins.base import Builtin
from myshell.builtins.commands import EchoBuiltin, ExitBuiltin, TypeBuiltin
from myshell.builtins.registry import (
    BuiltinRegistrationError,
    BuiltinRegistry,
    build_default_builtin_registry,
)

__all__ = [
    "Builtin",
    "BuiltinRegistrationError",
    "BuiltinRegistry",
    "EchoBuiltin",
    "ExitBuiltin",
    "TypeBuiltin",
    "build_default_builtin_registry",
]
