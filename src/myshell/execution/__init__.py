"""External command execution package."""

from myshell.execution.base import CommandExecutor, CommandResolver, ExternalCommand
from myshell.execution.local_exec import LocalExecutor
from myshell.execution.resolver import PathResolver

__all__ = [
    "CommandExecutor",
    "CommandResolver",
    "ExternalCommand",
    "LocalExecutor",
    "PathResolver",
]
