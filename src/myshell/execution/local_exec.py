"""Local child-process execution."""

from __future__ import annotations

import os
import subprocess
import time

from myshell.execution.base import CommandExecutor, CommandResolver, ExternalCommand
from myshell.parsing.redirection import RedirectionSpec
from myshell.result import (
    EXIT_FAILURE,
    EXIT_NOT_FOUND,
    SIGNAL_EXIT_BASE,
    EvalResult,
)
from myshell.util.logging import get_logger


class LocalExecutor(CommandExecutor):
    """Spawn external commands on the local host and wait for them."""

    def __init__(self, resolver: CommandResolver, env: dict[str, str] | None = None) -> None:
        """Initialize the executor.

        Args:
            resolver: Resolver used to locate executables.
            env: Optional environment variables merged over ``os.environ``.
        """

        self._resolver = resolver
        self._env = dict(env or {})
        self._logger = get_logger("myshell.execution.local")

    def run(self, name: str, args: list[str], redirections: RedirectionSpec) -> EvalResult:
        path = self._resolver.resolve(name)
        if path is None:
            self._logger.debug("Command '%s' not found on search path.", name)
            return EvalResult(f"{name}: command not found", EXIT_NOT_FOUND)

        command = ExternalCommand(
            path=path,
            argv=[name, *args],
            stdin=redirections.stdin,
            stdout=redirections.stdout,
            stderr=redirections.stderr,
        )
        return self.spawn(command)

    def spawn(self, command: ExternalCommand) -> EvalResult:
        """Run a resolved command, blocking until it terminates.

        Streams left as None are inherited from the shell.

        Args:
            command: The resolved command and its stream bindings.

        Returns:
            EvalResult with the child's exit code. A child killed by signal N
            reports 128 + N. Spawn failures report code 1 with a message.
        """

        merged_env = os.environ.copy()
        if self._env:
            merged_env.update(self._env)

        start = time.monotonic()
        try:
            completed = subprocess.run(
                command.argv,
                executable=command.path,
                stdin=command.stdin,
                stdout=command.stdout,
                stderr=command.stderr,
                env=merged_env,
                check=False,
            )
        except OSError as exc:
            self._logger.warning("Failed to execute '%s': %s", command.path, exc)
            reason = exc.strerror or str(exc)
            return EvalResult(f"{command.argv[0]}: {reason}", EXIT_FAILURE)
        duration = time.monotonic() - start

        exit_code = completed.returncode
        if exit_code < 0:
            exit_code = SIGNAL_EXIT_BASE - exit_code
        self._logger.debug(
            "Command '%s' exited with %d after %.3fs.", command.path, exit_code, duration
        )
        return EvalResult("", exit_code)
