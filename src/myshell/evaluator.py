"""Turn a command line into an EvalResult."""

from __future__ import annotations

from myshell.builtins.base import Builtin
from myshell.builtins.registry import BuiltinRegistry
from myshell.errors import RedirectionError
from myshell.execution.base import CommandExecutor
from myshell.parsing.redirection import RedirectionSpec, extract_redirections
from myshell.parsing.tokenizer import tokenize
from myshell.result import EXIT_FAILURE, EXIT_NOT_FOUND, EvalResult
from myshell.util.logging import get_logger
from myshell.util.observability import ObservabilityManager, create_observability_manager


class Evaluator:
    """Evaluate command lines one at a time.

    Each evaluation tokenizes the line, extracts redirections, then runs a
    builtin or an external command. Redirection handles are closed before
    ``evaluate`` returns, whichever path produced the result.
    """

    def __init__(
        self,
        builtins: BuiltinRegistry,
        executor: CommandExecutor,
        *,
        observability: ObservabilityManager | None = None,
    ) -> None:
        """Initialize the evaluator.

        Args:
            builtins: Registry consulted before external lookup.
            executor: Executor used for anything that is not a builtin.
            observability: Optional metrics and event sink.
        """

        self._builtins = builtins
        self._executor = executor
        self._observability = observability or create_observability_manager()
        self._logger = get_logger("myshell.evaluator")

    @property
    def observability(self) -> ObservabilityManager:
        return self._observability

    def evaluate(self, line: str) -> EvalResult:
        """Evaluate a single command line.

        Args:
            line: Input line with its trailing newline already removed.

        Returns:
            EvalResult for the read-print loop.
        """

        with self._observability.track_duration("evaluation.duration"):
            result = self._evaluate(line)
        self._observability.log_event(
            "command.completed",
            {"line": line, "exit_code": result.exit_code, "should_exit": result.should_exit},
        )
        return result

    def _evaluate(self, line: str) -> EvalResult:
        tokens = tokenize(line)
        if not tokens:
            return EvalResult(f"{line.strip()}: command not found", EXIT_NOT_FOUND)

        try:
            remaining, redirections = extract_redirections(tokens)
        except RedirectionError as exc:
            self._logger.debug("Redirection failed for %r: %s", line, exc)
            self._observability.metrics.increment("evaluation.error")
            return EvalResult(str(exc), EXIT_FAILURE)

        with redirections:
            if not remaining:
                return EvalResult()
            name, args = remaining[0], remaining[1:]
            builtin = self._builtins.get(name)
            if builtin is not None:
                return self._run_builtin(builtin, args, redirections)
            self._observability.metrics.increment("evaluation.external")
            return self._executor.run(name, args, redirections)

    def _run_builtin(
        self, builtin: Builtin, args: list[str], redirections: RedirectionSpec
    ) -> EvalResult:
        self._observability.metrics.increment("evaluation.builtin")
        result = builtin.execute(args)
        stdout = redirections.stdout
        if stdout is None:
            return result
        if result.output or builtin.writes_line:
            try:
                stdout.write(result.output + "\n")
                stdout.flush()
            except OSError as exc:
                self._logger.debug("Write to redirected stdout failed: %s", exc)
                self._observability.metrics.increment("evaluation.error")
                reason = exc.strerror or str(exc)
                return EvalResult(
                    f"{builtin.name}: write error: {reason}", EXIT_FAILURE, result.should_exit
                )
        return EvalResult("", result.exit_code, result.should_exit)
