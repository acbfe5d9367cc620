"""Application wiring for CLI-friendly shell sessions."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from myshell.builtins.registry import build_default_builtin_registry
from myshell.config import ShellConfig, config_to_dict, load_config
from myshell.evaluator import Evaluator
from myshell.execution.local_exec import LocalExecutor
from myshell.execution.resolver import PathResolver
from myshell.repl import run_repl
from myshell.result import EvalResult
from myshell.util.logging import get_logger
from myshell.util.observability import ObservabilityManager, create_observability_manager


class AppConfigError(RuntimeError):
    """Raised when configuration or runtime setup fails."""


_LOGGER = get_logger("myshell.app")


def initialize_config(directory: Path) -> Path:
    """Create a default configuration file in ``directory``.

    Args:
        directory: Directory where the config should be written.

    Returns:
        Path to the generated configuration file.

    Raises:
        AppConfigError: If the config file already exists.
    """

    directory = directory.resolve()
    config_path = directory / "myshell.yaml"
    if config_path.exists():
        raise AppConfigError(
            f"Config file already exists at {config_path}. Remove it or choose another "
            "directory."
        )
    config_path.write_text(json.dumps(config_to_dict(ShellConfig()), indent=2), encoding="utf-8")
    _LOGGER.info("Initialized configuration at %s", config_path)
    return config_path


def build_evaluator(
    config: ShellConfig, *, observability: ObservabilityManager | None = None
) -> Evaluator:
    """Construct an evaluator with the default builtins and local execution.

    Args:
        config: Shell configuration.
        observability: Optional metrics and event sink.

    Returns:
        A ready-to-use Evaluator.
    """

    resolver = PathResolver(config.search_path)
    builtins = build_default_builtin_registry(resolver)
    executor = LocalExecutor(resolver, env=config.executor.env)
    return Evaluator(
        builtins,
        executor,
        observability=observability or create_observability_manager(),
    )


def load_shell_config(path: Path | None = None) -> ShellConfig:
    """Load configuration, wrapping loader failures in AppConfigError."""

    try:
        return load_config(path)
    except (OSError, ValueError, RuntimeError) as exc:
        raise AppConfigError(f"Failed to load configuration: {exc}") from exc


def run_shell(
    config: ShellConfig,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run an interactive session until exit or end of input.

    Args:
        config: Shell configuration.
        stdin: Input stream. Defaults to ``sys.stdin``.
        stdout: Output stream. Defaults to ``sys.stdout``.

    Returns:
        The shell's exit status.
    """

    evaluator = build_evaluator(config)
    status = run_repl(
        evaluator,
        stdin or sys.stdin,
        stdout or sys.stdout,
        prompt=config.prompt,
    )
    _LOGGER.debug("Session metrics: %s", evaluator.observability.metrics.snapshot())
    return status


def evaluate_line(line: str, config: ShellConfig) -> EvalResult:
    """Evaluate a single command line with a freshly configured evaluator."""

    return build_evaluator(config).evaluate(line)
