"""Configuration models and loaders for myshell."""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

CONFIG_FILE_NAMES: tuple[str, ...] = ("myshell.yaml", "myshell.yml", "pyproject.toml")


@dataclass(frozen=True)
class ExecutorConfig:
    """Configuration for external command execution.

    Attributes:
        env: Extra environment variables merged over the shell's environment.
    """

    env: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ShellConfig:
    """Top-level configuration for the shell.

    Attributes:
        prompt: Text written before each input line.
        log_level: Logging level name for diagnostics on stderr.
        search_path: Directories searched for executables. None means ``PATH``.
        executor: Configuration for external command execution.
    """

    prompt: str = "$ "
    log_level: str = "WARNING"
    search_path: list[str] | None = None
    executor: ExecutorConfig = field(default_factory=lambda: ExecutorConfig())


def load_config(path: Path | None = None) -> ShellConfig:
    """Load shell configuration from disk.

    Args:
        path: Optional path to a configuration file or directory.

    Returns:
        Parsed ShellConfig with defaults applied when no config exists.
    """

    config_path = _resolve_config_path(path)
    if config_path is None:
        return ShellConfig()

    if config_path.suffix in {".yaml", ".yml"}:
        raw_data = _load_yaml(config_path)
    elif config_path.suffix == ".toml":
        raw_data = _load_toml(config_path)
    else:
        raise ValueError(f"Unsupported config file type: {config_path}")

    return _parse_shell_config(raw_data, base_path=config_path.parent)


def config_to_dict(config: ShellConfig) -> dict[str, Any]:
    """Serialize a ShellConfig into a JSON-compatible dictionary."""

    return {
        "prompt": config.prompt,
        "log_level": config.log_level,
        "search_path": list(config.search_path) if config.search_path is not None else None,
        "executor": {
            "env": dict(config.executor.env),
        },
    }


def update_log_level(config: ShellConfig, log_level: str) -> ShellConfig:
    """Return a config copy with an updated log level."""

    return replace(config, log_level=log_level)


def _resolve_config_path(path: Path | None) -> Path | None:
    candidate_paths: list[Path] = []
    if path is None:
        candidate_paths.extend(Path(name) for name in CONFIG_FILE_NAMES)
    elif path.is_dir():
        candidate_paths.extend(path / name for name in CONFIG_FILE_NAMES)
    else:
        candidate_paths.append(path)

    for candidate in candidate_paths:
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    if path.name == "pyproject.toml":
        tool_config = data.get("tool", {}).get("myshell", {})
        if not isinstance(tool_config, dict):
            raise ValueError("tool.myshell must be a mapping.")
        return tool_config
    return data


def _load_yaml(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if data is not None:
        if not isinstance(data, dict):
            raise ValueError("YAML configuration must be a mapping.")
        return data
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as exc:
        raise RuntimeError(
            "PyYAML is required to parse non-JSON YAML configuration files."
        ) from exc
    parsed = yaml.safe_load(text)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("YAML configuration must be a mapping.")
    return parsed


def _parse_shell_config(raw_data: dict[str, Any], base_path: Path) -> ShellConfig:
    return ShellConfig(
        prompt=str(raw_data.get("prompt", "$ ")),
        log_level=str(raw_data.get("log_level", "WARNING")),
        search_path=_parse_search_path(raw_data.get("search_path"), base_path),
        executor=_parse_executor_config(raw_data.get("executor", {})),
    )


def _parse_search_path(raw: Any, base_path: Path) -> list[str] | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = [entry for entry in raw.split(os.pathsep) if entry]
    if not isinstance(raw, list):
        raise ValueError("search_path must be a list of directories.")
    directories: list[str] = []
    for entry in raw:
        directory = Path(str(entry)).expanduser()
        if not directory.is_absolute():
            directory = (base_path / directory).resolve()
        directories.append(str(directory))
    return directories


def _parse_executor_config(raw: Any) -> ExecutorConfig:
    if not isinstance(raw, dict):
        return ExecutorConfig()
    env = raw.get("env", {})
    env_map: dict[str, str] = {}
    if isinstance(env, dict):
        env_map = {str(key): str(value) for key, value in env.items()}
    return ExecutorConfig(env=env_map)
