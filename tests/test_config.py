from pathlib import Path

import pytest

from myshell.app import AppConfigError, initialize_config, load_shell_config
from myshell.config import ShellConfig, config_to_dict, load_config, update_log_level


def test_shell_config_defaults() -> None:
    config = ShellConfig()
    assert config.prompt == "$ "
    assert config.log_level == "WARNING"
    assert config.search_path is None
    assert config.executor.env == {}


def test_load_config_without_files_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == ShellConfig()


def test_load_config_from_pyproject(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        """
[tool.myshell]
prompt = "% "
log_level = "DEBUG"
search_path = ["bin", "/usr/bin"]

[tool.myshell.executor.env]
GREETING = "hello"
""",
        encoding="utf-8",
    )

    config = load_config(pyproject)

    assert config.prompt == "% "
    assert config.log_level == "DEBUG"
    assert config.search_path == [str((tmp_path / "bin").resolve()), "/usr/bin"]
    assert config.executor.env == {"GREETING": "hello"}


def test_load_config_prefers_yaml_in_directory(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.myshell]\nprompt = "toml> "\n', encoding="utf-8")
    (tmp_path / "myshell.yaml").write_text('{"prompt": "json> "}', encoding="utf-8")

    assert load_config(tmp_path).prompt == "json> "


def test_load_config_from_non_json_yaml(tmp_path: Path) -> None:
    pytest.importorskip("yaml")
    config_path = tmp_path / "myshell.yaml"
    config_path.write_text(
        """
prompt: "yaml> "
search_path:
  - /opt/tools
executor:
  env:
    MODE: test
""",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.prompt == "yaml> "
    assert config.search_path == ["/opt/tools"]
    assert config.executor.env == {"MODE": "test"}


def test_load_config_rejects_unknown_file_type(tmp_path: Path) -> None:
    config_path = tmp_path / "myshell.ini"
    config_path.write_text("[myshell]\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_load_shell_config_wraps_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "myshell.yaml"
    config_path.write_text('{"search_path": 3}', encoding="utf-8")

    with pytest.raises(AppConfigError):
        load_shell_config(config_path)


def test_initialize_config_round_trips_defaults(tmp_path: Path) -> None:
    config_path = initialize_config(tmp_path)

    assert config_path == (tmp_path / "myshell.yaml").resolve()
    assert load_config(config_path) == ShellConfig()
    assert config_to_dict(load_config(tmp_path))["prompt"] == "$ "

    with pytest.raises(AppConfigError):
        initialize_config(tmp_path)


def test_update_log_level_returns_copy() -> None:
    config = ShellConfig()

    updated = update_log_level(config, "DEBUG")

    assert updated.log_level == "DEBUG"
    assert config.log_level == "WARNING"
