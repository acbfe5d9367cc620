from __future__ import annotations

from dataclasses import dataclass

import pytest

from myshell.builtins import (
    Builtin,
    BuiltinRegistrationError,
    BuiltinRegistry,
    EchoBuiltin,
    ExitBuiltin,
    build_default_builtin_registry,
)
from myshell.execution.base import CommandResolver
from myshell.result import EvalResult


class FakeResolver(CommandResolver):
    def __init__(self, paths: dict[str, str] | None = None) -> None:
        self._paths = dict(paths or {})
        self.lookups: list[str] = []

    def resolve(self, name: str) -> str | None:
        self.lookups.append(name)
        return self._paths.get(name)


def test_default_registry_contains_exit_echo_type() -> None:
    registry = build_default_builtin_registry(FakeResolver())

    assert registry.names() == frozenset({"exit", "echo", "type"})
    assert "echo" in registry
    assert "ls" not in registry
    assert registry.get("ls") is None
    assert len(registry) == 3


def test_registry_rejects_duplicate_names() -> None:
    with pytest.raises(BuiltinRegistrationError):
        BuiltinRegistry([EchoBuiltin(), EchoBuiltin()])


def test_exit_without_arguments_exits_cleanly() -> None:
    assert ExitBuiltin().execute([]) == EvalResult("", 0, True)


@pytest.mark.parametrize(
    ("argument", "code"),
    [
        ("42", 42),
        ("0", 0),
        ("-1", -1),
        ("+7", 7),
        ("007", 7),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_exit_parses_decimal_status(argument: str, code: int) -> None:
    assert ExitBuiltin().execute([argument]) == EvalResult("", code, True)


@pytest.mark.parametrize(
    "argument",
    [
        "notanumber",
        "4.2",
        "0x10",
        "1_000",
        "",
        " 3",
        "9223372036854775808",
        "-9223372036854775809",
        "99999999999999999999",
        "9" * 5000,
    ],
)
def test_exit_rejects_non_numeric_status_but_still_exits(argument: str) -> None:
    result = ExitBuiltin().execute([argument])

    assert result == EvalResult(f"exit: {argument}: numeric argument required", 2, True)


def test_exit_ignores_arguments_after_the_first() -> None:
    assert ExitBuiltin().execute(["3", "extra"]) == EvalResult("", 3, True)


def test_echo_joins_arguments_with_single_spaces() -> None:
    assert EchoBuiltin().execute(["hello", "big  world"]) == EvalResult("hello big  world")
    assert EchoBuiltin().execute([]) == EvalResult("")


def test_type_reports_builtins_without_resolving() -> None:
    resolver = FakeResolver({"echo": "/bin/echo"})
    type_builtin = build_default_builtin_registry(resolver).get("type")
    assert type_builtin is not None

    for name in ("echo", "exit", "type"):
        assert type_builtin.execute([name]) == EvalResult(f"{name} is a shell builtin", 0)
    assert resolver.lookups == []


def test_type_reports_resolved_path() -> None:
    resolver = FakeResolver({"ls": "/usr/bin/ls"})
    type_builtin = build_default_builtin_registry(resolver).get("type")
    assert type_builtin is not None

    assert type_builtin.execute(["ls"]) == EvalResult("ls is /usr/bin/ls", 0)


def test_type_reports_unknown_names() -> None:
    type_builtin = build_default_builtin_registry(FakeResolver()).get("type")
    assert type_builtin is not None

    assert type_builtin.execute(["nope"]) == EvalResult("nope: not found", 1)


def test_type_without_arguments_prints_usage() -> None:
    type_builtin = build_default_builtin_registry(FakeResolver()).get("type")
    assert type_builtin is not None

    assert type_builtin.execute([]) == EvalResult("type: usage: type name", 1)


@dataclass(frozen=True)
class PwdBuiltin(Builtin):
    @property
    def name(self) -> str:
        return "pwd"

    def execute(self, args: list[str]) -> EvalResult:
        return EvalResult("/")


def test_type_reports_every_registered_builtin() -> None:
    resolver = FakeResolver({"pwd": "/bin/pwd"})
    registry = build_default_builtin_registry(resolver, [PwdBuiltin()])
    type_builtin = registry.get("type")
    assert type_builtin is not None

    assert registry.names() == frozenset({"exit", "echo", "type", "pwd"})
    for name in registry.names():
        assert type_builtin.execute([name]) == EvalResult(f"{name} is a shell builtin", 0)
    assert resolver.lookups == []
