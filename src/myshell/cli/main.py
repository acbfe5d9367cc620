"""CLI entrypoints for myshell."""

from __future__ import annotations

from pathlib import Path

import typer

from myshell.app import (
    AppConfigError,
    evaluate_line,
    initialize_config,
    load_shell_config,
    run_shell,
)
from myshell.config import ShellConfig, update_log_level
from myshell.util.logging import configure_logging

app = typer.Typer(help="A small interactive command shell.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (e.g., DEBUG, INFO, WARNING). Overrides the config file.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file or directory containing one.",
    ),
) -> None:
    """Start an interactive shell, or run a subcommand."""

    try:
        config = load_shell_config(config_path)
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if log_level is not None:
        config = update_log_level(config, log_level)
    configure_logging(config.log_level)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=run_shell(config))


@app.command("run")
def run_command(ctx: typer.Context) -> None:
    """Start an interactive shell session."""

    config: ShellConfig = ctx.obj
    raise typer.Exit(code=run_shell(config))


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="Command line to evaluate."),
) -> None:
    """Evaluate a single command line and exit with its status."""

    config: ShellConfig = ctx.obj
    result = evaluate_line(line, config)
    if result.output:
        typer.echo(result.output)
    raise typer.Exit(code=result.exit_code)


@app.command()
def init(directory: Path = typer.Argument(Path("."))) -> None:
    """Write a default configuration file."""

    try:
        config_path = initialize_config(directory)
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(f"Created configuration at {config_path}")
