"""CLI output and error rendering helpers."""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError


def _failure_lines(command_name: str, exc: Exception) -> tuple[str, str | None]:
    """Return the red headline and optional yellow hint for a failed command."""

    if isinstance(exc, CommandStageError):
        return exc.headline(command_name), exc.hint
    return f"{command_name} failed: {exc}", None


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Report a command failure on stderr and exit with code 1."""

    headline, hint = _failure_lines(command_name, exc)
    typer.secho(headline, fg=typer.colors.RED, err=True)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_result(text: str) -> None:
    """Print command output, keeping a single trailing newline."""

    typer.echo(text.rstrip("\n"))
