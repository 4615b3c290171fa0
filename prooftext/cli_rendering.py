"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
diff rows, and language listings.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandStageError
from .languages import Language
from .text.diffing import DiffResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_difference(result: DiffResult) -> None:
    """Print the four diff parts as labeled, quoted rows."""

    for label, value in zip(("prefix", "left", "right", "suffix"), result):
        typer.echo(f"{label}: {value!r}")


def echo_language_list(languages: Iterable[Language]) -> None:
    """Print compact deterministic language code/name rows."""

    for language in languages:
        typer.echo(f"{language.code}\t{language.name or language.code}")
