"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import RunSummary


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
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


def echo_run_summary(summary: RunSummary) -> None:
    """Print changed files followed by run-level counters."""

    verb = "Would reformat" if summary.checked_only else "Reformatted"
    for result in summary.results:
        if result.changed:
            typer.echo(f"{verb}: {result.path}")
    typer.echo(f"Files checked: {len(summary.results)}")
    typer.echo(f"Files changed: {summary.files_changed}")
    typer.echo(f"Comments changed: {summary.comments_changed}")
