"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
replacement counts, file summaries, and dry-run previews.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import WordswapError
from .models.datatypes import (
    OUTCOME_CHANGED,
    OUTCOME_SKIPPED_BINARY,
    OUTCOME_UNCHANGED,
    RunReport,
)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, WordswapError):
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


def echo_replacement_counts(report: RunReport) -> None:
    """Print one line per mapping key in mapping order."""

    for word, count in report.totals.items():
        typer.echo(f"Replaced '{word}' {count} time(s).")


def echo_occurrence_counts(report: RunReport) -> None:
    """Print per-key occurrence totals for count-only runs."""

    for word, count in report.totals.items():
        typer.echo(f"Found '{word}' {count} time(s).")


def echo_file_summary(report: RunReport) -> None:
    """Print changed/unchanged/skipped file totals."""

    typer.echo(
        f"Files: {len(report.files)} scanned, "
        f"{report.count_outcome(OUTCOME_CHANGED)} changed, "
        f"{report.count_outcome(OUTCOME_UNCHANGED)} unchanged, "
        f"{report.count_outcome(OUTCOME_SKIPPED_BINARY)} skipped (binary)"
    )
    if report.output_dir is not None:
        typer.echo(f"Output directory: {report.output_dir}")


def echo_previews(report: RunReport) -> None:
    """Print transformed content of every changed file under a path header."""

    for file_report in report.changed_files:
        typer.secho(f"--- {file_report.relative_path.as_posix()}", bold=True)
        preview = file_report.preview or ""
        typer.echo(preview, nl=not preview.endswith("\n"))
