"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from wordswap.cli_rendering import (
    echo_file_summary,
    echo_previews,
    echo_replacement_counts,
    exit_with_command_error,
)
from wordswap.errors import RootNotFoundError
from wordswap.models.datatypes import FileReport, RunReport


def _report() -> RunReport:
    return RunReport(
        root=Path("docs"),
        output_mode="preview",
        keys=("utilize", "foo"),
        files=(
            FileReport(
                relative_path=Path("a.txt"),
                outcome="changed",
                counts={"utilize": 2, "foo": 0},
                preview="use it\n",
            ),
            FileReport(
                relative_path=Path("nested/b.txt"),
                outcome="unchanged",
                counts={"utilize": 0, "foo": 0},
            ),
            FileReport(relative_path=Path("img.bin"), outcome="skipped_binary"),
        ),
    )


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("replace", RootNotFoundError(Path("missing")))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "replace failed at stage `scan`: Root directory not found: `missing`." in captured.err
    assert "Hint: Pass an existing directory as `ROOT`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("count", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "count failed: unexpected failure" in captured.err


def test_echo_replacement_counts_and_summary(capsys: pytest.CaptureFixture[str]) -> None:
    report = _report()

    echo_replacement_counts(report)
    echo_file_summary(report)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Replaced 'utilize' 2 time(s).",
        "Replaced 'foo' 0 time(s).",
        "Files: 3 scanned, 1 changed, 1 unchanged, 1 skipped (binary)",
    ]


def test_echo_previews_prints_only_changed_files(capsys: pytest.CaptureFixture[str]) -> None:
    echo_previews(_report())

    assert capsys.readouterr().out == "--- a.txt\nuse it\n"
