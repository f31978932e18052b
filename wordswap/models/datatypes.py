"""Core datatypes shared across wordswap modules.

Responsibilities:
- Represent immutable records produced by a substitution run.
- Keep aggregation of per-file counts in one place.

Key types:
- `SubstitutionResult`, `FileReport`, and `RunReport`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


OUTCOME_CHANGED = "changed"
OUTCOME_UNCHANGED = "unchanged"
OUTCOME_SKIPPED_BINARY = "skipped_binary"


@dataclass(frozen=True, slots=True)
class SubstitutionResult:
    """Outcome of substituting tokens in one text.

    Attributes:
        text: Transformed text.
        counts: Replacement count per mapping key, zero when unmatched.
    """

    text: str
    counts: Mapping[str, int]

    @property
    def total(self) -> int:
        """Return the number of replacements across all keys."""

        return sum(self.counts.values())


@dataclass(frozen=True, slots=True)
class FileReport:
    """Per-file outcome of a run.

    Attributes:
        relative_path: Path relative to the scan root.
        outcome: One of `changed`, `unchanged`, `skipped_binary`.
        counts: Replacement count per mapping key.
        preview: Transformed content, only populated in preview mode.
    """

    relative_path: Path
    outcome: str
    counts: Mapping[str, int] = field(default_factory=dict)
    preview: str | None = None


@dataclass(frozen=True, slots=True)
class RunReport:
    """Immutable summary of one directory substitution run.

    Attributes:
        root: Scanned root directory.
        output_mode: `write`, `preview`, or `count`.
        keys: Mapping keys in mapping order.
        files: File reports in scan order.
        output_dir: Mirror output directory, when one was used.
    """

    root: Path
    output_mode: str
    keys: tuple[str, ...]
    files: tuple[FileReport, ...]
    output_dir: Path | None = None

    @property
    def totals(self) -> dict[str, int]:
        """Aggregate replacement counts per key across all files."""

        totals = {key: 0 for key in self.keys}
        for report in self.files:
            for key, count in report.counts.items():
                totals[key] = totals.get(key, 0) + count
        return totals

    def count_outcome(self, outcome: str) -> int:
        """Return the number of files with the given outcome."""

        return sum(1 for report in self.files if report.outcome == outcome)

    @property
    def changed_files(self) -> tuple[FileReport, ...]:
        return tuple(report for report in self.files if report.outcome == OUTCOME_CHANGED)
