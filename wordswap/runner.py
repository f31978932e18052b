"""Directory substitution orchestration.

Responsibilities:
- Resolve the effective substitution mapping for a run.
- Walk the scan root, substitute tokens per file, and apply the output mode.
- Produce a `RunReport` with per-file outcomes and aggregated counts.

Key types:
- `DirectorySubstitution`: orchestration facade for one configured run.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .config import (
    BINARY_ERROR,
    OUTPUT_COUNT,
    OUTPUT_PREVIEW,
    OUTPUT_WRITE,
    WordswapConfig,
)
from .errors import TextEncodingError, WordswapError
from .io.scanner import ensure_root_directory, iter_files, looks_binary
from .io.storage import TextFileStore
from .mapping import SubstitutionMapping, load_mapping_file
from .models.datatypes import (
    OUTCOME_CHANGED,
    OUTCOME_SKIPPED_BINARY,
    OUTCOME_UNCHANGED,
    FileReport,
    RunReport,
)
from .telemetry.logger import RunLogger
from .text.substitution import TokenSubstituter


_T = TypeVar("_T")


def resolve_mapping(config: WordswapConfig) -> SubstitutionMapping:
    """Combine mapping file and inline pairs, inverting them when requested.

    Raises:
        MappingFileError: If the mapping file cannot be loaded.
        WordswapError: If the combined mapping is empty, has duplicate keys,
            or cannot be inverted.
    """

    mapping = SubstitutionMapping(pairs=())
    if config.mapping_file is not None:
        mapping = load_mapping_file(config.mapping_file)
    try:
        mapping = mapping.merged(SubstitutionMapping.from_pairs(config.pairs))
        if config.reverse:
            mapping = mapping.inverted()
    except ValueError as exc:
        raise WordswapError(
            stage="mapping",
            detail=str(exc),
            hint="Keep one replacement per token across `--mapping` and `--pair`.",
        ) from exc

    if not len(mapping):
        raise WordswapError(
            stage="mapping",
            detail="Substitution mapping is empty.",
            hint="Add `old: new` lines to the mapping file or pass `--pair old:new`.",
        )
    return mapping


class DirectorySubstitution:
    """Apply one substitution mapping to every file under a root directory."""

    def __init__(
        self,
        config: WordswapConfig,
        run_logger: RunLogger | None = None,
        store: TextFileStore | None = None,
    ) -> None:
        self.config = config
        self.run_logger = run_logger
        self.store = store or TextFileStore()

    def run(self) -> RunReport:
        """Execute the configured run and return its report."""

        try:
            self.config.validate()
        except ValueError as exc:
            raise WordswapError(
                stage="config",
                detail=str(exc),
                hint="Fix command options or config values and rerun.",
            ) from exc

        mapping = self._run_stage("mapping", lambda: resolve_mapping(self.config))
        substituter = self._run_stage(
            "mapping",
            lambda: TokenSubstituter(
                mapping,
                match_mode=self.config.match_mode,
                case_sensitive=self.config.case_sensitive,
            ),
        )
        self._warn_chained_keys(mapping)

        root = self._run_stage("scan", lambda: ensure_root_directory(self.config.root))
        self._log_start("substitute", root=root, mode=self.config.output_mode)
        try:
            reports = tuple(
                self._process_file(root, path, substituter)
                for path in iter_files(root, self.config.exclude)
            )
        except WordswapError as exc:
            self._log_failure(exc.stage, exc)
            raise
        report = RunReport(
            root=root,
            output_mode=self.config.output_mode,
            keys=mapping.keys,
            files=reports,
            output_dir=self.config.output_dir,
        )
        self._log_complete(
            "substitute",
            files=len(report.files),
            changed=report.count_outcome(OUTCOME_CHANGED),
            replacements=sum(report.totals.values()),
        )
        if self.config.output_mode == OUTPUT_WRITE:
            self._log_complete(
                "write",
                written=report.count_outcome(OUTCOME_CHANGED),
                target=self.config.output_dir or root,
            )
        return report

    def _run_stage(self, stage: str, action: Callable[[], _T]) -> _T:
        """Run one setup action, translating plain value errors into stage errors."""

        try:
            return action()
        except WordswapError as exc:
            self._log_failure(stage, exc)
            raise
        except ValueError as exc:
            self._log_failure(stage, exc)
            raise WordswapError(stage=stage, detail=str(exc)) from exc

    def _process_file(
        self, root: Path, path: Path, substituter: TokenSubstituter
    ) -> FileReport:
        """Substitute tokens in one file and apply the output mode."""

        relative_path = path.relative_to(root)
        data = self.store.read_bytes(path)

        if looks_binary(data):
            if self.config.binary_policy == BINARY_ERROR:
                raise TextEncodingError(path, "file contains NUL bytes (binary content)")
            self._mirror_bytes(relative_path, data)
            self._log_file(relative_path, OUTCOME_SKIPPED_BINARY, 0)
            return FileReport(relative_path=relative_path, outcome=OUTCOME_SKIPPED_BINARY)

        text = self.store.decode(path, data)
        if self.config.output_mode == OUTPUT_COUNT:
            counts = substituter.count(text)
            outcome = OUTCOME_CHANGED if any(counts.values()) else OUTCOME_UNCHANGED
            self._log_file(relative_path, outcome, sum(counts.values()))
            return FileReport(relative_path=relative_path, outcome=outcome, counts=counts)

        result = substituter.substitute(text)
        if result.total == 0:
            self._mirror_bytes(relative_path, data)
            self._log_file(relative_path, OUTCOME_UNCHANGED, 0)
            return FileReport(
                relative_path=relative_path,
                outcome=OUTCOME_UNCHANGED,
                counts=result.counts,
            )

        preview: str | None = None
        if self.config.output_mode == OUTPUT_PREVIEW:
            preview = result.text
        elif self.config.output_mode == OUTPUT_WRITE:
            self.store.write_text(self._target_path(path, relative_path), result.text)
        self._log_file(relative_path, OUTCOME_CHANGED, result.total)
        return FileReport(
            relative_path=relative_path,
            outcome=OUTCOME_CHANGED,
            counts=result.counts,
            preview=preview,
        )

    def _target_path(self, path: Path, relative_path: Path) -> Path:
        if self.config.output_dir is None:
            return path
        return self.config.output_dir / relative_path

    def _mirror_bytes(self, relative_path: Path, data: bytes) -> None:
        """Copy untouched files into the output mirror; no-op for in-place runs."""

        if self.config.output_mode != OUTPUT_WRITE or self.config.output_dir is None:
            return
        self.store.write_bytes(self.config.output_dir / relative_path, data)

    def _warn_chained_keys(self, mapping: SubstitutionMapping) -> None:
        chained = mapping.chained_keys()
        if chained and self.run_logger is not None:
            self.run_logger.log_warning("mapping", "chained_keys", keys=",".join(chained))

    def _log_start(self, stage: str, **context: object) -> None:
        if self.run_logger is not None:
            self.run_logger.log_stage_start(stage, **context)

    def _log_complete(self, stage: str, **context: object) -> None:
        if self.run_logger is not None:
            self.run_logger.log_stage_complete(stage, **context)

    def _log_failure(self, stage: str, exc: Exception) -> None:
        if self.run_logger is not None:
            self.run_logger.log_stage_failure(stage, type(exc).__name__)

    def _log_file(self, relative_path: Path, outcome: str, replacements: int) -> None:
        if self.run_logger is not None:
            self.run_logger.log_file(
                "substitute", relative_path.as_posix(), outcome, replacements
            )
