"""Domain exceptions for substitution runs and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class WordswapError(RuntimeError):
    """Raised when a specific run stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped substitution error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class RootNotFoundError(WordswapError):
    """Raised when the scan root does not exist or is not a directory."""

    def __init__(self, root: Path, hint: str | None = None) -> None:
        super().__init__(
            stage="scan",
            detail=f"Root directory not found: `{root}`.",
            hint=hint or "Pass an existing directory as `ROOT`.",
        )
        self.root = root


class FileAccessError(WordswapError):
    """Raised when one file cannot be read or written."""

    def __init__(self, path: Path, stage: str, reason: str) -> None:
        super().__init__(
            stage=stage,
            detail=f"Cannot access `{path}`: {reason}",
            hint="Check file permissions and available disk space.",
        )
        self.path = path


class TextEncodingError(WordswapError):
    """Raised when a file is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            stage="substitute",
            detail=f"File `{path}` is not UTF-8 text: {reason}",
            hint="Exclude the file with `--exclude` or convert it to UTF-8.",
        )
        self.path = path


class MappingFileError(WordswapError):
    """Raised when the substitution mapping cannot be loaded."""

    def __init__(self, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="mapping", detail=detail, hint=hint)
