"""Filesystem access for scanned text files.

Responsibilities:
- Read and write UTF-8 text without newline translation.
- Map OS and decoding failures to path-aware domain errors.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import FileAccessError, TextEncodingError


class TextFileStore:
    """UTF-8 file reader/writer that keeps file bytes stable."""

    encoding = "utf-8"

    def read_bytes(self, path: Path) -> bytes:
        """Read raw file bytes."""

        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileAccessError(path, stage="scan", reason=exc.strerror or str(exc)) from exc

    def decode(self, path: Path, data: bytes) -> str:
        """Decode file bytes as UTF-8, keeping line endings as-is."""

        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise TextEncodingError(
                path, f"{exc.reason} at byte offset {exc.start}"
            ) from exc

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file without newline translation."""

        return self.decode(path, self.read_bytes(path))

    def write_text(self, path: Path, content: str) -> Path:
        """Write UTF-8 text without newline translation and return the path."""

        return self.write_bytes(path, content.encode(self.encoding))

    def write_bytes(self, path: Path, data: bytes) -> Path:
        """Write raw bytes, creating parent directories, and return the path."""

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise FileAccessError(path, stage="write", reason=exc.strerror or str(exc)) from exc
        return path
