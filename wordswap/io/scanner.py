"""Recursive directory scanning.

Responsibilities:
- Enumerate regular files under a root in deterministic order.
- Apply exclusion globs and detect binary content.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from fnmatch import fnmatch
import os
from pathlib import Path, PurePosixPath

from ..errors import FileAccessError, RootNotFoundError


_BINARY_SNIFF_BYTES = 8192


def ensure_root_directory(root: Path) -> Path:
    """Return `root` when it is an existing directory.

    Raises:
        RootNotFoundError: If the root is missing or is not a directory.
    """

    if not root.exists():
        raise RootNotFoundError(root)
    if not root.is_dir():
        raise RootNotFoundError(
            root,
            hint=f"`{root}` is a file; pass the directory that contains it.",
        )
    return root


def is_excluded(relative_path: PurePosixPath, exclude: Iterable[str]) -> bool:
    """Return whether a relative path or any of its parts matches an exclusion glob."""

    patterns = tuple(exclude)
    if not patterns:
        return False
    text = relative_path.as_posix()
    for pattern in patterns:
        if fnmatch(text, pattern):
            return True
        if any(fnmatch(part, pattern) for part in relative_path.parts):
            return True
    return False


def _raise_listing_error(exc: OSError) -> None:
    """Fail the scan on a directory that cannot be listed."""

    raise FileAccessError(
        Path(exc.filename) if exc.filename else Path("."),
        stage="scan",
        reason=exc.strerror or str(exc),
    ) from exc


def iter_files(root: Path, exclude: Iterable[str] = ()) -> Iterator[Path]:
    """Yield regular files under `root`, sorted by relative POSIX path.

    Symlinked directories are not followed.
    """

    ensure_root_directory(root)
    patterns = tuple(exclude)
    collected: list[tuple[str, Path]] = []
    for directory, dir_names, file_names in os.walk(
        root, onerror=_raise_listing_error, followlinks=False
    ):
        directory_path = Path(directory)
        dir_names[:] = [
            name
            for name in dir_names
            if not is_excluded(
                PurePosixPath((directory_path / name).relative_to(root).as_posix()),
                patterns,
            )
        ]
        for name in file_names:
            path = directory_path / name
            relative = PurePosixPath(path.relative_to(root).as_posix())
            if is_excluded(relative, patterns):
                continue
            if not path.is_file():
                continue
            collected.append((relative.as_posix(), path))

    for _, path in sorted(collected, key=lambda item: item[0]):
        yield path


def looks_binary(data: bytes) -> bool:
    """Return whether leading file bytes contain a NUL byte."""

    return b"\x00" in data[:_BINARY_SNIFF_BYTES]
