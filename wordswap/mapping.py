"""Substitution mapping model and loaders.

Responsibilities:
- Hold the ordered old-token to new-token table applied across a run.
- Load pairs from `old: new` mapping files and inline CLI values.

Key types:
- `SubstitutionMapping`: immutable ordered replacement table.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import MappingFileError
from .parsing import parse_replacement_pair


@dataclass(frozen=True, slots=True)
class SubstitutionMapping:
    """Ordered table of `old -> new` token replacements.

    Attributes:
        pairs: Replacement pairs in declaration order with unique keys.
    """

    pairs: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for old_word, new_word in self.pairs:
            if not old_word:
                raise ValueError("Mapping keys must be non-empty.")
            if old_word in seen:
                raise ValueError(f"Mapping key `{old_word}` is defined more than once.")
            seen.add(old_word)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> SubstitutionMapping:
        """Build a mapping from an iterable of pairs."""

        return cls(pairs=tuple(pairs))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(old_word for old_word, _ in self.pairs)

    def as_dict(self) -> dict[str, str]:
        return dict(self.pairs)

    def merged(self, other: SubstitutionMapping) -> SubstitutionMapping:
        """Return a mapping with `other` pairs appended; duplicate keys fail."""

        return SubstitutionMapping(pairs=self.pairs + other.pairs)

    def inverted(self) -> SubstitutionMapping:
        """Swap every pair so replacements map back to their original tokens.

        Raises:
            ValueError: If two keys share one replacement value.
        """

        inverted_pairs: list[tuple[str, str]] = []
        origins: dict[str, str] = {}
        for old_word, new_word in self.pairs:
            if new_word in origins:
                raise ValueError(
                    f"Cannot invert mapping: `{origins[new_word]}` and `{old_word}` "
                    f"both map to `{new_word}`."
                )
            origins[new_word] = old_word
            inverted_pairs.append((new_word, old_word))
        return SubstitutionMapping(pairs=tuple(inverted_pairs))

    def chained_keys(self) -> tuple[str, ...]:
        """Return keys that also appear as a replacement value.

        A second run over already-substituted output is only a no-op when this
        is empty.
        """

        values = {new_word for _, new_word in self.pairs}
        return tuple(old_word for old_word in self.keys if old_word in values)


def parse_mapping_lines(lines: Iterable[str], source_label: str) -> SubstitutionMapping:
    """Parse `old: new` lines, skipping blanks and `#` comments.

    Raises:
        MappingFileError: On a malformed line or a duplicate key.
    """

    pairs: list[tuple[str, str]] = []
    seen: dict[str, int] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        stripped = raw_line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            old_word, new_word = parse_replacement_pair(stripped)
        except ValueError as exc:
            raise MappingFileError(
                f"Invalid mapping entry in {source_label} on line {line_number}: {exc}.",
                hint="Write one `old: new` pair per line.",
            ) from exc
        if old_word in seen:
            raise MappingFileError(
                f"Duplicate mapping key `{old_word}` in {source_label} on line "
                f"{line_number} (first defined on line {seen[old_word]}).",
                hint="Keep a single replacement per token.",
            )
        seen[old_word] = line_number
        pairs.append((old_word, new_word))
    return SubstitutionMapping(pairs=tuple(pairs))


def load_mapping_file(path: Path) -> SubstitutionMapping:
    """Load a mapping file of `old: new` lines.

    Raises:
        MappingFileError: If the file is missing, unreadable, or malformed.
    """

    try:
        raw_text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MappingFileError(
            f"Mapping file not found: `{path}`.",
            hint="Provide an existing path via `--mapping <file>`.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise MappingFileError(
            f"Mapping file `{path}` is not UTF-8 text: {exc.reason}.",
        ) from exc
    except OSError as exc:
        raise MappingFileError(
            f"Failed to read mapping file `{path}`: {exc.strerror or exc}.",
            hint="Verify file permissions.",
        ) from exc

    return parse_mapping_lines(raw_text.splitlines(), f"mapping file `{path}`")


def parse_inline_pairs(values: Iterable[str]) -> SubstitutionMapping:
    """Parse repeated `--pair old:new` option values."""

    return parse_mapping_lines(values, "`--pair` values")
