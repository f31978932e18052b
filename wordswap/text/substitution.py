"""Token substitution over in-memory text.

Responsibilities:
- Replace every maximal match of a mapping key with its replacement in one pass.
- Count replacements per mapping key.

Key types:
- `TokenSubstituter`: compiled substitution engine for one mapping.
"""

from __future__ import annotations

import re

from ..mapping import SubstitutionMapping
from ..models.datatypes import SubstitutionResult


MATCH_WORD = "word"
MATCH_SUBSTRING = "substring"
MATCH_MODES = frozenset({MATCH_WORD, MATCH_SUBSTRING})

_WORD_START = r"(?<!\w)"
_WORD_END = r"(?!\w)"


class TokenSubstituter:
    """Apply a substitution mapping to text with whole-word or substring matching.

    All keys are compiled into a single alternation ordered longest first, so
    overlapping keys resolve to the longest match and replacement text is never
    matched again within the same pass. Each key sits in its own capture group,
    so the matched key is read from the group index rather than from the
    matched text.
    """

    def __init__(
        self,
        mapping: SubstitutionMapping,
        match_mode: str = MATCH_WORD,
        case_sensitive: bool = True,
    ) -> None:
        if match_mode not in MATCH_MODES:
            raise ValueError(f"Unsupported match mode `{match_mode}`.")
        if not len(mapping):
            raise ValueError("Substitution mapping must contain at least one pair.")
        if not case_sensitive:
            folded = {old_word.casefold() for old_word in mapping.keys}
            if len(folded) != len(mapping):
                raise ValueError(
                    "Mapping keys collide when compared case-insensitively; "
                    "use case-sensitive matching."
                )

        self._mapping = mapping
        self._match_mode = match_mode
        self._case_sensitive = case_sensitive
        self._replacements = mapping.as_dict()
        # Group N of the compiled pattern captures `self._group_keys[N - 1]`.
        self._group_keys = tuple(sorted(mapping.keys, key=len, reverse=True))
        self._pattern = self._compile()

    @property
    def mapping(self) -> SubstitutionMapping:
        return self._mapping

    @property
    def match_mode(self) -> str:
        return self._match_mode

    def _compile(self) -> re.Pattern[str]:
        alternation = "|".join(f"({re.escape(token)})" for token in self._group_keys)
        if self._match_mode == MATCH_WORD:
            pattern = f"{_WORD_START}(?:{alternation}){_WORD_END}"
        else:
            pattern = f"(?:{alternation})"
        flags = 0 if self._case_sensitive else re.IGNORECASE
        return re.compile(pattern, flags)

    def _matched_key(self, match: re.Match[str]) -> str:
        return self._group_keys[match.lastindex - 1]

    def substitute(self, text: str) -> SubstitutionResult:
        """Return transformed text and per-key replacement counts."""

        counts = {old_word: 0 for old_word in self._mapping.keys}

        def _replace(match: re.Match[str]) -> str:
            old_word = self._matched_key(match)
            counts[old_word] += 1
            return self._replacements[old_word]

        transformed = self._pattern.sub(_replace, text)
        return SubstitutionResult(text=transformed, counts=counts)

    def count(self, text: str) -> dict[str, int]:
        """Count occurrences per key without building transformed text."""

        counts = {old_word: 0 for old_word in self._mapping.keys}
        for match in self._pattern.finditer(text):
            counts[self._matched_key(match)] += 1
        return counts
