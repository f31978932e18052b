"""Unit tests for substitution mapping parsing, loading, and inversion."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordswap.errors import MappingFileError
from wordswap.mapping import (
    SubstitutionMapping,
    load_mapping_file,
    parse_inline_pairs,
    parse_mapping_lines,
)


def test_load_mapping_file_reads_fixture_pairs(replacements_file: Path) -> None:
    mapping = load_mapping_file(replacements_file)

    assert mapping.pairs == (("utilize", "use"), ("foo", "bar"))
    assert mapping.keys == ("utilize", "foo")


def test_parse_mapping_lines_skips_blanks_and_comments_and_trims() -> None:
    mapping = parse_mapping_lines(
        ["", "# comment", "  quick :  speedy  ", "url: http://example.com"],
        "test lines",
    )

    assert mapping.as_dict() == {"quick": "speedy", "url": "http://example.com"}


@pytest.mark.parametrize(
    ("line", "message"),
    [
        ("no separator here", "expected `old: new`"),
        (": missing-old", "blank token"),
        ("missing-new:   ", "blank replacement"),
    ],
)
def test_parse_mapping_lines_reports_malformed_line_number(line: str, message: str) -> None:
    with pytest.raises(MappingFileError, match=message) as exc_info:
        parse_mapping_lines(["ok: fine", line], "mapping file `m.txt`")

    assert exc_info.value.stage == "mapping"
    assert "on line 2" in exc_info.value.detail


def test_parse_mapping_lines_rejects_duplicate_keys() -> None:
    with pytest.raises(MappingFileError, match="Duplicate mapping key `foo`"):
        parse_mapping_lines(["foo: bar", "foo: baz"], "mapping file `m.txt`")


def test_load_mapping_file_reports_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(MappingFileError, match="Mapping file not found") as exc_info:
        load_mapping_file(missing)

    assert exc_info.value.hint is not None


def test_parse_inline_pairs_uses_same_grammar() -> None:
    mapping = parse_inline_pairs(["utilize:use", "foo: bar"])

    assert mapping.pairs == (("utilize", "use"), ("foo", "bar"))


def test_inverted_swaps_every_pair() -> None:
    mapping = SubstitutionMapping.from_pairs([("utilize", "use"), ("foo", "bar")])

    assert mapping.inverted().pairs == (("use", "utilize"), ("bar", "foo"))


def test_inverted_rejects_shared_replacement_values() -> None:
    mapping = SubstitutionMapping.from_pairs([("utilize", "use"), ("employ", "use")])

    with pytest.raises(ValueError, match="both map to `use`"):
        mapping.inverted()


def test_chained_keys_lists_keys_used_as_replacements() -> None:
    mapping = SubstitutionMapping.from_pairs([("a", "b"), ("b", "c"), ("x", "y")])

    assert mapping.chained_keys() == ("b",)


def test_merged_rejects_duplicate_keys() -> None:
    left = SubstitutionMapping.from_pairs([("foo", "bar")])
    right = SubstitutionMapping.from_pairs([("foo", "baz")])

    with pytest.raises(ValueError, match="defined more than once"):
        left.merged(right)
