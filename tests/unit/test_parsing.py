"""Unit tests for shared config and pair parsing helpers."""

import pytest

from wordswap.parsing import (
    normalize_optional_string,
    parse_choice,
    parse_permissive_boolean,
    parse_replacement_pair,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TrUe", True), ("  ON ", True), ("nO", False), (False, False)],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    assert parse_permissive_boolean(value) is None


def test_parse_replacement_pair_splits_on_first_separator() -> None:
    assert parse_replacement_pair(" url : http://example.com ") == (
        "url",
        "http://example.com",
    )


def test_parse_replacement_pair_requires_separator() -> None:
    with pytest.raises(ValueError, match="expected `old: new`"):
        parse_replacement_pair("utilize use")


def test_parse_choice_normalizes_case() -> None:
    assert parse_choice(" WORD ", "match_mode", frozenset({"word", "substring"})) == "word"


def test_parse_choice_lists_allowed_values() -> None:
    with pytest.raises(
        ValueError, match=r"`match_mode` must be one of `substring`, `word`\."
    ):
        parse_choice("regex", "match_mode", frozenset({"word", "substring"}))
