"""Shared parsing helpers for config values and replacement pair tokens."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_PAIR_SEPARATOR = ":"


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_replacement_pair(raw: str) -> tuple[str, str]:
    """Split one `old: new` token into a trimmed replacement pair.

    Only the first separator splits, so replacement values may contain `:`.

    Raises:
        ValueError: If the separator is missing or either side is blank.
    """

    if _PAIR_SEPARATOR not in raw:
        raise ValueError(f"expected `old: new`, got `{raw.strip()}`")

    old_part, new_part = raw.split(_PAIR_SEPARATOR, 1)
    old_word = normalize_optional_string(old_part)
    new_word = normalize_optional_string(new_part)
    if old_word is None:
        raise ValueError(f"blank token before `:` in `{raw.strip()}`")
    if new_word is None:
        raise ValueError(f"blank replacement after `:` in `{raw.strip()}`")
    return old_word, new_word


def parse_choice(value: object, field_name: str, choices: frozenset[str]) -> str:
    """Normalize a case-insensitive choice token and validate membership.

    Raises:
        ValueError: If the value is blank or not one of `choices`.
    """

    normalized = normalize_optional_string(value)
    token = normalized.lower() if normalized is not None else ""
    if token not in choices:
        allowed = ", ".join(f"`{choice}`" for choice in sorted(choices))
        raise ValueError(f"`{field_name}` must be one of {allowed}.")
    return token
