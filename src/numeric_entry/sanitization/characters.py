"""Character-level filtering of user input."""

from __future__ import annotations

from numeric_entry.utils.regex_cache import get_separator_pattern


def remove_thousand_separators(value: str, separator: str) -> str:
    """Drop every occurrence of the grouping separator from *value*."""
    if not value or not separator:
        return value
    return get_separator_pattern(separator).sub("", value)


def remove_non_numeric_characters(
    value: str, enable_negative: bool = False, decimal_separator: str = "."
) -> str:
    """Keep only ASCII digits and the decimal separator.

    With negatives enabled a single leading ``-`` survives, even when no
    digits follow it yet, so the user can type the sign first.
    """
    if not value:
        return value

    kept = "".join(
        ch for ch in value if ("0" <= ch <= "9") or ch == decimal_separator
    )
    if enable_negative and value.startswith("-"):
        return f"-{kept}"
    return kept
