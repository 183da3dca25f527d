"""Meaningful-digit indexing.

A meaningful character is anything that is neither the grouping separator
nor the decimal separator.  Caret positions are carried across a reformat by
counting meaningful characters before them.
"""

from __future__ import annotations


def _is_meaningful(ch: str, separator: str, decimal_separator: str) -> bool:
    return ch != separator and ch != decimal_separator


def count_meaningful_digits_before_position(
    text: str, position: int, separator: str, decimal_separator: str = "."
) -> int:
    """Number of meaningful characters in ``text[:position]``."""
    return sum(
        1 for ch in text[: max(0, position)] if _is_meaningful(ch, separator, decimal_separator)
    )


def find_position_for_digit_index(
    text: str, digit_index: int, separator: str, decimal_separator: str = "."
) -> int:
    """Position just after the meaningful character with index ``digit_index - 1``.

    ``0`` maps to the start of the text; an index past the last meaningful
    character maps to the end.
    """
    if digit_index <= 0:
        return 0

    seen = 0
    for i, ch in enumerate(text):
        if _is_meaningful(ch, separator, decimal_separator):
            if seen == digit_index - 1:
                return i + 1
            seen += 1
    return len(text)


def find_position_with_meaningful_digit_count(
    text: str, target_count: int, separator: str, decimal_separator: str = "."
) -> int:
    """First position with exactly *target_count* meaningful characters before it."""
    if target_count <= 0:
        return 0

    seen = 0
    for i, ch in enumerate(text):
        if _is_meaningful(ch, separator, decimal_separator):
            seen += 1
            if seen == target_count:
                return i + 1
    return len(text)


def is_position_on_separator(text: str, position: int, separator: str) -> bool:
    return 0 <= position < len(text) and text[position] == separator
