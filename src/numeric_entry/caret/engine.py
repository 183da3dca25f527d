"""Caret placement after a reformat.

``compute_caret`` maps a caret offset in the text as it stood when an edit
was processed onto the text produced by sanitizing and regrouping it.  The
mapping works on meaningful-digit counts (see ``caret.digits``) so that
separators appearing or disappearing around the caret do not drag it along.

Order of precedence:

1. guards (bad offsets, empty texts) and edge stability
2. compact-suffix collapse ("1.5k" -> "1500" keeps the caret at the end)
3. character-equivalence remapping, when a predicate is supplied
4. deletion or insertion digit mapping
5. boundary correction

The function never raises and always returns an offset in
``[0, len(new_text)]``.
"""

from __future__ import annotations

from numeric_entry.caret.boundary import Direction, get_caret_pos_in_boundary
from numeric_entry.caret.digits import (
    count_meaningful_digits_before_position,
    find_position_for_digit_index,
    find_position_with_meaningful_digit_count,
    is_position_on_separator,
)
from numeric_entry.models.caret import ChangeRange, EquivalenceContext, IsCharacterEquivalent
from numeric_entry.models.formatting import ThousandStyle
from numeric_entry.notation.compact import trailing_compact_pattern


def compute_caret(
    old_text: str,
    new_text: str,
    old_caret: int,
    separator: str,
    decimal_separator: str = ".",
    style: ThousandStyle = ThousandStyle.THOUSAND,
    change_range: ChangeRange | None = None,
    boundary: list[bool] | None = None,
    is_character_equivalent: IsCharacterEquivalent | None = None,
    direction: Direction | None = None,
) -> int:
    """Return the caret offset in *new_text* matching *old_caret* in *old_text*.

    Parameters
    ----------
    old_text, new_text:
        Text before and after sanitizing/grouping.
    old_caret:
        Caret offset in *old_text*.
    separator, decimal_separator:
        Grouping and decimal separators of *new_text*.
    style:
        Grouping style in effect.
    change_range:
        Span of the pre-edit text replaced by the edit.  Without it deletions
        fall back to a caret-local heuristic.
    boundary:
        Allowed caret offsets in *new_text* (see ``get_caret_boundary``).
    is_character_equivalent:
        Predicate enabling character-equivalence remapping.
    direction:
        Preferred snapping direction for boundary correction.
    """
    new_length = len(new_text)

    if old_caret < 0:
        return 0
    if old_caret > len(old_text):
        return new_length
    if not old_text or not new_text:
        return new_length

    if old_caret == 0:
        return _snap(new_text, 0, boundary, direction)
    if old_caret == len(old_text):
        return _snap(new_text, new_length, boundary, direction)

    compact = trailing_compact_pattern(decimal_separator)
    if (
        compact.search(old_text)
        and not compact.search(new_text)
        and new_length > len(old_text)
        and old_caret >= len(old_text) - 1
    ):
        return new_length

    if is_character_equivalent is not None and old_text != new_text:
        position = _map_by_equivalence(
            old_text, new_text, old_caret, is_character_equivalent, change_range
        )
    elif new_length < len(old_text):
        position = _caret_after_deletion(
            old_text, new_text, old_caret, separator, decimal_separator, change_range
        )
    else:
        position = _caret_after_insertion(
            old_text, new_text, old_caret, separator, decimal_separator
        )

    return _snap(new_text, position, boundary, direction)


def _snap(
    new_text: str, position: int, boundary: list[bool] | None, direction: Direction | None
) -> int:
    if boundary is not None:
        position = get_caret_pos_in_boundary(new_text, position, boundary, direction)
    return max(0, min(position, len(new_text)))


# ---------------------------------------------------------------------------
# Character-equivalence remapping
# ---------------------------------------------------------------------------


def _map_by_equivalence(
    old_text: str,
    new_text: str,
    old_caret: int,
    is_equivalent: IsCharacterEquivalent,
    change_range: ChangeRange | None,
) -> int:
    # index_map[i] is the position in new_text paired with old_text[i], or -1
    index_map = [-1] * len(old_text)
    used = [False] * len(new_text)

    for i, old_char in enumerate(old_text):
        for j, new_char in enumerate(new_text):
            if used[j]:
                continue
            context = EquivalenceContext(
                old_value=old_text,
                new_value=new_text,
                old_index=i,
                new_index=j,
                typed_range=change_range,
            )
            if is_equivalent(old_char, new_char, context):
                index_map[i] = j
                used[j] = True
                break

    pos = old_caret
    while pos < len(old_text) and (index_map[pos] == -1 or not old_text[pos].isdigit()):
        pos += 1
    end_index = len(new_text) if pos == len(old_text) else index_map[pos]

    pos = old_caret - 1
    while pos >= 0 and index_map[pos] == -1:
        pos -= 1
    start_index = 0 if pos < 0 else index_map[pos] + 1

    if start_index > end_index:
        return end_index
    if old_caret - start_index < end_index - old_caret:
        return start_index
    return end_index


# ---------------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------------


def _caret_after_deletion(
    old_text: str,
    new_text: str,
    old_caret: int,
    separator: str,
    decimal_separator: str,
    change_range: ChangeRange | None,
) -> int:
    if is_position_on_separator(old_text, old_caret, separator):
        return _caret_after_separator_deletion(
            old_text, new_text, old_caret, separator, decimal_separator
        )

    digits_before = count_meaningful_digits_before_position(
        old_text, old_caret, separator, decimal_separator
    )
    digits_removed = count_meaningful_digits_before_position(
        old_text, len(old_text), separator, decimal_separator
    ) - count_meaningful_digits_before_position(
        new_text, len(new_text), separator, decimal_separator
    )

    if change_range is not None:
        target = count_meaningful_digits_before_position(
            old_text, change_range.start, separator, decimal_separator
        )
    elif old_text[old_caret - 1] == separator and digits_removed > 0:
        target = digits_before + 1
    else:
        target = digits_before

    old_decimal_index = old_text.find(decimal_separator)
    new_decimal_index = new_text.find(decimal_separator)
    was_in_integer_part = old_decimal_index == -1 or old_caret <= old_decimal_index

    if was_in_integer_part and new_decimal_index != -1:
        integer_part = new_text[:new_decimal_index]
        integer_digits = count_meaningful_digits_before_position(
            integer_part, len(integer_part), separator, decimal_separator
        )
        if target <= integer_digits:
            return _locate_after_deletion(
                integer_part, target, separator, decimal_separator, digits_removed, change_range
            )

    return _locate_after_deletion(
        new_text, target, separator, decimal_separator, digits_removed, change_range
    )


def _caret_after_separator_deletion(
    old_text: str, new_text: str, old_caret: int, separator: str, decimal_separator: str
) -> int:
    after_separator = old_caret + 1
    if after_separator >= len(old_text):
        return old_caret

    digit_index = count_meaningful_digits_before_position(
        old_text, after_separator, separator, decimal_separator
    )
    pos = find_position_for_digit_index(new_text, digit_index, separator, decimal_separator)
    if pos < len(new_text) and new_text[pos] != separator:
        return pos + 1
    return pos


def _locate_after_deletion(
    text: str,
    target: int,
    separator: str,
    decimal_separator: str,
    digits_removed: int,
    change_range: ChangeRange | None,
) -> int:
    position = find_position_with_meaningful_digit_count(
        text, target, separator, decimal_separator
    )
    # position 0 is left alone so deleting from the start does not jump
    if not 0 < position < len(text):
        return position
    if count_meaningful_digits_before_position(text, position, separator, decimal_separator) != target:
        return position
    if digits_removed <= 0 or position >= len(text) - 1:
        return position

    if change_range is not None:
        if text[position] == separator:
            return position + 1
        return position
    return position + 1


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def _caret_after_insertion(
    old_text: str, new_text: str, old_caret: int, separator: str, decimal_separator: str
) -> int:
    digits_before = count_meaningful_digits_before_position(
        old_text, old_caret, separator, decimal_separator
    )
    total_old = count_meaningful_digits_before_position(
        old_text, len(old_text), separator, decimal_separator
    )
    if old_caret >= len(old_text) or digits_before == total_old:
        return len(new_text)

    total_new = count_meaningful_digits_before_position(
        new_text, len(new_text), separator, decimal_separator
    )
    target = digits_before + 1 if total_new > total_old else digits_before

    position = find_position_with_meaningful_digit_count(
        new_text, target, separator, decimal_separator
    )
    if is_position_on_separator(old_text, old_caret, separator) and not is_position_on_separator(
        new_text, position, separator
    ):
        return max(0, position - 1)
    return position
