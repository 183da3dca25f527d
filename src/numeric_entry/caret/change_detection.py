"""Reconstruction of the span an edit replaced."""

from __future__ import annotations

from numeric_entry.models.caret import CaretPositionInfo, ChangeRange


def find_changed_range_from_caret_positions(
    info: CaretPositionInfo, before: str, after: str
) -> ChangeRange | None:
    """Derive the replaced span from the caret state captured at key-down.

    A selection is a replace of the selected span.  ``end_offset > 0`` is a
    forward-Delete starting at the caret.  Otherwise a shrinking text is a
    Backspace, which removed the characters just left of the caret.
    """
    start, end = info.selection_start, info.selection_end

    if info.has_selection:
        return ChangeRange(start=start, end=end, deleted_length=end - start, is_delete=False)

    if info.end_offset:
        return ChangeRange(
            start=start, end=start + info.end_offset, deleted_length=info.end_offset, is_delete=True
        )

    removed = len(before) - len(after)
    if removed <= 0:
        return None
    range_start = max(0, start - removed)
    return ChangeRange(start=range_start, end=range_start + removed, deleted_length=removed)


def find_change_range(old_value: str, new_value: str) -> ChangeRange | None:
    """Diff two texts by longest common prefix and suffix.

    Returns ``None`` when the texts are identical.  The edit counts as a
    delete when more characters were removed than inserted.
    """
    if old_value == new_value:
        return None

    limit = min(len(old_value), len(new_value))
    prefix = 0
    while prefix < limit and old_value[prefix] == new_value[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < limit - prefix
        and old_value[len(old_value) - 1 - suffix] == new_value[len(new_value) - 1 - suffix]
    ):
        suffix += 1

    old_end = len(old_value) - suffix
    new_end = len(new_value) - suffix
    deleted = old_end - prefix
    inserted = new_end - prefix

    return ChangeRange(
        start=prefix, end=old_end, deleted_length=deleted, is_delete=deleted > inserted
    )
