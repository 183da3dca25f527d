"""Caret state captured at key-down, before the host mutates the text."""

from __future__ import annotations

from numeric_entry.models.caret import CaretPositionInfo

BACKSPACE = "Backspace"
DELETE = "Delete"


def capture_caret_info(key: str, selection_start: int, selection_end: int) -> CaretPositionInfo:
    """Record the selection for *key*, tagging Delete vs Backspace.

    A forward-Delete on a collapsed selection gets ``end_offset=1``; any
    other Backspace/Delete gets ``end_offset=0``.
    """
    if key == DELETE and selection_start == selection_end:
        end_offset: int | None = 1
    elif key in (BACKSPACE, DELETE):
        end_offset = 0
    else:
        end_offset = None
    return CaretPositionInfo(selection_start, selection_end, end_offset)


def skip_over_thousand_separator(
    key: str, text: str, selection_start: int, selection_end: int, separator: str | None
) -> int | None:
    """Move a collapsed caret over an adjacent grouping separator.

    Backspace right after a separator, or Delete right before one, would
    otherwise remove a character that the next reformat puts straight back.
    Returns the caret to use before the key applies, or ``None`` to leave it.
    """
    if not separator or selection_start != selection_end:
        return None
    if key == BACKSPACE and 0 < selection_start <= len(text) and text[selection_start - 1] == separator:
        return selection_start - 1
    if key == DELETE and 0 <= selection_start < len(text) and text[selection_start] == separator:
        return selection_start + 1
    return None
