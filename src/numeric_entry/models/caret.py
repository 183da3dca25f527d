"""Value types describing caret state and edits.

These are plain records handed into and out of the caret engine; nothing in
here refers to a live text field.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CaretPositionInfo:
    """Caret/selection captured at key-press time, before the text mutates.

    ``end_offset=1`` marks a forward-Delete on a collapsed selection;
    ``end_offset=0`` any other Backspace/Delete; ``None`` plain entry.
    """

    selection_start: int
    selection_end: int
    end_offset: int | None = None

    @property
    def has_selection(self) -> bool:
        return self.selection_end > self.selection_start


@dataclass(frozen=True)
class ChangeRange:
    """Span of the pre-edit text that was replaced by one edit."""

    start: int
    end: int
    deleted_length: int
    is_delete: bool = False


@dataclass(frozen=True)
class EquivalenceContext:
    """Extra information passed to a character-equivalence predicate."""

    old_value: str
    new_value: str
    old_index: int
    new_index: int
    typed_range: ChangeRange | None = None


IsCharacterEquivalent = Callable[[str, str, EquivalenceContext], bool]


@dataclass(frozen=True)
class KeyAction:
    """What a host should do with a key press.

    ``prevent_default`` suppresses the native key handling; when ``value`` is
    set the host replaces the field text with it and moves the caret to
    ``caret``.  A ``caret`` without a ``value`` means "move the caret there,
    then let the key through".
    """

    prevent_default: bool = False
    value: str | None = None
    caret: int | None = None
