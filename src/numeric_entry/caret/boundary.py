"""Caret boundaries: the set of offsets where the caret may rest."""

from __future__ import annotations

from typing import Literal

Direction = Literal["left", "right"]


def get_caret_boundary(
    text: str,
    thousand_separator: str | None = None,
    decimal_separator: str = ".",
    prefix: str = "",
    suffix: str = "",
) -> list[bool]:
    """Return one flag per caret offset (``len(text) + 1`` entries).

    Offsets inside a fixed prefix or suffix are blocked, as is the offset in
    front of each grouping or decimal separator and the one behind it unless
    a digit follows.  If nothing is left editable, everything is.
    """
    boundary = [True] * (len(text) + 1)

    for i in range(min(len(prefix), len(boundary))):
        boundary[i] = False

    if suffix:
        for i in range(max(0, len(text) - len(suffix) + 1), len(boundary)):
            boundary[i] = False

    separators = {s for s in (thousand_separator, decimal_separator) if s}
    for i, ch in enumerate(text):
        if ch not in separators:
            continue
        boundary[i] = False
        if i + 1 < len(text) and not text[i + 1].isdigit():
            boundary[i + 1] = False

    if not any(boundary):
        return [True] * (len(text) + 1)
    return boundary


def get_caret_pos_in_boundary(
    value: str, caret: int, boundary: list[bool], direction: Direction | None = None
) -> int:
    """Snap *caret* to an allowed offset.

    With a *direction* the search only walks that way, wrapping to the first
    (left) or last (right) allowed offset when it runs off the text.  Without
    one the nearest allowed offset wins, the right one on ties.
    """
    length = len(value)
    caret = max(0, min(caret, length))

    if caret < len(boundary) and boundary[caret]:
        return caret

    if direction == "left":
        pos = caret
        while pos >= 0 and not (pos < len(boundary) and boundary[pos]):
            pos -= 1
        if pos < 0:
            pos = boundary.index(True) if True in boundary else length
        return pos

    if direction == "right":
        pos = caret
        while pos < len(boundary) and not boundary[pos]:
            pos += 1
        if pos >= len(boundary):
            allowed = [i for i, ok in enumerate(boundary) if ok]
            pos = allowed[-1] if allowed else length
        return pos

    left = caret
    while left >= 0 and not (left < len(boundary) and boundary[left]):
        left -= 1
    right = caret
    while right < len(boundary) and not boundary[right]:
        right += 1

    has_left = left >= 0
    has_right = right < len(boundary)
    if has_left and has_right:
        return left if caret - left < right - caret else right
    if has_left:
        return left
    if has_right:
        return right
    return length
