"""Removal of whitespace artifacts inserted by mobile keyboards and pasting."""

from __future__ import annotations

import re

from numeric_entry.utils.regex_cache import get_cached_pattern

# NBSP, the U+2000 block of fixed-width spaces, ZWSP, narrow NBSP,
# medium mathematical space, ideographic space.
_ARTIFACTS = "[\u00a0\u2000-\u200b\u202f\u205f\u3000]"


def filter_mobile_keyboard_artifacts(value: str) -> str:
    """Strip invisible and non-breaking spaces, then any remaining whitespace."""
    if not value:
        return value
    value = get_cached_pattern(_ARTIFACTS).sub(" ", value)
    return get_cached_pattern(r"\s").sub("", value)
