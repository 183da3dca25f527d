"""Process-wide cache of compiled separator patterns.

Entries are immutable once inserted and keyed by plain data, so the cache is
safe to share between fields.  Callers go through the accessors below only.
"""

from __future__ import annotations

import re

_CACHE: dict[tuple[str, int], re.Pattern[str]] = {}


def get_cached_pattern(pattern: str, flags: int = 0) -> re.Pattern[str]:
    """Return the compiled form of *pattern*, compiling it on first use."""
    key = (pattern, flags)
    compiled = _CACHE.get(key)
    if compiled is None:
        compiled = re.compile(pattern, flags)
        _CACHE[key] = compiled
    return compiled


def get_separator_pattern(separator: str) -> re.Pattern[str]:
    """Return a pattern matching every occurrence of *separator* literally."""
    return get_cached_pattern(re.escape(separator))


def clear_pattern_cache() -> None:
    _CACHE.clear()


def pattern_cache_size() -> int:
    return len(_CACHE)
