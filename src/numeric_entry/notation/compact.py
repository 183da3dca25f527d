"""Compact-notation expansion ("1.5k" -> "1500").

The suffix table is shared with the caret engine, which needs to recognise a
just-expanded suffix, and with the large-number display formatter.
"""

from __future__ import annotations

import re

from numeric_entry.notation.shifting import join_digits, shift_right
from numeric_entry.utils.regex_cache import get_cached_pattern

# Suffix -> power of ten, in display casing.
COMPACT_SUFFIXES: dict[str, int] = {
    "k": 3,
    "M": 6,
    "B": 9,
    "T": 12,
    "Qa": 15,
    "Qi": 18,
    "Sx": 21,
    "Sp": 24,
    "O": 27,
    "N": 30,
}

_POWERS = {suffix.lower(): power for suffix, power in COMPACT_SUFFIXES.items()}

# Longer suffixes first so "qa" is not read as a stray "q".
SUFFIX_ALTERNATION = "|".join(sorted(_POWERS, key=len, reverse=True))


def _compact_pattern(decimal_separator: str) -> re.Pattern[str]:
    sep = re.escape(decimal_separator)
    return get_cached_pattern(
        rf"(\d+(?:{sep}\d*)?)\s*({SUFFIX_ALTERNATION})", re.IGNORECASE
    )


def trailing_compact_pattern(decimal_separator: str = ".") -> re.Pattern[str]:
    """Pattern for a number that still ends in an unexpanded suffix."""
    sep = re.escape(decimal_separator)
    return get_cached_pattern(
        rf"(\d+(?:{sep}\d*)?)\s*(?:{SUFFIX_ALTERNATION})$", re.IGNORECASE
    )


def suffix_power(suffix: str) -> int | None:
    """Return the power of ten for *suffix* (any casing), or ``None``."""
    return _POWERS.get(suffix.lower())


def expand_compact_number(number: str, power: int, decimal_separator: str = ".") -> str:
    integer, _, fraction = number.partition(decimal_separator)
    integer, fraction = shift_right(integer, fraction, power)
    return join_digits(integer, fraction, decimal_separator)


def expand_compact_notation(value: str, decimal_separator: str = ".") -> str:
    """Expand every ``<number><suffix>`` run in *value*.

    Matching is case-insensitive and tolerates whitespace before the suffix.
    Anything that does not match (``"k1"``, ``"abc"``) is returned untouched.
    """
    if not value:
        return value

    def _replace(match: re.Match[str]) -> str:
        return expand_compact_number(
            match.group(1), suffix_power(match.group(2)), decimal_separator
        )

    return _compact_pattern(decimal_separator).sub(_replace, value)
