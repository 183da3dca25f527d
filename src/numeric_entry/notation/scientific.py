"""Scientific-notation expansion ("1.5e-7" -> "0.00000015")."""

from __future__ import annotations

import re

from numeric_entry.notation.shifting import join_digits, shift_left, shift_right
from numeric_entry.utils.regex_cache import get_cached_pattern

# Runs with a larger exponent magnitude are left unexpanded.
MAX_EXPONENT = 1000


def _scientific_pattern(decimal_separator: str) -> re.Pattern[str]:
    sep = re.escape(decimal_separator)
    return get_cached_pattern(rf"([+-]?\d+(?:{sep}\d*)?)[eE]([+-]?\d+)")


def expand_scientific_number(
    mantissa: str, exponent: int, decimal_separator: str = "."
) -> str:
    """Expand a single ``mantissa * 10**exponent`` pair to plain decimal form."""
    if exponent == 0:
        return mantissa

    negative = mantissa.startswith("-")
    unsigned = mantissa.lstrip("+-")
    integer, _, fraction = unsigned.partition(decimal_separator)

    if exponent > 0:
        integer, fraction = shift_right(integer, fraction, exponent)
    else:
        integer, fraction = shift_left(integer, fraction, -exponent)

    expanded = join_digits(integer, fraction, decimal_separator)
    if negative and expanded != "0":
        return f"-{expanded}"
    return expanded


def expand_scientific_notation(value: str, decimal_separator: str = ".") -> str:
    """Replace every ``<mantissa>e<exponent>`` run in *value* with its expansion.

    Incomplete forms such as ``"1.5e"`` or ``"e-7"`` are left as they are, and
    so is any run whose exponent exceeds ``MAX_EXPONENT`` in magnitude.
    """
    if not value or ("e" not in value and "E" not in value):
        return value

    def _replace(match: re.Match[str]) -> str:
        raw_exponent = match.group(2)
        digits = raw_exponent.lstrip("+-").lstrip("0") or "0"
        if len(digits) > len(str(MAX_EXPONENT)) or int(digits) > MAX_EXPONENT:
            return match.group(0)
        exponent = -int(digits) if raw_exponent.startswith("-") else int(digits)
        return expand_scientific_number(match.group(1), exponent, decimal_separator)

    return _scientific_pattern(decimal_separator).sub(_replace, value)
