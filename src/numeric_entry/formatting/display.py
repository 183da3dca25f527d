"""Read-only display formatters: large numbers, percentages, tiny decimals.

These never feed back into an input field.  Like the input pipeline they
work on digit strings only, so 20+ digit values keep every digit.
"""

from __future__ import annotations

from numeric_entry.formatting.grouping import format_with_separators
from numeric_entry.models.formatting import ThousandStyle
from numeric_entry.notation.compact import COMPACT_SUFFIXES
from numeric_entry.notation.shifting import join_digits, shift_left, shift_right

# Largest scale first.
SCALES: list[tuple[str, int]] = sorted(
    COMPACT_SUFFIXES.items(), key=lambda item: item[1], reverse=True
)

_SUBSCRIPT_DIGITS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_empty_number(value: str | None, decimal_separator: str) -> bool:
    return not value or value in ("0", "-", decimal_separator, f"-{decimal_separator}")


def compare_numeric_strings(a: str, b: str, decimal_separator: str = ".") -> int:
    """Compare two unsigned decimal strings; returns -1, 0 or 1."""
    a_int, _, a_frac = a.partition(decimal_separator)
    b_int, _, b_frac = b.partition(decimal_separator)
    a_int = a_int.lstrip("0")
    b_int = b_int.lstrip("0")
    width = max(len(a_frac), len(b_frac))
    a_key = (len(a_int), a_int, a_frac.ljust(width, "0"))
    b_key = (len(b_int), b_int, b_frac.ljust(width, "0"))
    return (a_key > b_key) - (a_key < b_key)


def apply_scale_notation(
    value: str, decimal_separator: str = ".", min_scale: int = 0
) -> tuple[str, str]:
    """Divide *value* by the largest fitting scale; returns ``(scaled, suffix)``.

    A scale applies once the integer part has more digits than its power.
    """
    integer, _, fraction = value.partition(decimal_separator)
    significant = integer.lstrip("0") or "0"

    for suffix, power in SCALES:
        if power < min_scale:
            continue
        if len(significant) > power:
            scaled_int, scaled_frac = shift_left(significant, fraction, power)
            return join_digits(scaled_int, scaled_frac, decimal_separator), suffix

    return value, ""


def apply_decimal_precision(
    value: str, decimals: int, decimals_min: int = 0, decimal_separator: str = "."
) -> str:
    """Truncate to *decimals* places, drop trailing zeros, pad to *decimals_min*."""
    integer, _, fraction = value.partition(decimal_separator)
    fraction = fraction[:decimals].rstrip("0")
    if len(fraction) < decimals_min:
        fraction = fraction.ljust(decimals_min, "0")
    if fraction:
        return f"{integer}{decimal_separator}{fraction}"
    return integer


def multiply_by_100(value: str, decimal_separator: str = ".") -> str:
    integer, _, fraction = value.partition(decimal_separator)
    return join_digits(*shift_right(integer, fraction, 2), decimal_separator)


def to_subscript(digits: str) -> str:
    return digits.translate(_SUBSCRIPT_DIGITS)


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_large_number(
    value: str,
    *,
    min_scale: int = 0,
    decimals_under: int = 1000,
    decimals: int = 2,
    decimals_min: int = 0,
    decimals_min_applies_to_zero: bool = False,
    very_large_placeholder: str = "🔥",
    decimal_separator: str = ".",
    thousand_separator: str | None = None,
    thousand_style: ThousandStyle = ThousandStyle.NONE,
) -> str:
    """Format a numeric string with a scale suffix ("1234567" -> "1.23M").

    Values below *decimals_under* (after scaling) keep up to *decimals*
    fractional digits, larger ones are shown as integers.  Anything of a
    thousand of the largest scale or more renders as *very_large_placeholder*.
    """
    if _is_empty_number(value, decimal_separator):
        if decimals_min_applies_to_zero and decimals_min > 0:
            return f"0{decimal_separator}{'0' * decimals_min}"
        return "0"

    negative = value.startswith("-")
    absolute = value[1:] if negative else value

    scaled, suffix = apply_scale_notation(absolute, decimal_separator, min_scale)
    if suffix == SCALES[0][0]:
        scaled_integer = scaled.partition(decimal_separator)[0]
        if len(scaled_integer) > 3:
            return very_large_placeholder

    show_decimals = compare_numeric_strings(scaled, str(decimals_under), decimal_separator) < 0
    result = apply_decimal_precision(
        scaled, decimals if show_decimals else 0, decimals_min, decimal_separator
    )
    if thousand_separator and thousand_style != ThousandStyle.NONE:
        result = format_with_separators(
            result, thousand_separator, thousand_style, False, decimal_separator
        )

    return f"{'-' if negative else ''}{result}{suffix}"


def format_percent(
    value: str,
    decimals: int = 2,
    decimal_separator: str = ".",
    thousand_separator: str | None = None,
    thousand_style: ThousandStyle = ThousandStyle.NONE,
) -> str:
    """Format a fraction as a percentage ("0.1234" -> "12.34%")."""
    if _is_empty_number(value, decimal_separator):
        return "0%"

    negative = value.startswith("-")
    absolute = value[1:] if negative else value

    result = apply_decimal_precision(
        multiply_by_100(absolute, decimal_separator), decimals, 0, decimal_separator
    )
    if thousand_separator and thousand_style != ThousandStyle.NONE:
        result = format_with_separators(
            result, thousand_separator, thousand_style, False, decimal_separator
        )
    return f"{'-' if negative else ''}{result}%"


def format_large_percent(
    value: str | None,
    decimals: int = 2,
    *,
    missing_placeholder: str = "?",
    very_large_placeholder: str = "🔥",
    decimals_under: int = 1000,
    decimal_separator: str = ".",
    thousand_separator: str | None = None,
    thousand_style: ThousandStyle = ThousandStyle.NONE,
) -> str:
    """Percentage with a scale suffix for very large ratios ("1000000" -> "100M%")."""
    if value is None or value == "":
        return missing_placeholder
    if _is_empty_number(value, decimal_separator):
        return "0%"

    negative = value.startswith("-")
    absolute = value[1:] if negative else value
    percent = multiply_by_100(absolute, decimal_separator)

    number = format_large_number(
        percent,
        decimals_under=decimals_under,
        decimals=decimals,
        very_large_placeholder=very_large_placeholder,
        decimal_separator=decimal_separator,
        thousand_separator=thousand_separator,
        thousand_style=thousand_style,
    )
    if number == very_large_placeholder:
        return very_large_placeholder
    return f"{'-' if negative else ''}{number}%"


def condense_decimal_zeros(
    value: str, max_decimal_digits: int = 8, decimal_separator: str = "."
) -> str:
    """Collapse three or more leading fractional zeros into a subscript count.

    ``"0.000001"`` becomes ``"0.0₆1"``.  The digits after the subscript are
    capped so the condensed fraction stays within *max_decimal_digits*.
    """
    if not value or decimal_separator not in value:
        return value

    negative = value.startswith("-")
    absolute = value[1:] if negative else value
    whole, _, fraction = absolute.partition(decimal_separator)

    remaining = fraction.lstrip("0")
    zero_count = len(fraction) - len(remaining)
    if zero_count < 3:
        return value

    subscript = to_subscript(str(zero_count))
    keep = max(0, max_decimal_digits - len(subscript) - 1)
    remaining = remaining[:keep].rstrip("0")

    result = f"{whole}{decimal_separator}0{subscript}{remaining}"
    return f"-{result}" if negative else result
