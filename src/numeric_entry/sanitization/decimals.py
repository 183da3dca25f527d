"""Decimal-separator handling: splitting, de-duplication, trimming, padding.

Also hosts the key-press conversion of an alternate decimal key into the
configured separator, which works on the same decimal-separator rules.
"""

from __future__ import annotations

from typing import NamedTuple

from numeric_entry.models.caret import KeyAction
from numeric_entry.models.formatting import FormattingConfig, ThousandStyle

# Keys a user may press meaning "decimal point", whatever the locale.
DECIMAL_KEYS = (",", ".")


class NumberParts(NamedTuple):
    sign: str
    integer: str
    separator: str
    fraction: str

    def join(self) -> str:
        return f"{self.sign}{self.integer}{self.separator}{self.fraction}"


def split_number(value: str, decimal_separator: str = ".") -> NumberParts:
    """Decompose *value* into sign, integer part, separator and fraction."""
    sign = "-" if value.startswith("-") else ""
    integer, separator, fraction = value[len(sign):].partition(decimal_separator)
    return NumberParts(sign, integer, separator, fraction)


def remove_extra_decimal_separators(value: str, decimal_separator: str = ".") -> str:
    """Keep the first decimal separator and drop every later one.

    Stray ``,`` and ``.`` characters after the first separator are dropped
    as well.
    """
    head, separator, tail = value.partition(decimal_separator)
    if not separator:
        return value
    stray = {decimal_separator, *DECIMAL_KEYS}
    tail = "".join(ch for ch in tail if ch not in stray)
    return f"{head}{separator}{tail}"


def trim_to_decimal_max_length(
    value: str, max_length: int, decimal_separator: str = "."
) -> str:
    """Truncate fractional digits beyond *max_length*.

    A trailing separator with nothing after it is left in place.
    """
    parts = split_number(value, decimal_separator)
    if not parts.separator:
        return value
    return parts._replace(fraction=parts.fraction[:max_length]).join()


def ensure_min_decimals(value: str, min_length: int, decimal_separator: str = ".") -> str:
    """Pad the fraction with trailing zeros up to *min_length* digits.

    Never removes digits; ``"1"`` becomes ``"1.00"`` for ``min_length=2``.
    """
    if min_length <= 0:
        return value
    parts = split_number(value, decimal_separator)
    if len(parts.fraction) >= min_length:
        return value
    return parts._replace(
        separator=decimal_separator,
        fraction=parts.fraction.ljust(min_length, "0"),
    ).join()


def handle_decimal_separator_key(
    key: str,
    text: str,
    selection_start: int,
    selection_end: int,
    config: FormattingConfig,
) -> KeyAction:
    """Decide what happens when a decimal-looking key is pressed.

    Only applies to ``,`` and ``.`` when no grouping style is active (with
    grouping, one of those keys is the thousand separator).  A second decimal
    separator is blocked unless the existing one is inside the selection that
    the key press replaces; an alternate key is converted to the configured
    separator and inserted directly.
    """
    if key not in DECIMAL_KEYS or config.thousand_style != ThousandStyle.NONE:
        return KeyAction()

    decimal_separator = config.decimal_separator
    existing = text.find(decimal_separator)
    if existing != -1 and not (selection_start <= existing < selection_end):
        return KeyAction(prevent_default=True)

    if key == decimal_separator:
        return KeyAction()

    converted = text[:selection_start] + decimal_separator + text[selection_end:]
    return KeyAction(
        prevent_default=True, value=converted, caret=selection_start + 1
    )
