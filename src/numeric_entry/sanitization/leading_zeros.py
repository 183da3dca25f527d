"""Leading-zero stripping for the integer part of a numeric string."""

from __future__ import annotations


def remove_leading_zeros(value: str, decimal_separator: str = ".") -> str:
    """Strip redundant leading zeros from the integer part only.

    ``"00.5"`` becomes ``"0.5"`` and ``"-0100"`` becomes ``"-100"``.  A lone
    ``"0"`` integer part is kept, decimal zeros are never touched, and values
    with no integer part (``"."``, ``".5"``, ``"-"``) pass through unchanged.
    """
    if not value or value in ("0", "-0", "-", decimal_separator):
        return value

    sign = "-" if value.startswith("-") else ""
    unsigned = value[len(sign):]
    integer, separator, fraction = unsigned.partition(decimal_separator)
    if not integer:
        return value

    stripped = integer.lstrip("0") or "0"
    return f"{sign}{stripped}{separator}{fraction}"
