"""Power-of-ten shifts performed on digit strings.

Floats lose precision past ~15 significant digits, so scaling by 10**n is
done by moving the decimal point through the digit characters instead.
"""

from __future__ import annotations


def shift_right(integer: str, fraction: str, places: int) -> tuple[str, str]:
    """Multiply ``integer.fraction`` by ``10**places``.

    Returns the new ``(integer, fraction)`` pair, zero-padding the integer
    side when the fraction runs out of digits.
    """
    digits = integer + fraction
    point = len(integer) + places
    if point >= len(digits):
        return digits + "0" * (point - len(digits)), ""
    return digits[:point], digits[point:]


def shift_left(integer: str, fraction: str, places: int) -> tuple[str, str]:
    """Divide ``integer.fraction`` by ``10**places``."""
    point = len(integer) - places
    if point <= 0:
        return "0", "0" * -point + integer + fraction
    return integer[:point], integer[point:] + fraction


def join_digits(integer: str, fraction: str, decimal_separator: str = ".") -> str:
    """Build a canonical decimal string from shifted parts.

    Leading zeros of the integer side and trailing zeros of the fraction are
    dropped; an all-zero value becomes ``"0"``.
    """
    integer = integer.lstrip("0") or "0"
    fraction = fraction.rstrip("0")
    if fraction:
        return f"{integer}{decimal_separator}{fraction}"
    return integer
