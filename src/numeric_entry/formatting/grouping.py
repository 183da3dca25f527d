"""Insertion of digit-group separators under the supported grouping styles.

Stripping the separator from the output of ``format_with_separators`` always
reproduces its input, so formatting can be re-applied after every edit.
"""

from __future__ import annotations

from numeric_entry.models.formatting import FormattingConfig, ThousandStyle
from numeric_entry.sanitization.decimals import split_number

# ---------------------------------------------------------------------------
# Group sizes per style: (rightmost group, every group to its left)
# ---------------------------------------------------------------------------

GROUPING_CONFIG: dict[ThousandStyle, tuple[int, int]] = {
    ThousandStyle.THOUSAND: (3, 3),
    ThousandStyle.LAKH: (3, 2),
    ThousandStyle.WAN: (4, 4),
}


def group_integer(digits: str, separator: str, style: ThousandStyle) -> str:
    """Insert *separator* into a bare run of integer digits."""
    sizes = GROUPING_CONFIG.get(style)
    if sizes is None:
        return digits
    first, rest = sizes
    if len(digits) <= first:
        return digits

    groups = [digits[-first:]]
    remaining = digits[:-first]
    while remaining:
        groups.append(remaining[-rest:])
        remaining = remaining[:-rest]
    return separator.join(reversed(groups))


def format_with_separators(
    value: str,
    separator: str,
    style: ThousandStyle = ThousandStyle.THOUSAND,
    enable_leading_zeros: bool = False,
    decimal_separator: str = ".",
) -> str:
    """Group the integer part of a sanitized numeric string.

    Parameters
    ----------
    value:
        Sanitized numeric string (sign, digits, optional decimal part).
    separator:
        Group separator to insert.
    style:
        Grouping convention; ``ThousandStyle.NONE`` leaves *value* untouched.
    enable_leading_zeros:
        When set, leading zeros of the integer part are kept verbatim and
        only the significant digits after them are grouped.
    decimal_separator:
        Separator between integer and fractional parts.

    Returns
    -------
    str
        The grouped string.  A trailing decimal separator is preserved.
    """
    if not value or style == ThousandStyle.NONE or not separator:
        return value
    if value in ("0", "-", decimal_separator, f"-{decimal_separator}"):
        return value

    parts = split_number(value, decimal_separator)
    if not parts.integer:
        # fractional side only, e.g. ".5" or "-.5"
        return parts.join()

    integer = parts.integer
    if enable_leading_zeros:
        significant = integer.lstrip("0")
        zeros = integer[: len(integer) - len(significant)]
        grouped = zeros + group_integer(significant, separator, style)
    else:
        grouped = group_integer(integer, separator, style)

    return parts._replace(integer=grouped).join()


def format_for_config(value: str, config: FormattingConfig) -> str:
    """Apply per-keystroke grouping, which only happens in change mode."""
    if not config.groups_on_change:
        return value
    return format_with_separators(
        value,
        config.thousand_separator,
        config.thousand_style,
        config.enable_leading_zeros,
        config.decimal_separator,
    )


def format_for_display(value: str, config: FormattingConfig) -> str:
    """Apply grouping regardless of ``format_on`` (used when leaving a field)."""
    return format_with_separators(
        value,
        config.thousand_separator,
        config.thousand_style,
        config.enable_leading_zeros,
        config.decimal_separator,
    )
