"""Ordered sanitization pipeline turning free-form text into a numeric string.

Stages, in order:

1. strip mobile-keyboard whitespace artifacts
2. drop thousand separators (only when the text may already be formatted)
3. expand compact notation (when enabled)
4. expand scientific notation
5. drop every character that is not a digit or the decimal separator
6. keep only the first decimal separator
7. strip integer-part leading zeros (unless leading zeros are enabled)

Every stage is total: malformed input degrades to best-effort output rather
than raising.
"""

from __future__ import annotations

from dataclasses import dataclass

from numeric_entry.models.formatting import FormattingConfig
from numeric_entry.notation.compact import expand_compact_notation
from numeric_entry.notation.scientific import expand_scientific_notation
from numeric_entry.sanitization.characters import (
    remove_non_numeric_characters,
    remove_thousand_separators,
)
from numeric_entry.sanitization.decimals import remove_extra_decimal_separators
from numeric_entry.sanitization.leading_zeros import remove_leading_zeros
from numeric_entry.sanitization.whitespace import filter_mobile_keyboard_artifacts


@dataclass(frozen=True)
class SanitizationOptions:
    decimal_separator: str = "."
    thousand_separator: str | None = None
    enable_compact_notation: bool = False
    enable_negative: bool = False
    enable_leading_zeros: bool = False


def build_sanitization_options(
    config: FormattingConfig, remove_thousand_separators: bool = False
) -> SanitizationOptions:
    """Derive sanitizer options from a field configuration.

    The thousand separator is only passed through when the caller says the
    text may already carry grouping; otherwise a typed separator character is
    left for the character filter to judge.
    """
    return SanitizationOptions(
        decimal_separator=config.decimal_separator,
        thousand_separator=config.thousand_separator if remove_thousand_separators else None,
        enable_compact_notation=config.enable_compact_notation,
        enable_negative=config.enable_negative,
        enable_leading_zeros=config.enable_leading_zeros,
    )


def sanitize(value: str, options: SanitizationOptions | None = None) -> str:
    """Run the full sanitization pipeline over *value*."""
    if options is None:
        options = SanitizationOptions()
    if not value:
        return ""

    decimal_separator = options.decimal_separator

    value = filter_mobile_keyboard_artifacts(value)

    if options.thousand_separator:
        value = remove_thousand_separators(value, options.thousand_separator)

    if options.enable_compact_notation:
        value = expand_compact_notation(value, decimal_separator)

    value = expand_scientific_notation(value, decimal_separator)
    value = remove_non_numeric_characters(value, options.enable_negative, decimal_separator)
    value = remove_extra_decimal_separators(value, decimal_separator)

    if not options.enable_leading_zeros:
        value = remove_leading_zeros(value, decimal_separator)

    return value
