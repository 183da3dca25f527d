"""Formatting configuration and result types for a numeric input session.

A ``FormattingConfig`` is created once per field and never mutated; a new
session replaces it wholesale.  Validation happens here, at construction, so
that per-keystroke processing never has to deal with a bad configuration.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ThousandStyle(StrEnum):
    """Digit-clustering convention applied to the integer part."""

    NONE = "none"
    THOUSAND = "thousand"  # 1,234,567
    LAKH = "lakh"  # 12,34,567
    WAN = "wan"  # 123,4567


class FormatOn(StrEnum):
    """When grouping separators are inserted into the displayed text."""

    BLUR = "blur"
    CHANGE = "change"


class FormattingConfig(BaseModel):
    """Immutable per-field formatting options."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    decimal_max_length: int = Field(default=2, ge=0)
    decimal_min_length: int = Field(default=0, ge=0)
    format_on: FormatOn = FormatOn.BLUR
    thousand_separator: str = ","
    thousand_style: ThousandStyle = ThousandStyle.NONE
    decimal_separator: str = "."
    enable_compact_notation: bool = False
    enable_negative: bool = False
    enable_leading_zeros: bool = False
    raw_value_mode: bool = False

    @field_validator("format_on", "thousand_style", mode="before")
    @classmethod
    def _coerce_enum_strings(cls, value, info):
        # strict mode rejects plain strings for enum fields; accept their values
        enum_type = FormatOn if info.field_name == "format_on" else ThousandStyle
        if isinstance(value, str) and not isinstance(value, enum_type):
            try:
                return enum_type(value.lower())
            except ValueError:
                allowed = ", ".join(repr(member.value) for member in enum_type)
                raise ValueError(
                    f"{info.field_name} must be one of {allowed}, got {value!r}"
                ) from None
        return value

    @field_validator("thousand_separator", "decimal_separator")
    @classmethod
    def _single_character(cls, value: str, info) -> str:
        if len(value) != 1:
            raise ValueError(
                f"{info.field_name} must be a single character, got {value!r}"
            )
        return value

    @model_validator(mode="after")
    def _check_consistency(self) -> FormattingConfig:
        if self.thousand_separator == self.decimal_separator:
            raise ValueError("Decimal separator can't be same as thousand separator")
        if self.decimal_min_length > self.decimal_max_length:
            raise ValueError(
                f"decimal_min_length ({self.decimal_min_length}) cannot exceed "
                f"decimal_max_length ({self.decimal_max_length})"
            )
        return self

    @property
    def groups_on_change(self) -> bool:
        """True when grouping is applied on every keystroke."""
        return self.format_on == FormatOn.CHANGE and bool(self.thousand_separator)


class ProcessResult(BaseModel):
    """Output of one pass through the pipeline."""

    model_config = ConfigDict(frozen=True)

    formatted: str
    raw: str
    caret: int
