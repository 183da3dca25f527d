"""Process-level configuration via environment variables with NUMERIC_ENTRY_ prefix."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from numeric_entry.models.formatting import FormatOn, FormattingConfig, ThousandStyle
from numeric_entry.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


class Settings(BaseSettings):
    """Defaults applied to every field created by a host.

    Read from environment variables prefixed with ``NUMERIC_ENTRY_``, e.g.
    ``NUMERIC_ENTRY_THOUSAND_STYLE=lakh``.  A field may still override any of
    them when it builds its own ``FormattingConfig``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMERIC_ENTRY_")

    # ── Decimals ─────────────────────────────────────────────────────────
    decimal_separator: str = "."
    decimal_max_length: int = Field(default=2, ge=0)
    decimal_min_length: int = Field(default=0, ge=0)

    # ── Grouping ─────────────────────────────────────────────────────────
    thousand_separator: str = ","
    thousand_style: ThousandStyle = ThousandStyle.NONE
    format_on: FormatOn = FormatOn.BLUR

    # ── Feature Flags ────────────────────────────────────────────────────
    enable_compact_notation: bool = False
    enable_negative: bool = False
    enable_leading_zeros: bool = False
    raw_value_mode: bool = False

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True

    def formatting_config(self, **overrides) -> FormattingConfig:
        """Build a ``FormattingConfig`` from these defaults plus *overrides*."""
        options = self.model_dump(exclude={"log_level", "log_json"})
        options.update(overrides)
        return FormattingConfig(**options)


def build_formatting_config(settings: Settings | None = None, **options) -> FormattingConfig:
    """Validate field options against *settings*, logging any rejection.

    Raises ``pydantic.ValidationError`` (a ``ValueError``) for bad options.
    """
    settings = settings or Settings()
    try:
        return settings.formatting_config(**options)
    except ValidationError as e:
        logger.error("config_rejected", errors=e.error_count(), detail=str(e))
        raise


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level and renderer to structlog."""
    settings = settings or Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)
