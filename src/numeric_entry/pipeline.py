"""Pipeline orchestrator: sanitize → trim → pad → group → caret."""
from __future__ import annotations

import structlog

from .caret.boundary import get_caret_boundary
from .caret.change_detection import find_change_range, find_changed_range_from_caret_positions
from .caret.engine import compute_caret
from .formatting.grouping import format_for_config, format_for_display
from .models.caret import CaretPositionInfo, ChangeRange, IsCharacterEquivalent
from .models.formatting import FormatOn, FormattingConfig, ProcessResult, ThousandStyle
from .sanitization.characters import remove_thousand_separators
from .sanitization.decimals import ensure_min_decimals, trim_to_decimal_max_length
from .sanitization.sanitizer import build_sanitization_options, sanitize

logger = structlog.get_logger(__name__)


class NumericPipeline:
    """Runs edits for one field configuration through the full pipeline."""

    def __init__(self, config: FormattingConfig | None = None):
        self.config = config or FormattingConfig()

    def format_value(
        self, raw_input: str, remove_thousand_separators: bool | None = None
    ) -> tuple[str, str]:
        """Return ``(formatted, raw)`` for *raw_input*.

        By default thousand separators are stripped first only in change
        mode, where the field text already carries them.
        """
        config = self.config
        if remove_thousand_separators is None:
            remove_thousand_separators = config.format_on == FormatOn.CHANGE

        options = build_sanitization_options(config, remove_thousand_separators)
        raw = sanitize(raw_input, options)
        raw = trim_to_decimal_max_length(raw, config.decimal_max_length, config.decimal_separator)
        raw = ensure_min_decimals(raw, config.decimal_min_length, config.decimal_separator)
        return format_for_config(raw, config), raw

    def process(
        self,
        raw_input: str,
        caret: int | None = None,
        caret_info: CaretPositionInfo | None = None,
        previous_value: str | None = None,
        *,
        snap_to_boundary: bool = False,
        is_character_equivalent: IsCharacterEquivalent | None = None,
    ) -> ProcessResult:
        """Process one edit.

        Parameters
        ----------
        raw_input:
            Field text after the edit, before any reformatting.
        caret:
            Caret offset in *raw_input*; defaults to its end.
        caret_info:
            Selection captured at key-down, used to reconstruct the edited span.
        previous_value:
            Field text before the edit.  Needed to derive the edited span,
            either from *caret_info* or, failing that, by diffing.
        snap_to_boundary:
            Keep the caret off positions directly in front of a separator.
        is_character_equivalent:
            Enables character-equivalence remapping in the caret engine.
        """
        if caret is None:
            caret = len(raw_input)

        formatted, raw = self.format_value(raw_input)

        if formatted == raw_input:
            new_caret = max(0, min(caret, len(formatted)))
        else:
            change_range = self._resolve_change_range(raw_input, caret_info, previous_value)
            if is_character_equivalent is not None and previous_value is not None:
                change_range = _typed_range(previous_value, raw_input) or change_range

            boundary = None
            if snap_to_boundary:
                boundary = get_caret_boundary(
                    formatted, self._grouping_separator(), self.config.decimal_separator
                )

            new_caret = compute_caret(
                raw_input,
                formatted,
                caret,
                self.config.thousand_separator,
                self.config.decimal_separator,
                self.config.thousand_style,
                change_range=change_range,
                boundary=boundary,
                is_character_equivalent=is_character_equivalent,
            )

        logger.debug(
            "input_processed",
            input_length=len(raw_input),
            formatted_length=len(formatted),
            caret=caret,
            new_caret=new_caret,
        )
        return ProcessResult(formatted=formatted, raw=raw, caret=new_caret)

    def paste(
        self, current: str, clipboard: str, selection_start: int, selection_end: int
    ) -> ProcessResult:
        """Insert *clipboard* over the selection and reformat the result.

        The caret lands after the pasted text, shifted by however much the
        reformat grew or shrank the combined text.
        """
        combined = current[:selection_start] + clipboard + current[selection_end:]
        formatted, raw = self.format_value(combined, remove_thousand_separators=True)

        caret = selection_start + len(clipboard) + (len(formatted) - len(combined))
        caret = max(0, min(caret, len(formatted)))

        logger.debug(
            "paste_processed",
            clipboard_length=len(clipboard),
            formatted_length=len(formatted),
            caret=caret,
        )
        return ProcessResult(formatted=formatted, raw=raw, caret=caret)

    def blur(self, value: str) -> tuple[str, str]:
        """Fully format *value* for display once the field loses focus."""
        _, raw = self.format_value(value, remove_thousand_separators=True)
        return format_for_display(raw, self.config), raw

    def focus(self, value: str) -> str:
        """Strip grouping for editing when grouping is deferred to blur."""
        if self.config.format_on == FormatOn.BLUR and self._grouping_separator():
            return remove_thousand_separators(value, self.config.thousand_separator)
        return value

    def _grouping_separator(self) -> str | None:
        if self.config.thousand_style == ThousandStyle.NONE:
            return None
        return self.config.thousand_separator

    @staticmethod
    def _resolve_change_range(
        raw_input: str,
        caret_info: CaretPositionInfo | None,
        previous_value: str | None,
    ) -> ChangeRange | None:
        if previous_value is None:
            return None
        if caret_info is not None:
            change_range = find_changed_range_from_caret_positions(
                caret_info, previous_value, raw_input
            )
            if change_range is not None:
                return change_range
        change_range = find_change_range(previous_value, raw_input)
        if change_range is not None and len(raw_input) >= len(previous_value):
            # pure insertions carry no deleted span for the caret engine
            return None
        return change_range


def _typed_range(previous_value: str, raw_input: str) -> ChangeRange | None:
    """Span of *raw_input* holding the characters typed by the last edit."""
    diff = find_change_range(previous_value, raw_input)
    if diff is None:
        return None
    inserted = len(raw_input) - len(previous_value) + diff.deleted_length
    return ChangeRange(
        start=diff.start, end=diff.start + inserted, deleted_length=diff.deleted_length
    )


def process(
    raw_input: str,
    config: FormattingConfig | None = None,
    previous_caret_info: CaretPositionInfo | None = None,
    *,
    caret: int | None = None,
    previous_value: str | None = None,
) -> ProcessResult:
    """One-shot form of ``NumericPipeline.process``."""
    return NumericPipeline(config).process(
        raw_input, caret=caret, caret_info=previous_caret_info, previous_value=previous_value
    )
