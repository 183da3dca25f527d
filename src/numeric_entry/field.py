"""Host-agnostic edit session for a single numeric input field.

A host binding (DOM, TUI, GUI toolkit) forwards its key, input, paste and
focus events here and applies the returned text and caret.  The session
owns its own configuration and the caret state captured between a key-down
and the input event that follows it.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from numeric_entry.caret.keys import capture_caret_info, skip_over_thousand_separator
from numeric_entry.models.caret import CaretPositionInfo, KeyAction
from numeric_entry.models.formatting import FormattingConfig, ProcessResult, ThousandStyle
from numeric_entry.pipeline import NumericPipeline
from numeric_entry.sanitization.decimals import handle_decimal_separator_key

logger = structlog.get_logger(__name__)


class NumericField:
    """Edit session for one field.

    ``text`` is what the field shows; ``value`` is what consumers receive,
    the raw value in ``raw_value_mode`` and the displayed text otherwise.
    ``on_change`` is called with ``value`` whenever the raw value changes.
    """

    def __init__(
        self,
        config: FormattingConfig | None = None,
        *,
        value: str = "",
        on_change: Callable[[str], object] | None = None,
    ):
        if on_change is not None and not callable(on_change):
            raise TypeError(f"on_change must be callable, got {type(on_change).__name__}")

        self.config = config or FormattingConfig()
        self.pipeline = NumericPipeline(self.config)
        self._on_change = on_change
        self._caret_info: CaretPositionInfo | None = None
        self._text = ""
        self._raw = ""

        if value:
            self.set_value(value)

    # ── State ────────────────────────────────────────────────────────────

    @property
    def text(self) -> str:
        return self._text

    @property
    def raw_value(self) -> str:
        return self._raw

    @property
    def value(self) -> str:
        return self._raw if self.config.raw_value_mode else self._text

    def set_value(self, value: str) -> None:
        """Replace the field content programmatically, fully formatted."""
        formatted, raw = self.pipeline.blur(value)
        self._update(formatted, raw)

    def _update(self, text: str, raw: str) -> None:
        changed = raw != self._raw
        self._text = text
        self._raw = raw
        if changed and self._on_change is not None:
            self._on_change(self.value)

    # ── Events ───────────────────────────────────────────────────────────

    def key_down(self, key: str, selection_start: int, selection_end: int) -> KeyAction:
        """Handle a key press before the host applies it."""
        action = handle_decimal_separator_key(
            key, self._text, selection_start, selection_end, self.config
        )
        if action.value is not None:
            result = self.input(action.value, action.caret)
            return KeyAction(prevent_default=True, value=result.formatted, caret=result.caret)
        if action.prevent_default:
            return action

        separator = None
        if self.config.thousand_style != ThousandStyle.NONE:
            separator = self.config.thousand_separator
        skipped = skip_over_thousand_separator(
            key, self._text, selection_start, selection_end, separator
        )
        if skipped is not None:
            selection_start = selection_end = skipped

        self._caret_info = capture_caret_info(key, selection_start, selection_end)
        return KeyAction(caret=skipped)

    def input(self, text: str, caret: int | None = None) -> ProcessResult:
        """Handle the field text changing to *text* with the caret at *caret*."""
        result = self.pipeline.process(
            text, caret=caret, caret_info=self._caret_info, previous_value=self._text
        )
        self._caret_info = None
        self._update(result.formatted, result.raw)
        return result

    def paste(self, clipboard: str, selection_start: int, selection_end: int) -> ProcessResult:
        result = self.pipeline.paste(self._text, clipboard, selection_start, selection_end)
        self._caret_info = None
        self._update(result.formatted, result.raw)
        return result

    def focus(self) -> str:
        self._text = self.pipeline.focus(self._text)
        return self._text

    def blur(self) -> ProcessResult:
        formatted, raw = self.pipeline.blur(self._text)
        self._update(formatted, raw)
        logger.debug("field_blur", formatted_length=len(formatted))
        return ProcessResult(formatted=formatted, raw=raw, caret=len(formatted))
