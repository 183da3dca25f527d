"""Integration tests for the sanitize → group → caret pipeline."""
import pytest
from numeric_entry.models.formatting import FormattingConfig
from numeric_entry.pipeline import NumericPipeline, process
from tests.factories import make_backspace, make_config, make_delete, make_european_config


@pytest.mark.integration
class TestProcess:
    def test_groups_on_change(self, change_config):
        result = process("1234", change_config)
        assert (result.formatted, result.raw, result.caret) == ("1,234", "1234", 5)

    def test_typing_zero_after_hundred(self, change_config):
        result = process("1000", change_config, caret=4, previous_value="100")
        assert result.formatted == "1,000"
        assert result.caret == 5

    def test_backspace_with_captured_caret(self, change_config):
        result = process(
            "1,34", change_config, make_backspace(3), caret=2, previous_value="1,234"
        )
        assert (result.formatted, result.caret) == ("134", 1)

    def test_forward_delete_with_captured_caret(self, change_config):
        result = process("1,34", change_config, make_delete(2), caret=2, previous_value="1,234")
        assert (result.formatted, result.caret) == ("134", 1)

    def test_backspace_without_caret_info_uses_diff(self, change_config):
        result = process("1,34", change_config, caret=2, previous_value="1,234")
        assert (result.formatted, result.caret) == ("134", 1)

    def test_blur_mode_defers_grouping(self):
        result = process("1234.567", FormattingConfig())
        assert (result.formatted, result.raw, result.caret) == ("1234.56", "1234.56", 7)

    def test_compact_expansion(self):
        config = make_config(enable_compact_notation=True)
        result = process("1.5k", config)
        assert (result.formatted, result.raw, result.caret) == ("1,500", "1500", 5)

    def test_scientific_expansion_keeps_precision(self):
        config = make_config(decimal_max_length=10)
        result = process("1.5e-7", config)
        assert result.raw == "0.00000015"

    def test_min_decimals_padding(self):
        result = process("1", make_config(decimal_min_length=2))
        assert (result.formatted, result.caret) == ("1.00", 4)

    def test_negative(self):
        result = process("-1234", make_config(enable_negative=True))
        assert (result.formatted, result.raw) == ("-1,234", "-1234")

    def test_lone_minus(self):
        result = process("-", make_config(enable_negative=True))
        assert (result.formatted, result.raw) == ("-", "-")

    def test_lakh(self):
        assert process("1234567", make_config(style="lakh")).formatted == "12,34,567"

    def test_wan(self):
        assert process("1234567", make_config(style="wan")).formatted == "123,4567"

    def test_european(self, european_config):
        result = process("1.234.567,891", european_config)
        assert (result.formatted, result.raw) == ("1.234.567,89", "1234567,89")

    def test_unchanged_text_keeps_caret(self, change_config):
        result = process("1,234", change_config, caret=2, previous_value="1,24")
        assert result.caret == 2

    def test_garbage_degrades_to_empty(self, change_config):
        result = process("abc", change_config, caret=3)
        assert (result.formatted, result.raw, result.caret) == ("", "", 0)

    def test_snap_to_boundary(self, change_pipeline):
        result = change_pipeline.process("1000", caret=1, previous_value="100", snap_to_boundary=True)
        assert result.formatted == "1,000"
        assert result.caret == 2

    def test_oversized_exponent_is_not_expanded(self):
        result = process("2e-" + "9" * 4400, make_config())
        assert result.raw == "2" + "9" * 4400


@pytest.mark.integration
class TestPasteAndFocus:
    def test_paste_oversized_exponent(self, change_pipeline):
        result = change_pipeline.paste("", "1e" + "1" * 5000, 0, 0)
        assert result.raw == "1" * 5001
        assert result.caret == len(result.formatted)

    def test_paste_at_end(self, change_pipeline):
        result = change_pipeline.paste("1,234", "5678", 5, 5)
        assert (result.formatted, result.raw, result.caret) == ("12,345,678", "12345678", 10)

    def test_paste_over_selection(self, change_pipeline):
        result = change_pipeline.paste("1,234", "9", 0, 1)
        assert (result.formatted, result.caret) == ("9,234", 1)

    def test_paste_scientific(self):
        pipeline = NumericPipeline(make_config(decimal_max_length=10))
        result = pipeline.paste("", "1.5e-7", 0, 0)
        assert (result.formatted, result.caret) == ("0.00000015", 10)

    def test_paste_with_artifacts(self, change_pipeline):
        result = change_pipeline.paste("", "1 234 567", 0, 0)
        assert (result.formatted, result.caret) == ("1,234,567", 9)

    def test_blur_formats_in_blur_mode(self):
        pipeline = NumericPipeline(make_config(format_on="blur"))
        assert pipeline.blur("1234567.5") == ("1,234,567.5", "1234567.5")

    def test_focus_strips_grouping_in_blur_mode(self):
        pipeline = NumericPipeline(make_config(format_on="blur"))
        assert pipeline.focus("1,234,567.5") == "1234567.5"

    def test_focus_keeps_grouping_in_change_mode(self, change_pipeline):
        assert change_pipeline.focus("1,234") == "1,234"
