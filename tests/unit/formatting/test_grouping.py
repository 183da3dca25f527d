"""Test digit grouping under each style."""
import pytest
from numeric_entry.formatting.grouping import (
    format_for_config,
    format_for_display,
    format_with_separators,
    group_integer,
)
from numeric_entry.models.formatting import ThousandStyle
from tests.factories import make_config

GROUPING_STYLES = [ThousandStyle.THOUSAND, ThousandStyle.LAKH, ThousandStyle.WAN]


class TestFormatWithSeparators:
    def test_thousand(self):
        assert format_with_separators("1234567", ",", ThousandStyle.THOUSAND) == "1,234,567"

    def test_lakh(self):
        assert format_with_separators("1234567", ",", ThousandStyle.LAKH) == "12,34,567"
        assert format_with_separators("123456", ",", ThousandStyle.LAKH) == "1,23,456"

    def test_wan(self):
        assert format_with_separators("1234567", ",", ThousandStyle.WAN) == "123,4567"

    def test_none_unchanged(self):
        assert format_with_separators("1234567", ",", ThousandStyle.NONE) == "1234567"

    def test_short_values_ungrouped(self):
        assert format_with_separators("123", ",") == "123"
        assert format_with_separators("1234", ",", ThousandStyle.WAN) == "1234"

    @pytest.mark.parametrize("value", ["", "0", ".", "-", "-."])
    def test_edge_values_unchanged(self, value):
        assert format_with_separators(value, ",") == value

    def test_fraction_only(self):
        assert format_with_separators(".5", ",") == ".5"
        assert format_with_separators("-.5", ",") == "-.5"

    def test_trailing_decimal_separator_preserved(self):
        assert format_with_separators("1234.", ",") == "1,234."

    def test_decimal_part_untouched(self):
        assert format_with_separators("1234.56789", ",") == "1,234.56789"

    def test_negative(self):
        assert format_with_separators("-1234567", ",") == "-1,234,567"

    def test_european(self):
        assert (
            format_with_separators("1234567,89", ".", ThousandStyle.THOUSAND, decimal_separator=",")
            == "1.234.567,89"
        )

    def test_leading_zeros_preserved(self):
        assert format_with_separators("0001234", ",", enable_leading_zeros=True) == "0001,234"
        assert format_with_separators("000", ",", enable_leading_zeros=True) == "000"

    @pytest.mark.parametrize("style", GROUPING_STYLES)
    @pytest.mark.parametrize("separator", [",", " ", "'", "."])
    @pytest.mark.parametrize(
        "digits", ["1", "12", "123", "1234", "12345", "123456", "1234567", "98765432109876543210"]
    )
    def test_stripping_separators_restores_digits(self, style, separator, digits):
        grouped = format_with_separators(digits, separator, style, decimal_separator="|")
        assert grouped.replace(separator, "") == digits

    @pytest.mark.parametrize("style", GROUPING_STYLES)
    @pytest.mark.parametrize("digits", ["1", "1234", "1234567", "12345678901"])
    def test_regrouping_is_idempotent(self, style, digits):
        grouped = format_with_separators(digits, ",", style)
        assert format_with_separators(grouped.replace(",", ""), ",", style) == grouped


class TestGroupInteger:
    def test_lakh_long(self):
        assert group_integer("123456789", ",", ThousandStyle.LAKH) == "12,34,56,789"

    def test_none(self):
        assert group_integer("123456789", ",", ThousandStyle.NONE) == "123456789"


class TestFormatForConfig:
    def test_change_mode_groups(self):
        assert format_for_config("1234", make_config()) == "1,234"

    def test_blur_mode_defers(self):
        assert format_for_config("1234", make_config(format_on="blur")) == "1234"

    def test_display_ignores_format_on(self):
        assert format_for_display("1234", make_config(format_on="blur")) == "1,234"
