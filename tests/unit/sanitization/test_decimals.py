"""Test decimal-separator handling, leading zeros and the decimal key."""
import pytest
from numeric_entry.sanitization.decimals import (
    ensure_min_decimals,
    handle_decimal_separator_key,
    remove_extra_decimal_separators,
    split_number,
    trim_to_decimal_max_length,
)
from numeric_entry.sanitization.leading_zeros import remove_leading_zeros
from tests.factories import make_config


class TestSplitNumber:
    def test_full(self):
        parts = split_number("-12.34")
        assert parts == ("-", "12", ".", "34")
        assert parts.join() == "-12.34"

    def test_no_decimal(self):
        assert split_number("12") == ("", "12", "", "")


class TestRemoveExtraDecimalSeparators:
    def test_keeps_first(self):
        assert remove_extra_decimal_separators("1.2.3") == "1.23"

    def test_strips_alternate_separators_from_tail(self):
        assert remove_extra_decimal_separators("1,2,3", ",") == "1,23"
        assert remove_extra_decimal_separators("1,2.3", ",") == "1,23"

    def test_no_separator(self):
        assert remove_extra_decimal_separators("123") == "123"


class TestTrimToDecimalMaxLength:
    def test_truncates(self):
        assert trim_to_decimal_max_length("1.23456", 2) == "1.23"

    def test_no_rounding(self):
        assert trim_to_decimal_max_length("1.999", 2) == "1.99"

    def test_bare_separator_untouched(self):
        assert trim_to_decimal_max_length("1.", 2) == "1."

    def test_zero_length_keeps_separator(self):
        assert trim_to_decimal_max_length("1.5", 0) == "1."

    def test_no_separator(self):
        assert trim_to_decimal_max_length("123", 2) == "123"

    def test_negative(self):
        assert trim_to_decimal_max_length("-0.12345", 3) == "-0.123"


class TestEnsureMinDecimals:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1", "1.00"),
            ("", ".00"),
            (".", ".00"),
            ("-.", "-.00"),
            ("1.5", "1.50"),
            ("1.123", "1.123"),
        ],
    )
    def test_pads(self, value, expected):
        assert ensure_min_decimals(value, 2) == expected

    def test_zero_min_unchanged(self):
        assert ensure_min_decimals("1", 0) == "1"

    def test_comma_separator(self):
        assert ensure_min_decimals("1", 2, ",") == "1,00"


class TestRemoveLeadingZeros:
    @pytest.mark.parametrize("value", ["", "0", "-0", "-", ".", ".5", "-.5", "123"])
    def test_unchanged(self, value):
        assert remove_leading_zeros(value) == value

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00.5", "0.5"),
            ("-0100", "-100"),
            ("00100200.000", "100200.000"),
            ("000", "0"),
            ("0.000", "0.000"),
        ],
    )
    def test_strips_integer_part_only(self, value, expected):
        assert remove_leading_zeros(value) == expected

    def test_custom_decimal_separator(self):
        assert remove_leading_zeros("007,50", ",") == "7,50"


class TestHandleDecimalSeparatorKey:
    def test_ignores_other_keys(self):
        action = handle_decimal_separator_key("5", "12", 2, 2, make_config(style="none"))
        assert action.prevent_default is False
        assert action.value is None

    def test_ignored_when_grouping_active(self):
        action = handle_decimal_separator_key(",", "12", 2, 2, make_config())
        assert action.prevent_default is False

    def test_blocks_second_separator(self):
        action = handle_decimal_separator_key(".", "1.2", 3, 3, make_config(style="none"))
        assert action.prevent_default is True
        assert action.value is None

    def test_allows_replacing_selected_separator(self):
        action = handle_decimal_separator_key(".", "1.2", 1, 2, make_config(style="none"))
        assert action.prevent_default is False

    def test_converts_alternate_key(self):
        action = handle_decimal_separator_key(",", "12", 1, 1, make_config(style="none"))
        assert action.prevent_default is True
        assert action.value == "1.2"
        assert action.caret == 2

    def test_canonical_key_passes_through(self):
        action = handle_decimal_separator_key(".", "12", 2, 2, make_config(style="none"))
        assert action.prevent_default is False
        assert action.value is None
