"""Test scientific-notation expansion."""
import pytest
from numeric_entry.notation.scientific import MAX_EXPONENT, expand_scientific_notation


class TestExpandScientificNotation:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.5e-7", "0.00000015"),
            ("2e+5", "200000"),
            ("123.456e-2", "1.23456"),
            ("10e-2", "0.1"),
            ("100e-3", "0.1"),
            ("12.34e+1", "123.4"),
            ("1.5e7", "15000000"),
            ("0e-5", "0"),
            ("-1.5e-2", "-0.015"),
            ("1.5E3", "1500"),
        ],
    )
    def test_expands(self, value, expected):
        assert expand_scientific_notation(value) == expected

    def test_zero_exponent_returns_base(self):
        assert expand_scientific_notation("1.5e0") == "1.5"

    @pytest.mark.parametrize("value", ["1.5e", "e-7", "1.5e-", "abc", ""])
    def test_incomplete_forms_untouched(self, value):
        assert expand_scientific_notation(value) == value

    def test_embedded_in_text(self):
        assert expand_scientific_notation("value 1.5e-7 here") == "value 0.00000015 here"

    def test_precision_beyond_float(self):
        assert expand_scientific_notation("1.23456789012345678e20") == "123456789012345678000"

    def test_custom_decimal_separator(self):
        assert expand_scientific_notation("1,5e3", decimal_separator=",") == "1500"
        assert expand_scientific_notation("1,5e-2", decimal_separator=",") == "0,015"

    @pytest.mark.parametrize("n", [1, 7, 42, 1000, 98765])
    @pytest.mark.parametrize("exponent", [1, 3, 9])
    def test_integer_exponent_scales_by_power_of_ten(self, n, exponent):
        assert expand_scientific_notation(f"{n}e{exponent}") == str(n * 10**exponent)


class TestExponentLimit:
    def test_exponent_at_limit_expands(self):
        assert expand_scientific_notation(f"1e{MAX_EXPONENT}") == "1" + "0" * MAX_EXPONENT
        assert expand_scientific_notation(f"1e-{MAX_EXPONENT}") == "0." + "0" * (MAX_EXPONENT - 1) + "1"

    def test_exponent_past_limit_left_unexpanded(self):
        assert expand_scientific_notation("1e50000000") == "1e50000000"
        assert expand_scientific_notation(f"2e-{MAX_EXPONENT + 1}") == f"2e-{MAX_EXPONENT + 1}"

    def test_thousands_of_exponent_digits_left_unexpanded(self):
        value = "1e" + "1" * 5000
        assert expand_scientific_notation(value) == value

    def test_zero_padded_exponent_expands(self):
        assert expand_scientific_notation("1.5e" + "0" * 5000 + "3") == "1500"
