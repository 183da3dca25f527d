"""Test the compiled-pattern cache."""
from numeric_entry.utils.regex_cache import (
    get_cached_pattern,
    get_separator_pattern,
    pattern_cache_size,
)


class TestPatternCache:
    def test_reuses_compiled_pattern(self, fresh_pattern_cache):
        assert get_separator_pattern(",") is get_separator_pattern(",")
        assert pattern_cache_size() == 1

    def test_separator_is_literal(self, fresh_pattern_cache):
        assert get_separator_pattern(".").sub("", "1.2.3") == "123"

    def test_flags_are_part_of_key(self, fresh_pattern_cache):
        get_cached_pattern("k")
        get_cached_pattern("k", 2)
        assert pattern_cache_size() == 2

    def test_clear(self, fresh_pattern_cache):
        get_separator_pattern(" ")
        assert pattern_cache_size() == 1
