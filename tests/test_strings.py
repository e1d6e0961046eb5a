"""
Tests for hydroutils.strings module.

Tests template formatting, random strings, dates, sizes and clocks.
"""

from datetime import date, datetime

import pytest

from hydroutils.common.constants import FormatConstants
from hydroutils.strings import (
    format_date,
    format_from_array,
    format_seconds,
    format_string,
    random_string,
    rawformat,
    size,
)


class TestFormatString:
    """Tests for placeholder substitution."""

    def test_positional(self):
        assert format_string("{0}-{1}", "a", "b") == "a-b"

    def test_keyed(self):
        assert format_string("{x}", {"x": 5}) == "5"

    def test_keyed_replaces_every_occurrence(self):
        assert format_string("{name}/{name}", {"name": "p"}) == "p/p"

    def test_keyed_skips_none(self):
        assert format_string("{a}{b}", {"a": 1, "b": None}) == "1{b}"

    def test_positional_skips_none(self):
        assert format_string("{0}{1}{2}", "a", None, "c") == "a{1}c"

    def test_no_args_returns_template(self):
        assert format_string("{0} stays") == "{0} stays"

    def test_non_mapping_single_arg_is_positional(self):
        assert format_string("{0}!", 42) == "42!"

    def test_unreferenced_placeholders_stay(self):
        assert format_string("{0} {3}", "x") == "x {3}"

    def test_format_from_array(self):
        assert format_from_array("{1}{0}", ["a", "b"]) == "ba"


class TestRawFormat:
    """Tests for the comma-joining rawformat."""

    def test_joins_with_commas(self):
        assert rawformat("head{@}tail", "obj") == "head,obj,tail"

    def test_missing_marker_leaves_empty_tail(self):
        assert rawformat("plain", "obj") == "plain,obj,"

    def test_list_object_is_comma_joined(self):
        assert rawformat("a{@}b", [1, 2]) == "a,1,2,b"

    def test_none_object_renders_empty(self):
        assert rawformat("a{@}b", None) == "a,,b"


class TestRandomString:
    """Tests for random string generation."""

    def test_default_length(self):
        assert len(random_string()) == 32

    def test_custom_length(self):
        assert len(random_string(8)) == 8

    def test_zero_length(self):
        assert random_string(0) == ""

    def test_alphabet(self):
        value = random_string(500)
        assert set(value) <= set(FormatConstants.RANDOM_ALPHABET)

    def test_default_length_from_settings(self, monkeypatch):
        monkeypatch.setenv("HYDRO_UTILS_FORMAT_RANDOM_LENGTH", "12")
        assert len(random_string()) == 12


class TestFormatDate:
    """Tests for date rendering."""

    def test_default_format(self):
        assert format_date(datetime(2021, 3, 4, 5, 6, 7)) == "2021-03-04 05:06:07"

    def test_no_padding_needed(self):
        assert format_date(datetime(2021, 12, 24, 23, 59, 58)) == "2021-12-24 23:59:58"

    def test_custom_format(self):
        assert format_date(datetime(2021, 3, 4, 5, 6, 7), "%d/%m/%Y") == "04/03/2021"

    def test_only_first_token_replaced(self):
        assert format_date(datetime(2021, 3, 4), "%Y %Y") == "2021 %Y"

    def test_plain_date(self):
        assert format_date(date(2020, 1, 2)) == "2020-01-02 00:00:00"

    def test_year_not_padded(self):
        assert format_date(datetime(999, 1, 1), "%Y") == "999"


class TestFormatSeconds:
    """Tests for HH:MM:SS rendering."""

    def test_basic(self):
        assert format_seconds("3661") == "01:01:01"

    def test_default(self):
        assert format_seconds() == "00:00:00"

    def test_hours_not_wrapped(self):
        assert format_seconds("90000") == "25:00:00"

    def test_three_digit_hours(self):
        assert format_seconds(360000) == "100:00:00"

    def test_leading_integer_parsed(self):
        assert format_seconds("59.9") == "00:00:59"

    def test_negative_keeps_truncated_remainders(self):
        assert format_seconds("-1") == "0-1:0-1:0-1"
        assert format_seconds(-3661) == "0-2:0-2:0-1"

    def test_invalid(self):
        with pytest.raises(ValueError):
            format_seconds("abc")


class TestSize:
    """Tests for byte size rendering."""

    def test_kib(self):
        assert size(1536) == "1.5 KiB"

    def test_bytes(self):
        assert size(512) == "512 Bytes"

    def test_integral_drops_decimal(self):
        assert size(1024) == "1 KiB"

    def test_rounds_to_one_decimal(self):
        assert size(1024 * 1024 * 1.26) == "1.3 MiB"

    def test_base(self):
        assert size(1, 1024 * 1024) == "1 MiB"

    def test_largest_unit(self):
        assert size(3 * 1024**8) == "3 YiB"

    def test_overflow_past_largest_unit(self):
        assert size(2048 * 1024**8) == "2048 YiB"
