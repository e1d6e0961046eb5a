"""
Tests for the hydroutils public surface.
"""

import hydroutils


def test_public_names_resolve():
    for name in hydroutils.__all__:
        assert hasattr(hydroutils, name), name


def test_examples_through_package():
    assert hydroutils.format_string("{0}-{1}", "a", "b") == "a-b"
    assert hydroutils.parse_time_ms("2s") == 2000
    assert hydroutils.size(1536) == "1.5 KiB"
    assert hydroutils.camel_case({"a_b": 1}) == {"aB": 1}
