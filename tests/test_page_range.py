"""Tests for page range parsing."""

import pytest

from pdf_freetext.core.page_range import PageRangeError, parse_page_range


@pytest.mark.parametrize(
    "spec, expected",
    [
        (None, [0, 1, 2, 3, 4]),
        ("all", [0, 1, 2, 3, 4]),
        ("first", [0]),
        ("last", [4]),
        ("3", [2]),
        ("2-4", [1, 2, 3]),
        ("4-", [3, 4]),
        ("-2", [0, 1]),
        ("2-99", [1, 2, 3, 4]),
    ],
)
def test_valid_ranges(spec, expected):
    assert parse_page_range(5, spec) == expected


@pytest.mark.parametrize("spec", ["0", "6", "abc", "4-2", "9-10"])
def test_invalid_ranges(spec):
    with pytest.raises(PageRangeError):
        parse_page_range(5, spec)


def test_empty_document():
    assert parse_page_range(0, "first") == []


def test_page_range_error_is_value_error():
    assert issubclass(PageRangeError, ValueError)
