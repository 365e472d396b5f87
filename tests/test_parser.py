"""
Tests for data.parser

Test Coverage:
- parse_line(): delimiter splitting, integer bounds, college text
- parse_lines(): file order, blank lines, first error aborts
"""

import pytest

from rank_counseling.data import IntervalParser
from rank_counseling.errors import FormatError, ParseError
from rank_counseling.models import IntervalRecord


@pytest.fixture
def parser():
    return IntervalParser()


def test_parse_line_basic(parser):
    record = parser.parse_line("100-500:State University\n")
    assert record == IntervalRecord(100, 500, "State University")


def test_parse_line_splits_on_first_colon(parser):
    record = parser.parse_line("1-10:Campus: North")
    assert record.college == "Campus: North"


def test_parse_line_strips_crlf_only(parser):
    record = parser.parse_line("1-10: Spaced Name \r\n")
    assert record.college == " Spaced Name "


def test_parse_line_allows_whitespace_around_bounds(parser):
    record = parser.parse_line(" 5 - 9 :Gamma")
    assert (record.rank_start, record.rank_end) == (5, 9)


def test_parse_line_missing_colon(parser):
    with pytest.raises(FormatError, match="Invalid data format"):
        parser.parse_line("1-100 Alpha", line_number=3, source="x.txt")


def test_parse_line_missing_hyphen(parser):
    with pytest.raises(FormatError, match="Invalid rank range"):
        parser.parse_line("100:Alpha")


def test_parse_line_non_numeric_bound(parser):
    with pytest.raises(ParseError) as exc_info:
        parser.parse_line("1-abc:Alpha", line_number=2, source="x.txt")
    assert exc_info.value.line_number == 2
    assert "line 2" in str(exc_info.value)


def test_parse_line_negative_start_is_rejected(parser):
    with pytest.raises(ParseError):
        parser.parse_line("-5-10:Alpha")


def test_parse_line_keeps_inverted_range(parser):
    record = parser.parse_line("10-1:Backwards")
    assert record.rank_start == 10
    assert record.rank_end == 1


def test_parse_lines_preserves_order_and_skips_blank(parser):
    records = parser.parse_lines(["1-100:Alpha\n", "\n", "   \n", "101-200:Beta\n"])
    assert [r.college for r in records] == ["Alpha", "Beta"]


def test_parse_lines_reports_physical_line_number(parser):
    with pytest.raises(FormatError) as exc_info:
        parser.parse_lines(["1-100:Alpha\n", "\n", "bad line\n"])
    assert exc_info.value.line_number == 3
    assert exc_info.value.line == "bad line"


def test_parse_errors_are_value_errors(parser):
    with pytest.raises(ValueError):
        parser.parse_line("nothing here")
