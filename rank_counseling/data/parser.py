"""
Interval file parsing.

This module turns the raw text lines of an interval file into
IntervalRecord objects.
"""

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ..config import RECORD_SEPARATOR, RANGE_SEPARATOR
from ..errors import FormatError, ParseError
from ..models import IntervalRecord


class IntervalParser:
    """
    Parses `<start>-<end>:<college>` lines.

    SPLIT RULES:
    ------------
    1. Split the line on the FIRST ':'. Everything after it is the college
       name, so names may themselves contain colons.
    2. Split the left part on the FIRST '-'. This means a negative start
       bound ("-5-10") is rejected, since its start half is empty.
    3. Both halves must be integers (surrounding whitespace is allowed).

    Blank lines are skipped. The first malformed line aborts the parse, so
    a partially valid file never produces records.
    """

    def parse_lines(self, lines: Iterable[str],
                    source: Optional[Union[str, Path]] = None) -> Tuple[IntervalRecord, ...]:
        """
        Parse every line of an interval file.

        Args:
            lines: Raw lines (trailing newlines are fine)
            source: File the lines came from, used in error messages

        Returns:
            Records in file order
        """
        records = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            records.append(self.parse_line(line, line_number, source))
        return tuple(records)

    def parse_line(self, line: str, line_number: Optional[int] = None,
                   source: Optional[Union[str, Path]] = None) -> IntervalRecord:
        """
        Parse a single non-empty line.

        Raises:
            FormatError: Missing ':' or '-' delimiter
            ParseError: A bound is not an integer
        """
        text = line.rstrip("\r\n")

        rank_range, sep, college = text.partition(RECORD_SEPARATOR)
        if not sep:
            raise FormatError("Invalid data format in the data file",
                              source, line_number, text)

        start_text, sep, end_text = rank_range.partition(RANGE_SEPARATOR)
        if not sep:
            raise FormatError("Invalid rank range in the data file",
                              source, line_number, text)

        rank_start = self._parse_bound(start_text, "start", text, line_number, source)
        rank_end = self._parse_bound(end_text, "end", text, line_number, source)

        return IntervalRecord(rank_start=rank_start, rank_end=rank_end, college=college)

    @staticmethod
    def _parse_bound(value: str, which: str, line: str,
                     line_number: Optional[int], source) -> int:
        try:
            return int(value.strip())
        except ValueError:
            raise ParseError(f"Invalid rank {which} {value.strip()!r} in the data file",
                             source, line_number, line) from None
