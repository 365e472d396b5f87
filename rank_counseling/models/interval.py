"""
Interval data models.

Contains the IntervalRecord that maps an inclusive rank range to a college,
and the LoadResult returned by every successful load of an interval file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class IntervalRecord:
    """
    One line of the interval file.

    Records are immutable once loaded. A record whose start is greater than
    its end is accepted as-is and simply never matches.

    Attributes:
        rank_start: First rank covered (inclusive)
        rank_end: Last rank covered (inclusive)
        college: College allocated to any rank in the range
    """
    rank_start: int
    rank_end: int
    college: str

    def contains(self, rank: int) -> bool:
        """True if `rank` falls inside this interval, both ends included."""
        return self.rank_start <= rank <= self.rank_end


@dataclass(frozen=True)
class LoadResult:
    """
    Output of DataLoader.load().

    Attributes:
        records: Interval records in file order
        source: Path of the interval file that was read
        load_count: How many successful loads the loader has performed,
            including this one
    """
    records: Tuple[IntervalRecord, ...]
    source: Path
    load_count: int

    def __len__(self) -> int:
        return len(self.records)
