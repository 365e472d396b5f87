"""
Allocation Engine.

This module maps an applicant to a college for each allocation strategy.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import NO_ALLOCATION_MESSAGE, ROUND_TWO_MESSAGE, ROUND_THREE_MESSAGE
from ..models import Applicant, AllocationResult, IntervalRecord, StrategyKind


def lookup_college(records: Iterable[IntervalRecord],
                   rank: int) -> Tuple[str, Optional[IntervalRecord]]:
    """
    Find the college for `rank`.

    Records are scanned in file order and the first interval containing the
    rank wins; later overlapping intervals are never considered.

    Returns:
        (college, record) on a match, otherwise
        (NO_ALLOCATION_MESSAGE, None)
    """
    for record in records:
        if record.contains(rank):
            return record.college, record
    return NO_ALLOCATION_MESSAGE, None


class AllocationEngine:
    """
    Runs allocation strategies against a loaded set of interval records.

    STRATEGIES:
    -----------
    - RANK_INTERVAL: Linear scan of the interval records (lookup_college)
    - ROUND_TWO / ROUND_THREE: Fixed messages, the rank is ignored

    The engine never mutates the records it was given.
    """

    FIXED_RESPONSES = {
        StrategyKind.ROUND_TWO: ROUND_TWO_MESSAGE,
        StrategyKind.ROUND_THREE: ROUND_THREE_MESSAGE,
    }

    def __init__(self, records: Sequence[IntervalRecord]):
        self.records = tuple(records)

    def allocate(self, kind: StrategyKind, applicant: Applicant) -> AllocationResult:
        """
        Allocate a college to `applicant` using one strategy.

        Raises:
            ValueError: If `kind` is not a known strategy
        """
        if kind is StrategyKind.RANK_INTERVAL:
            message, matched = lookup_college(self.records, applicant.rank)
            return AllocationResult(kind, applicant, message, matched)
        elif kind in self.FIXED_RESPONSES:
            return AllocationResult(kind, applicant, self.FIXED_RESPONSES[kind])
        raise ValueError(f"Unknown allocation strategy: {kind!r}")

    def allocate_all(self, applicant: Applicant) -> List[AllocationResult]:
        """Run every strategy, in declaration order."""
        return [self.allocate(kind, applicant) for kind in StrategyKind]
