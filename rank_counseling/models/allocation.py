"""
Allocation strategy and result models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .applicant import Applicant
from .interval import IntervalRecord


class StrategyKind(Enum):
    """
    The closed set of allocation strategies.

    RANK_INTERVAL: Look the rank up in the loaded interval records
    ROUND_TWO: Second counseling round, currently closed to everyone
    ROUND_THREE: Third counseling round, currently closed to everyone
    """
    RANK_INTERVAL = "rank_interval"
    ROUND_TWO = "round_two"
    ROUND_THREE = "round_three"


@dataclass
class AllocationResult:
    """
    Outcome of running one strategy for one applicant.

    Attributes:
        strategy: Strategy that produced this result
        applicant: Applicant the result belongs to
        message: College name, or the fixed message for the strategy
        matched: Interval record that produced the college, if any
    """
    strategy: StrategyKind
    applicant: Applicant
    message: str
    matched: Optional[IntervalRecord] = None

    @property
    def is_allocated(self) -> bool:
        return self.matched is not None
