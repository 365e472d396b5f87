"""
Data models for the allocation system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .interval import IntervalRecord, LoadResult
from .applicant import Applicant
from .allocation import StrategyKind, AllocationResult

__all__ = [
    # Interval data
    "IntervalRecord",
    "LoadResult",
    # Applicant
    "Applicant",
    # Allocation
    "StrategyKind",
    "AllocationResult",
]
