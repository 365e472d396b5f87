"""
Allocation engines.

This package contains the pure-logic allocation code (no I/O, no printing).
"""

from .allocation import AllocationEngine, lookup_college

__all__ = ["AllocationEngine", "lookup_college"]
