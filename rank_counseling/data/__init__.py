"""
Data loading and parsing module.

This package handles all file I/O and interval parsing.
"""

from .loader import DataLoader, resolve_data_path
from .parser import IntervalParser

__all__ = ["DataLoader", "IntervalParser", "resolve_data_path"]
