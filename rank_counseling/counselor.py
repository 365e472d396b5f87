"""
College Counselor - Main Orchestrator.

This module contains the CollegeCounselor class that connects the
algorithm layer to the presentation layer.
"""

from pathlib import Path
from typing import List, Optional, Union

from .data import DataLoader
from .engines import AllocationEngine
from .errors import AllocationError
from .models import Applicant, AllocationResult, LoadResult
from .ui import TerminalDisplay


class CollegeCounselor:
    """
    Main interface for the college allocation system.

    1. Loads the interval file (DataLoader)
    2. Runs every allocation strategy for the applicant (AllocationEngine)
    3. Passes the results to the display

    USAGE:
        counselor = CollegeCounselor()
        counselor.load("rank_counseling/sample_data/colleges.txt")
        results = counselor.allocate(Applicant("Ada", 150))
        results[0].message  # "Beta"
    """

    def __init__(self, loader: Optional[DataLoader] = None,
                 display: Optional[TerminalDisplay] = None):
        self.loader = loader or DataLoader()
        self.display = display or TerminalDisplay()
        self.loaded: Optional[LoadResult] = None
        self.engine: Optional[AllocationEngine] = None

    def load(self, data_path: Optional[Union[str, Path]] = None) -> LoadResult:
        """Load an interval file and build the engine on top of it."""
        self.loaded = self.loader.load(data_path)
        self.engine = AllocationEngine(self.loaded.records)
        return self.loaded

    def allocate(self, applicant: Applicant) -> List[AllocationResult]:
        """
        Run every strategy for `applicant`.

        Raises:
            AllocationError: If no interval file has been loaded yet
        """
        if self.engine is None:
            raise AllocationError("Error: No interval data loaded.")
        return self.engine.allocate_all(applicant)

    def run(self, applicant: Applicant,
            data_path: Optional[Union[str, Path]] = None) -> List[AllocationResult]:
        """Load, allocate and print the results along with the load count."""
        loaded = self.load(data_path)
        results = self.allocate(applicant)
        self.display.print_results(results)
        self.display.print_load_count(loaded.load_count)
        return results
