"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the rank_counseling package.
"""

import sys
from typing import Iterable

from ..models import AllocationResult


class TerminalDisplay:
    """
    Terminal output for allocation results.

    Result and count lines are printed without styling so they stay easy to
    read from scripts; only the banner and errors are colored.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    CYAN = "\033[96m"

    @classmethod
    def print_banner(cls):
        """Print the welcome banner."""
        print(f"{cls.BOLD}{cls.CYAN}")
        print("╔══════════════════════════════════════════════════╗")
        print("║         COLLEGE ALLOCATION BY RANK               ║")
        print("╚══════════════════════════════════════════════════╝")
        print(f"{cls.RESET}")

    @classmethod
    def print_result(cls, result: AllocationResult):
        """Print one strategy's outcome."""
        print(f"Result: {result.message}")

    @classmethod
    def print_results(cls, results: Iterable[AllocationResult]):
        for result in results:
            cls.print_result(result)

    @classmethod
    def print_load_count(cls, count: int):
        print(f"Total interval strategy loads: {count}")

    @classmethod
    def print_error(cls, error: Exception):
        """Print an error message to stderr."""
        if sys.stderr.isatty():
            print(f"{cls.RED}{error}{cls.RESET}", file=sys.stderr)
        else:
            print(error, file=sys.stderr)
