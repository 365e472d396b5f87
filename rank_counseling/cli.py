"""
Command-Line Interface for the allocation system.

Prompts for the applicant's name and rank, then prints one result line per
allocation strategy and the number of interval loads performed.

Run from the repository root:
    python3 -m rank_counseling
"""

import sys
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_POINTER_FILE
from .counselor import CollegeCounselor
from .data import resolve_data_path
from .errors import AllocationError, InputError
from .models import Applicant
from .ui import TerminalDisplay


def _prompt(label: str) -> str:
    try:
        return input(label)
    except EOFError:
        raise InputError("Error: Input ended before all answers were given.") from None


def main(pointer_path: Optional[Union[str, Path]] = None) -> int:
    """
    Interactive allocation.

    The interval file is located through the indirection file before any
    prompt is shown, so a missing file fails fast.

    Returns:
        0 on success, 1 if any AllocationError was raised
    """
    pointer_path = pointer_path or DEFAULT_POINTER_FILE

    try:
        data_path = resolve_data_path(pointer_path)

        TerminalDisplay.print_banner()
        name = _prompt("Enter your name: ")
        raw_rank = _prompt("Enter your rank: ")
        applicant = Applicant.from_input(name, raw_rank)

        counselor = CollegeCounselor()
        counselor.run(applicant, data_path)
    except AllocationError as e:
        TerminalDisplay.print_error(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
