"""
College Allocation Package
==========================

Allocates a college to an applicant from their rank, using a text file of
rank intervals.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                              │
│        (Pure logic - returns data structures, NO UI/printing)       │
│                                                                     │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────┐  │
│  │ DataLoader  │  │ IntervalParser  │  │    AllocationEngine     │  │
│  │  (I/O)      │  │ (parsing)       │  │ (first-match lookup)    │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                              │
│                        TerminalDisplay                               │
└─────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────┐
│                        CollegeCounselor                              │
│          (Orchestrator - connects algorithm to presentation)        │
└─────────────────────────────────────────────────────────────────────┘

DATA FILES
----------

sample_data/data.txt       One line: path of the interval file
sample_data/colleges.txt   One record per line, e.g. "100-500:State University"

USAGE
-----

    from rank_counseling import CollegeCounselor, Applicant

    counselor = CollegeCounselor()
    counselor.load("rank_counseling/sample_data/colleges.txt")
    for result in counselor.allocate(Applicant("Ada Lovelace", 150)):
        print(result.strategy, result.message)

Running from command line:

    python -m rank_counseling

"""

# Version
__version__ = "1.0.0"

# Main exports
from .counselor import CollegeCounselor
from .cli import main

# Model exports
from .models import (
    IntervalRecord,
    LoadResult,
    Applicant,
    StrategyKind,
    AllocationResult,
)

# Engine exports
from .engines import AllocationEngine, lookup_college

# Data exports
from .data import DataLoader, IntervalParser, resolve_data_path

# UI exports
from .ui import TerminalDisplay

# Error exports
from .errors import (
    AllocationError,
    FileOpenError,
    FormatError,
    ParseError,
    InputError,
)

# Configuration exports
from .config import (
    DATA_DIR,
    DEFAULT_POINTER_FILE,
    DEFAULT_DATA_FILE,
    NO_ALLOCATION_MESSAGE,
    ROUND_TWO_MESSAGE,
    ROUND_THREE_MESSAGE,
)

__all__ = [
    "__version__",
    # Main entry points
    "CollegeCounselor",
    "main",
    # Models
    "IntervalRecord",
    "LoadResult",
    "Applicant",
    "StrategyKind",
    "AllocationResult",
    # Engines
    "AllocationEngine",
    "lookup_college",
    # Data
    "DataLoader",
    "IntervalParser",
    "resolve_data_path",
    # UI
    "TerminalDisplay",
    # Errors
    "AllocationError",
    "FileOpenError",
    "FormatError",
    "ParseError",
    "InputError",
    # Config
    "DATA_DIR",
    "DEFAULT_POINTER_FILE",
    "DEFAULT_DATA_FILE",
    "NO_ALLOCATION_MESSAGE",
    "ROUND_TWO_MESSAGE",
    "ROUND_THREE_MESSAGE",
]
