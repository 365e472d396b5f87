"""
Configuration constants for the college allocation system.

This module contains the file locations, data-format delimiters and fixed
messages used throughout the package. Centralizing these makes it easy to
adjust behavior when the data files or the round policies change.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Sample files, installed as package data
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "sample_data"

# Indirection file: its first line holds the path of the interval file
DEFAULT_POINTER_FILE = DATA_DIR / "data.txt"

# Used when a loader is asked to load without an explicit path
DEFAULT_DATA_FILE = DATA_DIR / "default_data.txt"

# utf-8-sig also accepts files saved with a byte-order mark
FILE_ENCODING = "utf-8-sig"


# =============================================================================
# DATA FORMAT
# =============================================================================
# One record per line:  <start>-<end>:<college name>
#   e.g. 100-500:State University
# Both bounds are inclusive.

RECORD_SEPARATOR = ":"
RANGE_SEPARATOR = "-"


# =============================================================================
# ALLOCATION MESSAGES
# =============================================================================

NO_ALLOCATION_MESSAGE = "No college allocated for your rank."

# Later counseling rounds are not open yet; every applicant gets these
ROUND_TWO_MESSAGE = "not eligible for round two"
ROUND_THREE_MESSAGE = "not eligible for round three"
