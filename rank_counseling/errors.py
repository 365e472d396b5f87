"""
Exceptions raised by the allocation system.

Every error derives from AllocationError so the CLI can catch the whole
family in one place, print it and exit. The concrete classes also derive
from the matching built-in exception, so callers that only know about
FileNotFoundError or ValueError still catch them.
"""

from pathlib import Path
from typing import Optional, Union


class AllocationError(Exception):
    """Base class for every failure in the allocation pipeline."""


class FileOpenError(AllocationError, FileNotFoundError):
    """The indirection file or the interval data file could not be opened."""

    def __init__(self, path: Union[str, Path], reason: str = "Cannot open data file"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error: {reason}: {self.path}")


class _LineError(AllocationError, ValueError):
    """Shared shape for errors tied to one line of the interval file."""

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None,
                 line_number: Optional[int] = None, line: Optional[str] = None):
        self.source = source
        self.line_number = line_number
        self.line = line

        location = ""
        if source is not None and line_number is not None:
            location = f" ({source}, line {line_number})"
        elif line_number is not None:
            location = f" (line {line_number})"
        super().__init__(f"Error: {message}{location}")


class FormatError(_LineError):
    """A line is missing the ':' or '-' delimiter."""


class ParseError(_LineError):
    """A rank bound is not an integer."""


class InputError(AllocationError, ValueError):
    """The applicant typed something that is not a valid rank."""
