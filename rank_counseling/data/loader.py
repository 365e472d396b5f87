"""
Interval file loading.

This module handles locating the interval file through the indirection
file and reading it into memory.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_DATA_FILE, FILE_ENCODING
from ..errors import FileOpenError
from ..models import LoadResult
from .parser import IntervalParser

logger = logging.getLogger(__name__)


def resolve_data_path(pointer_path: Union[str, Path]) -> Path:
    """
    Read the indirection file and return the interval file it points to.

    The first line of `pointer_path` holds the path of the interval file.
    A relative path is taken relative to the indirection file's directory.

    Raises:
        FileOpenError: If the indirection file cannot be opened or decoded,
            is empty, or points to a file that does not exist
    """
    pointer_path = Path(pointer_path)
    try:
        with open(pointer_path, "r", encoding=FILE_ENCODING) as f:
            target = f.readline().strip()
    except OSError:
        raise FileOpenError(pointer_path, "Cannot open path file") from None
    except UnicodeDecodeError:
        raise FileOpenError(pointer_path, "Cannot read path file as UTF-8") from None

    if not target:
        raise FileOpenError(pointer_path, "Path file is empty")

    data_path = Path(target)
    if not data_path.is_absolute():
        data_path = pointer_path.parent / data_path

    if not data_path.is_file():
        raise FileOpenError(data_path, "Cannot open data file")
    return data_path


class DataLoader:
    """
    Loads interval files into memory.

    The file is read once per load() call and held fully in memory; nothing
    is cached across calls.

    LOAD COUNT:
    -----------
    Each loader counts its own successful loads and returns the count in
    every LoadResult. Failed loads leave the count unchanged.

    Usage:
        loader = DataLoader()
        result = loader.load("data/colleges.txt")
        result.records     # (IntervalRecord, ...)
        result.load_count  # 1
    """

    def __init__(self, default_path: Union[str, Path] = DEFAULT_DATA_FILE,
                 parser: Optional[IntervalParser] = None):
        self.default_path = Path(default_path)
        self.parser = parser or IntervalParser()
        self._load_count = 0

    @property
    def load_count(self) -> int:
        """Number of successful loads performed by this loader."""
        return self._load_count

    def load(self, path: Optional[Union[str, Path]] = None) -> LoadResult:
        """
        Load and parse an interval file.

        Args:
            path: Interval file to read (defaults to `default_path`)

        Returns:
            LoadResult with the records in file order

        Raises:
            FileOpenError: The file cannot be opened or is not UTF-8
            FormatError: A line is missing a delimiter
            ParseError: A bound is not an integer
        """
        path = Path(path) if path is not None else self.default_path
        try:
            with open(path, "r", encoding=FILE_ENCODING) as f:
                lines = f.readlines()
        except OSError:
            raise FileOpenError(path) from None
        except UnicodeDecodeError:
            raise FileOpenError(path, "Cannot read data file as UTF-8") from None

        records = self.parser.parse_lines(lines, source=path)

        self._load_count += 1
        logger.debug(f"Loaded {len(records)} interval records from {path}")
        return LoadResult(records=records, source=path, load_count=self._load_count)
