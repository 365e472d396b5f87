"""
Tests for data.loader

Test Coverage:
- DataLoader.load(): records, load count, failures
- resolve_data_path(): indirection file handling
"""

import pytest

from rank_counseling.config import DEFAULT_DATA_FILE, DEFAULT_POINTER_FILE
from rank_counseling.data import DataLoader, resolve_data_path
from rank_counseling.errors import FileOpenError, FormatError, ParseError


def test_load_returns_records_in_file_order(alpha_beta_file):
    result = DataLoader().load(alpha_beta_file)
    assert [r.college for r in result.records] == ["Alpha", "Beta"]
    assert result.source == alpha_beta_file
    assert len(result) == 2


def test_load_count_increments_once_per_load(alpha_beta_file):
    loader = DataLoader()
    assert loader.load_count == 0
    assert loader.load(alpha_beta_file).load_count == 1
    assert loader.load(alpha_beta_file).load_count == 2
    assert loader.load_count == 2


def test_load_count_is_per_loader(alpha_beta_file):
    DataLoader().load(alpha_beta_file)
    assert DataLoader().load(alpha_beta_file).load_count == 1


def test_failed_load_does_not_count(write_file, alpha_beta_file):
    bad = write_file("bad.txt", "1-100:Alpha\n101-x:Beta\n")
    loader = DataLoader()
    with pytest.raises(ParseError):
        loader.load(bad)
    assert loader.load_count == 0
    assert loader.load(alpha_beta_file).load_count == 1


def test_malformed_file_fails_before_any_record(write_file):
    bad = write_file("bad.txt", "1-100:Alpha\nno delimiter\n")
    with pytest.raises(FormatError):
        DataLoader().load(bad)


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileOpenError) as exc_info:
        DataLoader().load(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value, FileNotFoundError)


def test_load_uses_default_path(alpha_beta_file):
    result = DataLoader(default_path=alpha_beta_file).load()
    assert result.source == alpha_beta_file


def test_empty_file_loads_no_records(write_file):
    empty = write_file("empty.txt", "")
    result = DataLoader().load(empty)
    assert result.records == ()
    assert result.load_count == 1


def test_resolve_relative_target(pointer_file, alpha_beta_file):
    assert resolve_data_path(pointer_file) == alpha_beta_file


def test_resolve_absolute_target(write_file, alpha_beta_file):
    pointer = write_file("abs.txt", f"{alpha_beta_file}\nignored second line\n")
    assert resolve_data_path(pointer) == alpha_beta_file


def test_resolve_missing_pointer_file(tmp_path):
    with pytest.raises(FileOpenError, match="Cannot open path file"):
        resolve_data_path(tmp_path / "data.txt")


def test_resolve_empty_pointer_file(write_file):
    pointer = write_file("data.txt", "\n")
    with pytest.raises(FileOpenError, match="empty"):
        resolve_data_path(pointer)


def test_resolve_missing_target(write_file):
    pointer = write_file("data.txt", "missing.txt\n")
    with pytest.raises(FileOpenError, match="Cannot open data file"):
        resolve_data_path(pointer)


def test_load_accepts_byte_order_mark(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbf1-100:Alpha\n")
    result = DataLoader().load(path)
    assert result.records[0].rank_start == 1
    assert result.records[0].college == "Alpha"


def test_resolve_pointer_with_byte_order_mark(tmp_path, alpha_beta_file):
    pointer = tmp_path / "data.txt"
    pointer.write_bytes(b"\xef\xbb\xbf" + alpha_beta_file.name.encode() + b"\n")
    assert resolve_data_path(pointer) == alpha_beta_file


def test_load_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"1-100:Caf\xe9 College\n")
    loader = DataLoader()
    with pytest.raises(FileOpenError, match="UTF-8"):
        loader.load(path)
    assert loader.load_count == 0


def test_resolve_rejects_invalid_utf8_pointer(tmp_path):
    pointer = tmp_path / "data.txt"
    pointer.write_bytes(b"caf\xe9.txt\n")
    with pytest.raises(FileOpenError, match="UTF-8"):
        resolve_data_path(pointer)


def test_default_files_resolve():
    data_path = resolve_data_path(DEFAULT_POINTER_FILE)
    assert data_path.is_file()
    assert DataLoader().load(data_path).records
    assert DataLoader().load().source == DEFAULT_DATA_FILE
