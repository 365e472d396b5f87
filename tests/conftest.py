import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path so rank_counseling imports without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper that writes text to a file under tmp_path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def alpha_beta_file(write_file):
    """Two adjacent intervals."""
    return write_file("colleges.txt", "1-100:Alpha\n101-200:Beta\n")


@pytest.fixture
def pointer_file(write_file, alpha_beta_file):
    """Indirection file pointing at alpha_beta_file by relative path."""
    return write_file("data.txt", f"{alpha_beta_file.name}\n")
