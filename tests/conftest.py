import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path so core/parsing/config import without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from parsing import Cursor  # noqa: E402


@pytest.fixture
def make_cursor():
    """Return a factory building a fresh cursor positioned at an offset."""
    def factory(text, offset=0):
        cursor = Cursor(text)
        cursor.offset = offset
        return cursor
    return factory
