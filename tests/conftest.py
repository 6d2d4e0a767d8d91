"""Test fixtures for numproc."""

import pytest
from unittest.mock import MagicMock

from numproc.observers import NumberObserver


@pytest.fixture
def number_file(tmp_path):
    """Write text to a numbers file and return its path."""

    def _write(content, name="numbers.txt"):
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write


@pytest.fixture
def sample_numbers_file(number_file):
    """Numbers file with mixed valid and invalid tokens."""
    return number_file("1 2 3\nfoo 4\n\n  5 6  \n")


@pytest.fixture
def mock_observer():
    """Observer mock that records calls."""
    return MagicMock(spec=NumberObserver)


@pytest.fixture
def mock_reader():
    """Reader mock returning a fixed list of numbers."""
    reader = MagicMock()
    reader.read.return_value = [1, 2, 3, 4, 5, 6]
    return reader
