"""
Pytest configuration and fixtures for wkdbg tests.
"""
import sys
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))


class FakeStat:
    """Status probe that only succeeds for a fixed set of paths and records calls."""

    def __init__(self, existing=(), *, error=FileNotFoundError):
        self.existing = set(existing)
        self.error = error
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        if path not in self.existing:
            raise self.error(path)
        return {"path": path}


@pytest.fixture
def fake_stat():
    """Factory fixture: ``fake_stat(existing_paths)`` -> FakeStat."""
    return FakeStat
