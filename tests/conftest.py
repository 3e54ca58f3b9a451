"""
Pytest configuration for SortBench.

Provides fixtures for:
- Small string datasets with numeric, text and ragged columns
- Generated student lists
- Writing delimited files to a temporary directory
- Settings isolation for CLI tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List

import pytest

from sortbench.config import get_settings
from sortbench.datagen import generate_students
from sortbench.domain.models import Dataset, Student


@pytest.fixture
def people() -> Dataset:
    """Five rows: name (text), age (numeric), score (mixed)."""
    return Dataset(
        headers=["name", "age", "score"],
        records=[
            ["carol", "31", "88.5"],
            ["alice", "9", "n/a"],
            ["bob", "100", "72"],
            ["dave", "31", "90"],
            ["erin", "2.5", "65"],
        ],
    )


@pytest.fixture
def students() -> List[Student]:
    return generate_students(200, seed=7)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write raw text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def quiet_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Raise the log level so CLI output only carries command output, and make
    sure cached settings pick up the override.
    """
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
