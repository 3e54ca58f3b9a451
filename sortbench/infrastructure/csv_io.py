"""
Delimited file loading and exporting for SortBench.

The loader sniffs the delimiter from the first line by counting the candidate
characters and picking the most frequent one, falling back to a comma. The
exporter always writes comma-separated output with minimal quoting.

Failures are raised as DatasetError subclasses carrying the offending path so
callers can report them without inspecting OS error codes.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from sortbench.domain.models import Dataset, Record
from sortbench.utils.logging import get_logger

log = get_logger(__name__)

DELIMITER_CANDIDATES = (",", ";", "\t", "|")
DEFAULT_DELIMITER = ","


class DatasetError(Exception):
    """Base class for load/export failures."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class DatasetNotFoundError(DatasetError):
    """The source file does not exist."""


class DatasetParseError(DatasetError):
    """The file could be read but not parsed as delimited text."""


class DatasetIOError(DatasetError):
    """Any other operating system failure while reading or writing."""


def _pick_delimiter(first_line: str) -> str:
    best = DEFAULT_DELIMITER
    best_count = 0
    for candidate in DELIMITER_CANDIDATES:
        count = first_line.count(candidate)
        if count > best_count:
            best, best_count = candidate, count
    return best


def detect_delimiter(path: Path | str) -> str:
    """
    Guess the delimiter of a file from its first line.

    Ties keep the earlier candidate, so a line without any candidate (or an
    unreadable file) yields a comma.
    """
    try:
        with Path(path).open("r", encoding="utf-8-sig", newline="") as f:
            first_line = f.readline()
    except (OSError, UnicodeDecodeError):
        return DEFAULT_DELIMITER
    return _pick_delimiter(first_line)


def load_csv(path: Path | str, delimiter: Optional[str] = None) -> Dataset:
    """
    Read a delimited file into a Dataset.

    The first non-blank row becomes the header. Rows with a different number
    of fields than the header are kept as-is.

    Raises
    ------
    DatasetNotFoundError
        If `path` does not exist.
    DatasetParseError
        If the content is not valid delimited text or not UTF-8.
    DatasetIOError
        For any other read failure.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetNotFoundError(path, "file not found")

    sep = delimiter or detect_delimiter(path)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            rows = [row for row in csv.reader(f, delimiter=sep, strict=True) if row]
    except csv.Error as exc:
        raise DatasetParseError(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DatasetParseError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise DatasetIOError(path, exc.strerror or str(exc)) from exc

    if not rows:
        log.warning("Loaded empty file", extra={"path": str(path)})
        return Dataset()

    headers, records = rows[0], rows[1:]
    ragged = sum(1 for record in records if len(record) != len(headers))
    if ragged:
        log.warning(
            f"{ragged} row(s) do not match the header width",
            extra={"path": str(path), "ragged_rows": ragged},
        )
    log.info(
        "Dataset loaded",
        extra={"path": str(path), "rows": len(records), "delimiter": sep},
    )
    return Dataset(headers=headers, records=records)


def save_csv(path: Path | str, headers: Sequence[str], records: Iterable[Record]) -> None:
    """
    Write headers and records as a comma-separated file.

    Raises
    ------
    DatasetIOError
        If the file or its parent directory cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, delimiter=DEFAULT_DELIMITER, quoting=csv.QUOTE_MINIMAL)
            writer.writerow(headers)
            writer.writerows(records)
    except OSError as exc:
        raise DatasetIOError(path, exc.strerror or str(exc)) from exc
    log.info("Dataset exported", extra={"path": str(path)})


__all__ = [
    "DELIMITER_CANDIDATES",
    "DatasetError",
    "DatasetIOError",
    "DatasetNotFoundError",
    "DatasetParseError",
    "detect_delimiter",
    "load_csv",
    "save_csv",
]
