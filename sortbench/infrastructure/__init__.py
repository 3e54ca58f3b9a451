"""
Infrastructure package for SortBench.

Centralizes file I/O: delimiter detection, CSV loading and exporting. Keep
this layer decoupled from the algorithms and the runner.
"""

from sortbench.infrastructure.csv_io import (
    DatasetError,
    DatasetIOError,
    DatasetNotFoundError,
    DatasetParseError,
    detect_delimiter,
    load_csv,
    save_csv,
)

__all__ = [
    "DatasetError",
    "DatasetIOError",
    "DatasetNotFoundError",
    "DatasetParseError",
    "detect_delimiter",
    "load_csv",
    "save_csv",
]
