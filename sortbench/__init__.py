"""
SortBench - benchmarking suite for classic sorting algorithms on tabular data.

Loads delimited files, orders them by a chosen column and times five
algorithms against independent copies of the same rows:

- Standard library sort (baseline)
- Merge sort
- Quick sort (fixed middle pivot)
- Bubble sort
- Insertion sort

Columns compare numerically when both values parse as numbers and
lexicographically otherwise. Generated student records can also be ordered
by a typed field.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sortbench.algorithms import ALGORITHMS, SortAlgorithm, build_comparator, compare_values
from sortbench.config import Settings, get_settings
from sortbench.domain.models import BenchResult, Dataset, Record, SortPriority, Student
from sortbench.infrastructure.csv_io import (
    DatasetError,
    DatasetIOError,
    DatasetNotFoundError,
    DatasetParseError,
    detect_delimiter,
    load_csv,
    save_csv,
)
from sortbench.runner import available_algorithms, run_benchmarks, sort_dataset
from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, profile_block

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "BenchResult",
    "Dataset",
    "Record",
    "SortPriority",
    "Student",
    # Algorithms
    "ALGORITHMS",
    "SortAlgorithm",
    "build_comparator",
    "compare_values",
    # Runner
    "available_algorithms",
    "run_benchmarks",
    "sort_dataset",
    # File I/O
    "DatasetError",
    "DatasetIOError",
    "DatasetNotFoundError",
    "DatasetParseError",
    "detect_delimiter",
    "load_csv",
    "save_csv",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]
