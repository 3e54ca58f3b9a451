"""
Domain package for SortBench.

Exports the records, datasets, students and result models shared by the
algorithms, the runner and the CLI.
"""

from sortbench.domain.models import (
    STUDENT_HEADERS,
    BenchResult,
    Dataset,
    Record,
    SortKey,
    SortPriority,
    Student,
)

__all__ = [
    "BenchResult",
    "Dataset",
    "Record",
    "STUDENT_HEADERS",
    "SortKey",
    "SortPriority",
    "Student",
]
