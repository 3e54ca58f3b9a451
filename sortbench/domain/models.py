"""
Domain models for SortBench.

A dataset is a header row plus string records, exactly as read from a
delimited file. Students are the structured records produced by the data
generator; they sort by a `SortPriority` instead of a column index.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, Field

Record = List[str]

STUDENT_HEADERS: List[str] = ["first_name", "last_name", "age", "act_score", "sat_score"]


class SortPriority(str, Enum):
    """Field a list of students is ordered by."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    AGE = "age"
    ACT_SCORE = "act_score"
    SAT_SCORE = "sat_score"

    @property
    def column_index(self) -> int:
        return STUDENT_HEADERS.index(self.value)


SortKey = Union[int, SortPriority]


class Student(BaseModel):
    """
    A generated student with ACT-equivalent and SAT-equivalent scores.
    """

    first_name: str = Field(..., description="Given name.")
    last_name: str = Field(..., description="Family name.")
    age: int = Field(..., ge=0, description="Age in years.")
    act_score: int = Field(..., ge=1, le=36, description="ACT composite score.")
    sat_score: int = Field(..., ge=400, le=1600, description="SAT total score.")

    model_config = {
        "frozen": True,
    }

    def to_record(self) -> Record:
        return [str(getattr(self, name)) for name in STUDENT_HEADERS]

    @classmethod
    def from_record(cls, record: Sequence[str]) -> "Student":
        return cls(**dict(zip(STUDENT_HEADERS, record)))


class Dataset(BaseModel):
    """
    Tabular data loaded from a delimited file.

    Rows are not required to have as many fields as there are headers; the
    comparator treats missing fields as empty strings.
    """

    headers: List[str] = Field(default_factory=list)
    records: List[Record] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.records)

    def column_index(self, name: str) -> int:
        """Return the zero-based index of a header, raising KeyError if absent."""
        try:
            return self.headers.index(name)
        except ValueError:
            raise KeyError(
                f"Unknown column '{name}'. Available: {', '.join(self.headers)}"
            ) from None

    def clone(self) -> List[Record]:
        """Independent copy of the records; the rows themselves are copied too."""
        return [list(record) for record in self.records]

    def sorted_copy(self, key: SortKey) -> "Dataset":
        # Imported lazily, algorithms depend on this module.
        from sortbench.algorithms import standard

        records = self.clone()
        standard.sort(records, key)
        return Dataset(headers=list(self.headers), records=records)


class BenchResult(BaseModel):
    """
    Outcome of one algorithm run. Created per run and never persisted.
    """

    name: str
    duration_ms: float = Field(0.0, ge=0.0)
    skipped: bool = False
    note: Optional[str] = None
    peak_traced_bytes: Optional[int] = None
    rss_delta_bytes: Optional[int] = None

    model_config = {
        "frozen": True,
    }


__all__ = [
    "BenchResult",
    "Dataset",
    "Record",
    "STUDENT_HEADERS",
    "SortKey",
    "SortPriority",
    "Student",
]
