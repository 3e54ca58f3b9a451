"""
Comparator factory.

String records are compared field by field: numerically when both fields
are plain numbers, by codepoint order otherwise. Students are compared on the
attribute named by a SortPriority using its native type.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Sequence

from sortbench.algorithms.abstract import Comparator
from sortbench.domain.models import SortPriority

# Plain ASCII decimal or scientific notation, or inf/infinity/nan. Padding,
# digit-group underscores and non-ASCII digits are text.
_NUMBER = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)


def _sign(a: Any, b: Any) -> int:
    # NaN compares neither less nor greater, so it lands on 0.
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _as_float(value: str) -> Optional[float]:
    if not _NUMBER.fullmatch(value):
        return None
    return float(value)


def _field(record: Sequence[str], index: int) -> str:
    if 0 <= index < len(record):
        return record[index]
    return ""


def compare_values(a: str, b: str) -> int:
    """
    Compare two raw field values.

    Numeric when both are plain ASCII numbers, lexicographic otherwise.
    """
    num_a = _as_float(a)
    if num_a is not None:
        num_b = _as_float(b)
        if num_b is not None:
            return _sign(num_a, num_b)
    return _sign(a, b)


def build_comparator(key: Any) -> Comparator:
    """
    Build the ordering function for a column index or a SortPriority.

    Raises
    ------
    TypeError
        If `key` is neither an int nor a SortPriority.
    """
    if isinstance(key, SortPriority):
        attribute = key.value

        def compare_students(a: Any, b: Any) -> int:
            return _sign(getattr(a, attribute), getattr(b, attribute))

        return compare_students

    if isinstance(key, int) and not isinstance(key, bool):
        index = key

        def compare_records(a: Sequence[str], b: Sequence[str]) -> int:
            return compare_values(_field(a, index), _field(b, index))

        return compare_records

    raise TypeError(f"Sort key must be a column index or SortPriority, got {key!r}")


__all__ = ["build_comparator", "compare_values"]
