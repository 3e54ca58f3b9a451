"""
Shared contracts for the sorting algorithms.

Every algorithm module exposes a `NAME` and a `sort(items, key)` function
matching the SortAlgorithm protocol: it resolves a comparator for `key`,
reorders `items` in place and returns the elapsed wall-clock time in
milliseconds.
"""

from __future__ import annotations

import time
from typing import Any, Callable, List, Protocol, runtime_checkable

from sortbench.domain.models import SortKey

# Three-way comparison: negative, zero or positive like the old cmp().
Comparator = Callable[[Any, Any], int]


@runtime_checkable
class SortAlgorithm(Protocol):
    """
    Common interface of the sorting functions.

    Parameters
    ----------
    items : list
        Records or students, reordered in place.
    key : int | SortPriority
        Column index for string records, or the student field to order by.

    Returns
    -------
    float
        Elapsed milliseconds measured around the sort itself.
    """

    def __call__(self, items: List[Any], key: SortKey) -> float:
        ...


def elapsed_ms(start: float) -> float:
    """Milliseconds since a `time.perf_counter()` reading."""
    return (time.perf_counter() - start) * 1000.0


__all__ = ["Comparator", "SortAlgorithm", "elapsed_ms"]
