"""
Quick sort with a fixed middle-element pivot.

The pivot is swapped to the end of the range, every element strictly less
than it is moved to the front, and the pivot is dropped in between. There is
no randomization: the pivot choice is part of what is being benchmarked, and
adversarial inputs can still drive it to O(n^2) comparisons.

Only the smaller partition is recursed into; the larger one is handled by
the enclosing loop so the call depth stays logarithmic. The sequence of
partitions is the same as with two recursive calls.
"""

from __future__ import annotations

import time
from typing import Any, List

from sortbench.algorithms.abstract import Comparator, elapsed_ms
from sortbench.algorithms.comparator import build_comparator
from sortbench.domain.models import SortKey

NAME = "Quick Sort"


def _partition(items: List[Any], lo: int, hi: int, compare: Comparator) -> int:
    """Partition items[lo:hi] and return the final pivot position."""
    last = hi - 1
    mid = lo + (hi - lo) // 2
    items[mid], items[last] = items[last], items[mid]
    pivot = items[last]

    store = lo
    for j in range(lo, last):
        if compare(items[j], pivot) < 0:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[last] = items[last], items[store]
    return store


def _quick_sort(items: List[Any], lo: int, hi: int, compare: Comparator) -> None:
    while hi - lo > 1:
        p = _partition(items, lo, hi, compare)
        if p - lo < hi - (p + 1):
            _quick_sort(items, lo, p, compare)
            lo = p + 1
        else:
            _quick_sort(items, p + 1, hi, compare)
            hi = p


def sort(items: List[Any], key: SortKey) -> float:
    compare = build_comparator(key)
    start = time.perf_counter()
    _quick_sort(items, 0, len(items), compare)
    return elapsed_ms(start)


__all__ = ["NAME", "sort"]
