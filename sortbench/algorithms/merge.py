"""
Top-down merge sort.

Splits the range in half, sorts both halves and merges them through a fresh
buffer that is copied back over the range. The left element wins unless it
compares greater, so equal elements keep their relative order.
"""

from __future__ import annotations

import time
from typing import Any, List

from sortbench.algorithms.abstract import Comparator, elapsed_ms
from sortbench.algorithms.comparator import build_comparator
from sortbench.domain.models import SortKey

NAME = "Merge Sort"


def _merge_sort(items: List[Any], lo: int, hi: int, compare: Comparator) -> None:
    mid = (hi - lo) // 2
    if mid == 0:
        return
    mid += lo

    _merge_sort(items, lo, mid, compare)
    _merge_sort(items, mid, hi, compare)

    merged: List[Any] = []
    i, j = lo, mid
    while i < mid and j < hi:
        if compare(items[i], items[j]) <= 0:
            merged.append(items[i])
            i += 1
        else:
            merged.append(items[j])
            j += 1
    merged.extend(items[i:mid])
    merged.extend(items[j:hi])

    items[lo:hi] = merged


def sort(items: List[Any], key: SortKey) -> float:
    compare = build_comparator(key)
    start = time.perf_counter()
    _merge_sort(items, 0, len(items), compare)
    return elapsed_ms(start)


__all__ = ["NAME", "sort"]
