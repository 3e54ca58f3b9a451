"""
Bubble sort.

Each pass swaps adjacent out-of-order pairs, pushing the largest remaining
element to the end of the unsorted prefix. Always O(n^2) comparisons; the
runner skips it on large inputs.
"""

from __future__ import annotations

import time
from typing import Any, List

from sortbench.algorithms.abstract import elapsed_ms
from sortbench.algorithms.comparator import build_comparator
from sortbench.domain.models import SortKey

NAME = "Bubble Sort"


def sort(items: List[Any], key: SortKey) -> float:
    compare = build_comparator(key)
    start = time.perf_counter()
    n = len(items)
    for i in range(n):
        for j in range(n - i - 1):
            if compare(items[j], items[j + 1]) > 0:
                items[j], items[j + 1] = items[j + 1], items[j]
    return elapsed_ms(start)


__all__ = ["NAME", "sort"]
