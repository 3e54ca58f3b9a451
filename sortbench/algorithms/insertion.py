"""
Insertion sort. Linear on already sorted input, quadratic otherwise.
"""

from __future__ import annotations

import time
from typing import Any, List

from sortbench.algorithms.abstract import elapsed_ms
from sortbench.algorithms.comparator import build_comparator
from sortbench.domain.models import SortKey

NAME = "Insertion Sort"


def sort(items: List[Any], key: SortKey) -> float:
    compare = build_comparator(key)
    start = time.perf_counter()
    for i in range(1, len(items)):
        j = i
        while j > 0 and compare(items[j - 1], items[j]) > 0:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return elapsed_ms(start)


__all__ = ["NAME", "sort"]
