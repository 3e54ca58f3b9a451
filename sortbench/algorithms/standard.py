"""
Standard library sort: the baseline the hand-written algorithms are
measured against. Delegates to Timsort through `functools.cmp_to_key`.
"""

from __future__ import annotations

import functools
import time
from typing import Any, List

from sortbench.algorithms.abstract import elapsed_ms
from sortbench.algorithms.comparator import build_comparator
from sortbench.domain.models import SortKey

NAME = "Std Sort"


def sort(items: List[Any], key: SortKey) -> float:
    comparator = build_comparator(key)
    sort_key = functools.cmp_to_key(comparator)
    start = time.perf_counter()
    items.sort(key=sort_key)
    return elapsed_ms(start)


__all__ = ["NAME", "sort"]
