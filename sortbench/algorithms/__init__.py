"""
Sorting algorithms package for SortBench.

`ALGORITHMS` maps machine-friendly names to sort functions in the order the
runner reports them: the library baseline first, then the O(n log n)
algorithms, then the quadratic ones.
"""

from typing import Dict, Tuple

from sortbench.algorithms import bubble, insertion, merge, quick, standard
from sortbench.algorithms.abstract import Comparator, SortAlgorithm, elapsed_ms
from sortbench.algorithms.comparator import build_comparator, compare_values

ALGORITHMS: Dict[str, SortAlgorithm] = {
    "standard": standard.sort,
    "merge": merge.sort,
    "quick": quick.sort,
    "bubble": bubble.sort,
    "insertion": insertion.sort,
}

DISPLAY_NAMES: Dict[str, str] = {
    "standard": standard.NAME,
    "merge": merge.NAME,
    "quick": quick.NAME,
    "bubble": bubble.NAME,
    "insertion": insertion.NAME,
}

QUADRATIC: Tuple[str, ...] = ("bubble", "insertion")

__all__ = [
    "ALGORITHMS",
    "DISPLAY_NAMES",
    "QUADRATIC",
    "Comparator",
    "SortAlgorithm",
    "build_comparator",
    "compare_values",
    "elapsed_ms",
]
