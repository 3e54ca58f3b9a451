"""
Benchmark runner: executes every configured algorithm against its own copy
of a dataset and collects one BenchResult per algorithm.

Usage:
    from sortbench.runner import run_benchmarks

    results = run_benchmarks(dataset, key=dataset.column_index("age"))
    for result in results:
        print(result.name, result.duration_ms)

The canonical data is never mutated. Quadratic algorithms are replaced by a
zero-duration placeholder when the row count exceeds the size guard.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Union

from sortbench.algorithms import ALGORITHMS, DISPLAY_NAMES, QUADRATIC, SortAlgorithm
from sortbench.config import get_settings
from sortbench.domain.models import BenchResult, Dataset, SortKey
from sortbench.utils.logging import get_logger
from sortbench.utils.profiler import profile_block

log = get_logger(__name__)

Items = Union[Dataset, Sequence[Any]]


def available_algorithms() -> List[str]:
    """List algorithm names in reporting order."""
    return list(ALGORITHMS.keys())


def _resolve_algorithm(name: str) -> SortAlgorithm:
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}'. Available: {', '.join(ALGORITHMS)}")
    return ALGORITHMS[name]


def _resolve_names(names: Optional[Iterable[str]]) -> List[str]:
    requested = list(names) if names is not None else ["all"]
    if not requested or requested == ["all"]:
        return available_algorithms()
    for name in requested:
        _resolve_algorithm(name)
    # Reporting order is fixed regardless of how the caller listed them.
    return [name for name in ALGORITHMS if name in requested]


def _clone(items: Items) -> List[Any]:
    if isinstance(items, Dataset):
        return items.clone()
    return [list(item) if isinstance(item, list) else item for item in items]


def _skipped_result(name: str, rows: int, threshold: int) -> BenchResult:
    return BenchResult(
        name=DISPLAY_NAMES[name],
        duration_ms=0.0,
        skipped=True,
        note=f"Skipped: {rows} rows exceeds the O(n^2) limit of {threshold}.",
    )


def _execute(name: str, items: Items, key: SortKey, profile_memory: bool) -> BenchResult:
    algorithm = _resolve_algorithm(name)
    working = _clone(items)
    log.info(f"[ALGORITHM START] {name}", extra={"algorithm": name, "rows": len(working)})

    if profile_memory:
        with profile_block(name) as stats:
            duration_ms = algorithm(working, key)
        peak = stats.peak_traced_bytes
        rss_delta = stats.rss_delta_bytes
    else:
        duration_ms = algorithm(working, key)
        peak = rss_delta = None

    log.info(
        f"[ALGORITHM DONE] {name}",
        extra={
            "algorithm": name,
            "duration_ms": round(duration_ms, 3),
            "peak_traced_bytes": peak,
            "rss_delta_bytes": rss_delta,
        },
    )
    return BenchResult(
        name=DISPLAY_NAMES[name],
        duration_ms=max(duration_ms, 0.0),
        peak_traced_bytes=peak,
        rss_delta_bytes=rss_delta,
    )


def run_benchmarks(
    items: Items,
    key: SortKey,
    algorithms: Optional[Iterable[str]] = None,
    size_guard: Optional[int] = None,
    profile_memory: Optional[bool] = None,
) -> List[BenchResult]:
    """
    Run the selected algorithms over independent copies of `items`.

    Parameters
    ----------
    items : Dataset | sequence
        A dataset, a list of string records, or a list of students.
    key : int | SortPriority
        Column index for records, or the student field to order by.
    algorithms : iterable[str] | None
        Algorithm names to run. None or ["all"] runs every algorithm.
    size_guard : int | None
        Row count above which bubble and insertion sort are skipped.
        Defaults to settings.size_guard_threshold; 0 disables the guard.
    profile_memory : bool | None
        Record peak traced allocations and the RSS change per algorithm.
        Defaults to settings.profile_memory.

    Returns
    -------
    List[BenchResult]
        One result per selected algorithm, in reporting order.
    """
    settings = get_settings()
    threshold = settings.size_guard_threshold if size_guard is None else size_guard
    profile = settings.profile_memory if profile_memory is None else profile_memory

    names = _resolve_names(algorithms)
    rows = items.row_count if isinstance(items, Dataset) else len(items)

    results: List[BenchResult] = []
    for name in names:
        if name in QUADRATIC and threshold and rows > threshold:
            log.warning(
                f"[ALGORITHM SKIPPED] {name}",
                extra={"algorithm": name, "rows": rows, "size_guard": threshold},
            )
            results.append(_skipped_result(name, rows, threshold))
            continue
        results.append(_execute(name, items, key, profile))

    log.info(
        f"[RUNNER COMPLETE] {len(results)} algorithm(s) benchmarked",
        extra={"algorithms": names, "rows": rows},
    )
    return results


def sort_dataset(data: Union[Dataset, List[Any]], key: SortKey, algorithm: str = "standard") -> float:
    """
    Sort the canonical data in place, typically right before export.

    Returns the elapsed milliseconds reported by the algorithm.
    """
    items = data.records if isinstance(data, Dataset) else data
    return _resolve_algorithm(algorithm)(items, key)


__all__ = [
    "available_algorithms",
    "run_benchmarks",
    "sort_dataset",
]
