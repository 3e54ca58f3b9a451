"""
Memory profiling utilities for SortBench.

Wraps a block of code and captures:
- Wall-clock duration in milliseconds (perf_counter)
- Peak Python allocations (tracemalloc)
- Resident set size before and after (psutil)

Sorting durations reported to users always come from the algorithms
themselves; this profiler only adds memory figures around an algorithm call.

Usage example:
    from sortbench.utils.profiler import profile_block

    with profile_block("merge") as stats:
        merge.sort(rows, 0)

    print(stats.peak_traced_bytes, stats.rss_delta_bytes)
"""

from __future__ import annotations

import contextlib
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_ms: float = field(default=0.0)
    rss_before_bytes: Optional[int] = field(default=None)
    rss_after_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)

    @property
    def rss_delta_bytes(self) -> Optional[int]:
        if self.rss_before_bytes is None or self.rss_after_bytes is None:
            return None
        return self.rss_after_bytes - self.rss_before_bytes


@contextlib.contextmanager
def profile_block(
    label: str, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    enable_tracemalloc : bool
        Whether to trace Python-level allocations. Tracing slows allocation
        heavy code, so timings taken inside the block are inflated.

    Notes
    -----
    The peak is reset on entry so nested or repeated blocks each report their
    own high-water mark. tracemalloc is stopped on exit only if this block
    started it.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()

    tracemalloc_was_running = False
    if enable_tracemalloc:
        tracemalloc_was_running = tracemalloc.is_tracing()
        if not tracemalloc_was_running:
            tracemalloc.start()
        tracemalloc.reset_peak()

    stats.rss_before_bytes = process.memory_info().rss
    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_ms = (stats.end_ts - stats.start_ts) * 1000.0
        stats.rss_after_bytes = process.memory_info().rss

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
