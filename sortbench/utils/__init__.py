"""
Utilities package for SortBench.

Exports shared helpers for logging and memory profiling. Keep this package
free of sorting logic.
"""

from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
