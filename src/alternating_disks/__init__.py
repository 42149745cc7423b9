"""Alternating disks — sort a row of light and dark disks with adjacent swaps.

Re-exports public symbols so callers can write::

    from alternating_disks import DiskRow, sort_lawnmower
"""

from alternating_disks.config import ConfigError, SortConfig, load_config, run
from alternating_disks.logging import LogEntry, Logger, LogLevel
from alternating_disks.result import SortResult
from alternating_disks.row import DiskColor, DiskRow
from alternating_disks.sorters import (
    Algorithm,
    LawnmowerSorter,
    LeftToRightSorter,
    SortAlgorithm,
    compare_algorithms,
    get_sorter,
    sort_lawnmower,
    sort_left_to_right,
)

__all__ = [
    "Algorithm",
    "ConfigError",
    "DiskColor",
    "DiskRow",
    "LawnmowerSorter",
    "LeftToRightSorter",
    "LogEntry",
    "LogLevel",
    "Logger",
    "SortAlgorithm",
    "SortConfig",
    "SortResult",
    "compare_algorithms",
    "get_sorter",
    "load_config",
    "run",
    "sort_lawnmower",
    "sort_left_to_right",
]
