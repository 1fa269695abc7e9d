"""
wisched - Weighted Interval Scheduling

A lightweight, dependency-free Python library that selects a maximum-weight
set of mutually non-overlapping intervals in O(n log n).
"""

from .interval_lib.interval import WeightedInterval, WeightedIntervalLike
from .interval_lib.errors import SchedulingError, CapacityError, UnsortedIntervalsError
from .interval_lib.ordering import sort_intervals, adaptive_sort_intervals, is_sorted_by_end
from .interval_lib.predecessor import find_predecessor, compute_predecessors
from .interval_lib.solver import solve_unsorted, solve_sorted, total_weight
from .utils.enums import SortStrategy
from .utils.logger import setup_logging, get_logger, LogLevel

__version__ = "0.1.0"
__all__ = [
    "WeightedInterval", "WeightedIntervalLike",
    "SchedulingError", "CapacityError", "UnsortedIntervalsError",
    "sort_intervals", "adaptive_sort_intervals", "is_sorted_by_end",
    "find_predecessor", "compute_predecessors",
    "solve_unsorted", "solve_sorted", "total_weight",
    "SortStrategy", "setup_logging", "get_logger", "LogLevel",
]
