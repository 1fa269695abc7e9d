"""
Predecessor search over intervals sorted ascending by end bound.

p(j) is the largest index i < j with intervals[i].end <= intervals[j].start,
the latest-ending interval compatible with interval j.
"""

from bisect import bisect_right
from operator import attrgetter
from typing import List, Optional, Sequence

from .interval import WeightedIntervalLike

_by_end = attrgetter("end")


def compatible_prefix_length(intervals: Sequence[WeightedIntervalLike], index: int) -> int:
    """
    Count the intervals before `index` that end at or before its start.

    Since end bounds are sorted, those intervals form a prefix, and its length
    is p(index) + 1. The search reads the sequence in place and compares
    bounds with < only.
    """
    return bisect_right(intervals, intervals[index].start, 0, index, key=_by_end)


def find_predecessor(intervals: Sequence[WeightedIntervalLike], index: int) -> Optional[int]:
    """
    Find the latest-ending interval compatible with intervals[index].

    :param intervals: Intervals sorted ascending by end bound
    :param index: 0-based position of the interval to look up
    :return: 0-based index of the predecessor, or None if no interval before
             `index` ends at or before its start
    """
    length = compatible_prefix_length(intervals, index)
    return length - 1 if length else None


def compute_predecessors(intervals: Sequence[WeightedIntervalLike]) -> List[Optional[int]]:
    """Compute p(j) for every position, O(n log n) overall"""
    return [find_predecessor(intervals, j) for j in range(len(intervals))]
