from operator import attrgetter
from typing import MutableSequence, Sequence

from .interval import WeightedIntervalLike

'''
Ordering - puts intervals in non-decreasing order of their end bound.

Intervals sharing an end bound are ordered by start bound. The only compatible
pair with equal ends is an interval followed by a zero-length interval sitting
on its end, and start order is what places the zero-length one second.
All sorts work in place and compare bounds with < only.
'''

_sort_key = attrgetter("end", "start")


def _precedes(a: WeightedIntervalLike, b: WeightedIntervalLike) -> bool:
    """Strict (end, start) order"""
    if a.end < b.end:
        return True
    if b.end < a.end:
        return False
    return a.start < b.start


def sort_intervals(intervals: MutableSequence[WeightedIntervalLike]) -> None:
    """
    Sort intervals in place by end bound, then start bound. O(n log n), no
    assumption about the existing order.

    Lists use the built-in stable sort. Other mutable sequences are heap
    sorted in place with O(1) extra space; that path does not keep the input
    order of intervals with equal bounds.

    :param intervals: Mutable sequence of intervals, reordered in place
    """
    if isinstance(intervals, list):
        intervals.sort(key=_sort_key)
    else:
        _heap_sort(intervals)


def adaptive_sort_intervals(intervals: MutableSequence[WeightedIntervalLike]) -> None:
    """
    Sort intervals in place by end bound, then start bound, with an insertion sort.

    Each interval is only shifted left past the intervals that sort after it,
    so already sorted input costs a single pass and nearly sorted input stays
    close to linear. Fully reversed input degrades to O(n^2). Stable.

    :param intervals: Mutable sequence of intervals, reordered in place
    """
    for i in range(1, len(intervals)):
        current = intervals[i]
        j = i - 1
        while j >= 0 and _precedes(current, intervals[j]):
            intervals[j + 1] = intervals[j]
            j -= 1
        if j + 1 != i:
            intervals[j + 1] = current


def is_sorted_by_end(intervals: Sequence[WeightedIntervalLike]) -> bool:
    """Check that the sequence is in the order the sorts produce"""
    return first_unsorted_index(intervals) is None


def first_unsorted_index(intervals: Sequence[WeightedIntervalLike]):
    """
    Find the first index whose interval sorts before its left neighbour.

    :return: The offending index, or None when the sequence is sorted
    """
    for i in range(1, len(intervals)):
        if _precedes(intervals[i], intervals[i - 1]):
            return i
    return None


# Private helpers

def _heap_sort(intervals):
    size = len(intervals)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(intervals, root, size)
    for last in range(size - 1, 0, -1):
        intervals[0], intervals[last] = intervals[last], intervals[0]
        _sift_down(intervals, 0, last)


def _sift_down(intervals, root, size):
    """Restore the max-heap below `root` within the first `size` slots."""
    while True:
        child = 2 * root + 1
        if child >= size:
            return
        if child + 1 < size and _precedes(intervals[child], intervals[child + 1]):
            child += 1
        if not _precedes(intervals[root], intervals[child]):
            return
        intervals[root], intervals[child] = intervals[child], intervals[root]
        root = child
