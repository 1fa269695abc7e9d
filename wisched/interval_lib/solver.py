from typing import List, MutableSequence, Sequence

from ..utils.enums import SortStrategy
from ..utils.logger import LogLevel, get_logger
from .errors import CapacityError, UnsortedIntervalsError
from .interval import WeightedIntervalLike
from .ordering import adaptive_sort_intervals, first_unsorted_index, sort_intervals
from .predecessor import compatible_prefix_length

'''
Solver - dynamic programming over intervals sorted by end bound.

memo[j] holds the best total weight reachable with the first j sorted
intervals. For j = 1..n:

    memo[j] = max(memo[j - 1], weight[j] + memo[p(j)])

where memo[p(j)] is read through the length of the compatible prefix found
by the predecessor search. An empty prefix contributes nothing, so weight[j]
is used alone. memo[0] holds the weight zero only when the caller supplies
one; otherwise interval 1 is taken without an exclude comparison, so weight
types with no zero value work as long as they support + and ordering. Including interval j requires a strictly larger
total, so an interval that only ties the best total so far is excluded. Among
equal-weight optima the one completed first in sorted order is kept; for
all-overlapping input that is the earliest of the heaviest intervals.
'''

logger = get_logger("wisched.solver")


def solve_unsorted(intervals: Sequence[WeightedIntervalLike],
                   strategy: SortStrategy = SortStrategy.GENERAL,
                   zero=None) -> List[WeightedIntervalLike]:
    """
    Find a maximum-weight set of mutually compatible intervals.

    The input is left untouched: a working copy is sorted and the buffers
    are allocated per call. Use solve_sorted() to reuse buffers across many
    problems.

    :param intervals: Intervals in any order
    :param strategy: Sorting algorithm used on the working copy
    :param zero: Additive identity of the weight type. Optional; when given,
                 an interval adding no weight over it is left out
    :return: New list of the chosen intervals, ascending by end bound
    """
    working = list(intervals)
    if strategy is SortStrategy.ADAPTIVE:
        adaptive_sort_intervals(working)
    else:
        sort_intervals(working)

    memo = [zero] * (len(working) + 1)
    solution: List[WeightedIntervalLike] = []
    _solve(working, memo, solution, zero)

    if logger.is_enabled_for(LogLevel.DEBUG):
        n = len(working)
        logger.debug(f"solve_unsorted: {n} intervals ({strategy.value} sort), "
                     f"chose {len(solution)} with total weight {_best(memo, n, zero)!r}")
    return solution


def solve_sorted(intervals: Sequence[WeightedIntervalLike],
                 memo: MutableSequence,
                 solution: MutableSequence,
                 zero=None,
                 check_sorted: bool = False) -> None:
    """
    Find a maximum-weight set of compatible intervals using caller buffers.

    Nothing is allocated when the buffers are large enough, so the same memo
    and solution buffers can be sized once for the largest problem and reused
    for every solve.

    Caller obligations, not checked unless `check_sorted` is set:
    - `intervals` must be sorted ascending by end bound; otherwise the
      result is unspecified. Ties broken by start bound, as the sorts in
      ordering leave them, let a zero-length interval pair with one ending
      at its position.
    - every interval must have start <= end.

    :param intervals: Intervals sorted ascending by end bound
    :param memo: Buffer of at least len(intervals) + 1 slots. Slots past the
                 current problem are neither read nor written, so it never
                 needs clearing between solves.
    :param solution: Container cleared and refilled with the chosen
                     intervals, ascending by end bound. Must support clear(),
                     append() and reverse(); a bounded deque must have a
                     maxlen of at least len(intervals).
    :param zero: Additive identity of the weight type, optional. memo[0] is
                 only written when it is given
    :param check_sorted: Verify the ordering precondition first, O(n)
    :raises CapacityError: If a buffer is too small; nothing is written
    :raises UnsortedIntervalsError: If check_sorted is set and the input is
                                    not sorted; nothing is written
    """
    n = len(intervals)
    if len(memo) < n + 1:
        logger.debug(f"solve_sorted: memo buffer of {len(memo)} slots for {n} intervals")
        raise CapacityError("memo", n + 1, len(memo))
    maxlen = getattr(solution, "maxlen", None)
    if maxlen is not None and maxlen < n:
        logger.debug(f"solve_sorted: solution buffer bounded at {maxlen} for {n} intervals")
        raise CapacityError("solution", n, maxlen)
    if check_sorted:
        index = first_unsorted_index(intervals)
        if index is not None:
            raise UnsortedIntervalsError(index)

    solution.clear()
    _solve(intervals, memo, solution, zero)

    if logger.is_enabled_for(LogLevel.DEBUG):
        logger.debug(f"solve_sorted: {n} intervals, chose {len(solution)} "
                     f"with total weight {_best(memo, n, zero)!r}")


def total_weight(intervals: Sequence[WeightedIntervalLike], zero=None):
    """
    Sum the weights of the given intervals.

    Starts from `zero` when given, otherwise from the first weight; an empty
    set without `zero` sums to 0.
    """
    total = zero
    for interval in intervals:
        total = interval.weight if total is None else total + interval.weight
    return 0 if total is None else total


# Private helpers

def _solve(intervals, memo, solution, zero):
    """Forward pass filling memo[1..n], then the backward reconstruction."""
    n = len(intervals)
    # Without a zero, memo[0] is never read: interval 1 has nothing to be
    # compared against and an empty compatible prefix adds nothing.
    has_zero = zero is not None
    if has_zero:
        memo[0] = zero
    for j in range(1, n + 1):
        included = _included_weight(intervals, memo, j)
        if j > 1 or has_zero:
            excluded = memo[j - 1]
            memo[j] = included if included > excluded else excluded
        else:
            memo[j] = included

    # memo[j] == memo[j - 1] exactly when interval j was excluded
    j = n
    while j > 0:
        if (j > 1 or has_zero) and memo[j] == memo[j - 1]:
            j -= 1
        else:
            solution.append(intervals[j - 1])
            j = compatible_prefix_length(intervals, j - 1)
    solution.reverse()


def _included_weight(intervals, memo, j):
    """Best total when the j-th sorted interval (1-based) is included"""
    prefix = compatible_prefix_length(intervals, j - 1)
    weight = intervals[j - 1].weight
    return weight + memo[prefix] if prefix else weight


def _best(memo, n, zero):
    return memo[n] if n else total_weight((), zero)
