import random
from collections import deque

from wisched import WeightedInterval, adaptive_sort_intervals, is_sorted_by_end, sort_intervals
from wisched.interval_lib.ordering import first_unsorted_index


def _random_intervals(rng, n):
    intervals = []
    for _ in range(n):
        start = rng.randint(0, 20)
        intervals.append(WeightedInterval(start, start + rng.randint(0, 6), rng.randint(1, 9)))
    return intervals


def test_sorts_order_by_end_without_loss():
    rng = random.Random(7)
    for n in range(0, 30):
        original = _random_intervals(rng, n)
        for sort in (sort_intervals, adaptive_sort_intervals):
            intervals = list(original)
            sort(intervals)
            assert is_sorted_by_end(intervals)
            assert sorted(intervals, key=WeightedInterval.to_tuple) == \
                sorted(original, key=WeightedInterval.to_tuple)


def test_ties_on_end_order_by_start_then_input():
    for sort in (sort_intervals, adaptive_sort_intervals):
        intervals = [WeightedInterval(4, 5, 1), WeightedInterval(2, 3, 1), WeightedInterval(5, 5, 1),
                     WeightedInterval(0, 5, 2), WeightedInterval(4, 5, 3)]

        sort(intervals)

        assert [i.to_tuple() for i in intervals] == \
            [(2, 3, 1), (0, 5, 2), (4, 5, 1), (4, 5, 3), (5, 5, 1)]


class _CountingBound:
    comparisons = 0

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        _CountingBound.comparisons += 1
        return self.value < other.value


def test_adaptive_sort_is_linear_on_sorted_input():
    intervals = [WeightedInterval(0, _CountingBound(i), 1) for i in range(100)]
    _CountingBound.comparisons = 0

    adaptive_sort_intervals(intervals)

    # two end comparisons per neighbour, no start comparisons
    assert _CountingBound.comparisons == 2 * 99
    assert [i.end.value for i in intervals] == list(range(100))


def test_adaptive_sort_nearly_sorted():
    intervals = [WeightedInterval(0, e, 1) for e in (1, 3, 2, 4, 6, 5, 7)]

    adaptive_sort_intervals(intervals)

    assert [i.end for i in intervals] == [1, 2, 3, 4, 5, 6, 7]


def test_general_sort_on_other_mutable_sequences():
    intervals = deque(WeightedInterval(0, e, 1) for e in (3, 1, 2))

    sort_intervals(intervals)

    assert [i.end for i in intervals] == [1, 2, 3]


def test_first_unsorted_index():
    intervals = [WeightedInterval(0, e, 1) for e in (1, 2, 2, 1, 5)]

    assert first_unsorted_index(intervals) == 3
    assert not is_sorted_by_end(intervals)
    assert is_sorted_by_end([])
    assert first_unsorted_index(intervals[:3]) is None


def test_general_sort_on_other_sequences_orders_ties_by_start():
    rng = random.Random(11)
    for n in range(0, 25):
        original = _random_intervals(rng, n)
        intervals = deque(original)

        sort_intervals(intervals)

        assert is_sorted_by_end(intervals)
        assert [(i.end, i.start) for i in intervals] == \
            sorted((i.end, i.start) for i in original)
        assert sorted(intervals, key=WeightedInterval.to_tuple) == \
            sorted(original, key=WeightedInterval.to_tuple)


def test_equal_ends_out_of_start_order_are_unsorted():
    intervals = [WeightedInterval(4, 5, 1), WeightedInterval(0, 5, 1)]

    assert first_unsorted_index(intervals) == 1
    adaptive_sort_intervals(intervals)
    assert [i.start for i in intervals] == [0, 4]
