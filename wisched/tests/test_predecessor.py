from wisched import WeightedInterval, compute_predecessors, find_predecessor, sort_intervals


def _sorted(*tuples):
    intervals = [WeightedInterval.from_tuple(t) for t in tuples]
    sort_intervals(intervals)
    return intervals


def _linear_predecessor(intervals, j):
    for i in range(j - 1, -1, -1):
        if intervals[i].end <= intervals[j].start:
            return i
    return None


def test_predecessors_of_example():
    intervals = _sorted((0, 1, 2), (0, 6, 3), (1, 4, 5), (3, 5, 5), (3, 8, 8),
                        (4, 7, 3), (5, 9, 7), (6, 10, 3), (8, 11, 4))

    # ends: 1 4 5 6 7 8 9 10 11
    assert compute_predecessors(intervals) == [None, 0, 0, None, 1, 0, 2, 3, 5]


def test_touching_interval_is_compatible():
    intervals = _sorted((0, 3, 1), (3, 5, 1))

    assert find_predecessor(intervals, 1) == 0


def test_no_compatible_interval():
    intervals = _sorted((0, 3, 1), (2, 5, 1), (1, 6, 1))

    assert find_predecessor(intervals, 0) is None
    assert find_predecessor(intervals, 1) is None
    assert find_predecessor(intervals, 2) is None


def test_predecessor_is_strictly_earlier_with_shared_bounds():
    # zero-length intervals at the same point all end where the others start
    intervals = _sorted((2, 2, 1), (2, 2, 1), (2, 2, 1), (0, 2, 1))

    for j in range(len(intervals)):
        p = find_predecessor(intervals, j)
        assert p is None or p < j
        assert p == _linear_predecessor(intervals, j)


def test_matches_linear_scan_on_many_ties():
    intervals = _sorted(*[(s, e, 1) for s in range(4) for e in range(s, 5)])

    assert compute_predecessors(intervals) == \
        [_linear_predecessor(intervals, j) for j in range(len(intervals))]
