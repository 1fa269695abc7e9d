#!/usr/bin/env python3
"""
wisched - Weighted Interval Scheduling Demo

Solves a small example with both entry points. Run with `python -m wisched.main`.
"""

from wisched import (WeightedInterval, LogLevel, SortStrategy, setup_logging,
                     solve_sorted, solve_unsorted, sort_intervals, total_weight)

EXAMPLE = [
    (0, 1, 2),  # (start, end, weight)
    (0, 6, 3),
    (1, 4, 5),
    (3, 5, 5),
    (3, 8, 8),
    (4, 7, 3),
    (5, 9, 7),
    (6, 10, 3),
    (8, 11, 4),
]


def print_separator(title):
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def print_intervals(intervals, title="Intervals"):
    print(f"\n--- {title} ---")
    if intervals:
        for i, interval in enumerate(intervals):
            print(f"  {i+1}. {interval}")
    else:
        print("  No intervals")


def demo_unsorted():
    """Solve the example with the convenience entry point"""
    print_separator("CONVENIENCE SOLVE")
    intervals = [WeightedInterval.from_tuple(t) for t in EXAMPLE]
    print_intervals(intervals, "Input")

    optimal = solve_unsorted(intervals)
    print_intervals(optimal, "Optimal set")
    print(f"\nTotal weight: {total_weight(optimal)}")
    return optimal


def demo_buffer_reuse():
    """Solve several problems with one pair of buffers"""
    print_separator("BUFFER REUSE SOLVE")
    problems = [
        [WeightedInterval.from_tuple(t) for t in EXAMPLE],
        [WeightedInterval.from_tuple(t) for t in EXAMPLE[1:]],
        [WeightedInterval(0, 10, 1), WeightedInterval(2, 3, 4)],
    ]

    # Size once for the largest problem
    largest = max(len(problem) for problem in problems)
    memo = [0] * (largest + 1)
    solution = []

    results = []
    for number, intervals in enumerate(problems, start=1):
        sort_intervals(intervals)
        solve_sorted(intervals, memo, solution)
        print_intervals(solution, f"Problem {number} ({len(intervals)} intervals), "
                                  f"weight {total_weight(solution)}")
        results.append(list(solution))
    return results


def main():
    setup_logging(level=LogLevel.DEBUG)
    demo_unsorted()
    demo_buffer_reuse()

    # Nearly sorted input can opt into the adaptive sort
    nearly_sorted = [WeightedInterval.from_tuple(t) for t in sorted(EXAMPLE, key=lambda t: t[1])]
    nearly_sorted[0], nearly_sorted[1] = nearly_sorted[1], nearly_sorted[0]
    solve_unsorted(nearly_sorted, strategy=SortStrategy.ADAPTIVE)


if __name__ == "__main__":
    main()
