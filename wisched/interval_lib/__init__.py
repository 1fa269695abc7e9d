from .interval import WeightedInterval, WeightedIntervalLike
from .errors import SchedulingError, CapacityError, UnsortedIntervalsError
from .ordering import sort_intervals, adaptive_sort_intervals, is_sorted_by_end
from .predecessor import find_predecessor, compute_predecessors
from .solver import solve_unsorted, solve_sorted, total_weight
