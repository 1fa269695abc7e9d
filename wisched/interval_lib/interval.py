from typing import Any, Protocol, Tuple


class WeightedIntervalLike(Protocol):
    """
    Anything the solvers can schedule: an object exposing start, end and weight.

    Bounds need a total order (<, <=). Weights need a total order and +.
    """

    @property
    def start(self) -> Any: ...

    @property
    def end(self) -> Any: ...

    @property
    def weight(self) -> Any: ...


class WeightedInterval:
    """
    Represents an immutable weighted interval.

    The interval is half-open: one ending exactly where another starts does
    not overlap it. start <= end is assumed, not checked.
    """

    __slots__ = ("_start", "_end", "_weight")

    def __init__(self, start, end, weight):
        """
        Initialize a weighted interval.

        :param start: Start bound of the interval
        :param end: End bound of the interval
        :param weight: Weight gained by scheduling the interval
        """
        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_weight", weight)

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def weight(self):
        return self._weight

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, self.to_tuple())

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeightedInterval):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"WeightedInterval(start={self._start!r}, end={self._end!r}, weight={self._weight!r})"

    def __str__(self) -> str:
        return f"[{self._start}, {self._end}) weight={self._weight}"

    def is_compatible_with(self, other: WeightedIntervalLike) -> bool:
        """Check if this interval and another do not overlap"""
        return self._end <= other.start or other.end <= self._start

    def overlaps(self, other: WeightedIntervalLike) -> bool:
        """Check if this interval overlaps with another"""
        return not self.is_compatible_with(other)

    def to_tuple(self) -> Tuple[Any, Any, Any]:
        """Convert to (start, end, weight) tuple"""
        return (self._start, self._end, self._weight)

    @classmethod
    def from_tuple(cls, interval_tuple: Tuple[Any, Any, Any]) -> 'WeightedInterval':
        """Create a WeightedInterval from a (start, end, weight) tuple"""
        start, end, weight = interval_tuple
        return cls(start, end, weight)
