class SchedulingError(Exception):
    """Base class for errors raised by the wisched solvers."""


class CapacityError(SchedulingError, ValueError):
    """
    A caller supplied buffer is too small for the problem being solved.

    Raised before anything is written, so the buffers keep their old contents.
    """

    def __init__(self, buffer: str, required: int, available: int):
        self.buffer = buffer
        self.required = required
        self.available = available
        super().__init__(f"{buffer} buffer holds {available} slots, {required} required")


class UnsortedIntervalsError(SchedulingError, ValueError):
    """Intervals handed to the sorted solver are not ascending by (end, start)."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"interval at index {index} sorts before interval at index {index - 1} "
                         f"by (end, start)")
