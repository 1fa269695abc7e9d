from enum import Enum


class SortStrategy(Enum):
    GENERAL = "general"    # comparison sort, no assumption about existing order
    ADAPTIVE = "adaptive"  # insertion based, near-linear on nearly sorted input
