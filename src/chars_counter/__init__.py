from .counter import check_bounds, count_all, count_in_range, count_in_range_limited
from .errors import CharsCounterError, NullArgumentError, OutOfRangeError
from .text import CharText, Window

__all__ = [
    "CharText",
    "CharsCounterError",
    "NullArgumentError",
    "OutOfRangeError",
    "Window",
    "check_bounds",
    "count_all",
    "count_in_range",
    "count_in_range_limited",
]
