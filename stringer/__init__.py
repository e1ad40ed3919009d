"""stringer: reverse or inspect a string."""

from stringer.api import count_digits, inspect, is_decimal_digit, reverse
from stringer.models import DigitMode, InspectionResult

__version__ = "0.1.0"

__all__ = [
    "DigitMode",
    "InspectionResult",
    "count_digits",
    "inspect",
    "is_decimal_digit",
    "reverse",
]
