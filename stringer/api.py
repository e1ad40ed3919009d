"""Core string operations."""

import logging

from stringer.errors import ConfigError
from stringer.models import DigitMode, InspectionResult, Kind

logger = logging.getLogger(__name__)

ASCII_DIGITS = frozenset("0123456789")


def _as_mode(digits: DigitMode | str) -> DigitMode:
    try:
        return DigitMode(digits)
    except ValueError as e:
        allowed = ", ".join(m.value for m in DigitMode)
        raise ConfigError(f"Unknown digit set '{digits}' (expected one of: {allowed})") from e


def reverse(text: str) -> str:
    """Return the characters of text in reverse order.

    Works on code points, so multi-byte characters survive intact.
    """
    logger.debug(f"reverse: {len(text)} chars")
    return text[::-1]


def is_decimal_digit(char: str, digits: DigitMode | str = DigitMode.UNICODE) -> bool:
    """Return True if the single character char is a decimal digit."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {len(char)}")
    if _as_mode(digits) is DigitMode.ASCII:
        return char in ASCII_DIGITS
    return char.isdecimal()


def count_digits(text: str, digits: DigitMode | str = DigitMode.UNICODE) -> int:
    """Count decimal digits in text under the given digit set."""
    mode = _as_mode(digits)
    return sum(1 for char in text if is_decimal_digit(char, mode))


def inspect(
    text: str, only_digits: bool = False, digits: DigitMode | str = DigitMode.UNICODE
) -> InspectionResult:
    """Count characters in text, or only its decimal digits when only_digits is set."""
    if only_digits:
        result = InspectionResult(count_digits(text, digits), Kind.DIGIT)
    else:
        result = InspectionResult(len(text), Kind.CHAR)
    logger.debug(f"inspect: {result.count} {result.kind.value} (only_digits={only_digits})")
    return result
