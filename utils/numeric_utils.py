"""
Numeric Utilities - Centralized numeric value handling.

Provides standardized functions for:
1. Cleaning numeric values (handling NaN/Inf/None)
2. Safe formatting for display/reporting
3. Parsing percent strings and "N/A" sentinels from stock datasets
4. Score rounding that matches the app's half-up convention
"""

import math
from typing import Any, Optional

from config.constants import NOT_AVAILABLE


def is_valid_number(value: Any) -> bool:
    """
    Check if a value is a valid, finite number.

    Examples:
        >>> is_valid_number(3.14)
        True
        >>> is_valid_number(float('nan'))
        False
        >>> is_valid_number(None)
        False
    """
    if value is None or isinstance(value, bool):
        return False

    try:
        float_val = float(value)
        return not (math.isnan(float_val) or math.isinf(float_val))
    except (ValueError, TypeError):
        return False


def clean_numeric(value: Any) -> Optional[float]:
    """
    Clean a numeric value, returning None for invalid values.

    Args:
        value: Raw value (can be float, int, string number, or None/NaN)

    Returns:
        Float value if valid, None if value is missing/invalid

    Examples:
        >>> clean_numeric("42.5")
        42.5
        >>> clean_numeric(float('nan')) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        float_value = float(value)
        if math.isnan(float_value) or math.isinf(float_value):
            return None
        return float_value
    except (ValueError, TypeError):
        return None


def parse_percent(value: Any) -> Optional[float]:
    """
    Parse a percent-like value from a stock dataset.

    Accepts numbers and strings such as "1.5%", " 2.1 " or "N/A". The
    sentinel, empty strings and anything unparseable become None.

    Examples:
        >>> parse_percent("1.5%")
        1.5
        >>> parse_percent("N/A") is None
        True
    """
    if isinstance(value, str):
        text = value.strip()
        if not text or text.upper() == NOT_AVAILABLE:
            return None
        value = text.replace('%', '').strip()
    return clean_numeric(value)


def safe_format(
    value: Any,
    format_spec: str = ".2f",
    default: str = NOT_AVAILABLE,
    suffix: str = ""
) -> str:
    """
    Safely format a numeric value for display/reporting.

    Examples:
        >>> safe_format(12.345, ".1f", suffix="%")
        '12.3%'
        >>> safe_format(None)
        'N/A'
    """
    cleaned = clean_numeric(value)
    if cleaned is None:
        return default

    try:
        return f"{format(cleaned, format_spec)}{suffix}"
    except (ValueError, TypeError):
        return str(cleaned)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    x/0 gives +/-inf by the sign of x (and of a signed zero denominator);
    0/0 and anything involving NaN give NaN.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (towards +inf).

    Python's round() uses banker's rounding; scores use half-up so that
    e.g. 72.5 becomes 73.

    Examples:
        >>> round_half_up(72.5)
        73
        >>> round_half_up(0.4)
        0
    """
    return int(math.floor(value + 0.5))
