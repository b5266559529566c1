"""
Display formatting helpers shared by the calculator and the estimator.
"""

import math
import re


def normalize_education_key(education: str) -> str:
    """
    Normalize a free-form education level to a table key.

    Lower-cases and strips every character outside a-z, so
    "High-School", "high school" and "highschool" all map to "highschool".
    """
    return re.sub(r'[^a-z]', '', (education or '').lower())


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """
    Format a number with thousands separators.

    Integral values print without a decimal part; others keep up to
    three decimals with trailing zeros removed.

    Examples:
        >>> format_number(9630)
        '9,630'
        >>> format_number(6130.03003)
        '6,130.03'
    """
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip('0').rstrip('.')


def format_percentile(value: float) -> str:
    """Print a percentile without a trailing ".0" (95 -> "95", 99.5 -> "99.5")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
