"""Display formatting for money and percentages."""
import math


def format_usd(value: float) -> str:
    """Format a dollar amount, e.g. 1234.5 -> "$1,234.50", -3 -> "-$3.00"."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percentage(fraction: float) -> str:
    """Format a fraction with two decimals, e.g. 0.5512 -> "55.12%"."""
    return f"{fraction * 100:.2f}%"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def whole_percent(fraction: float) -> int:
    """Convert a fraction to a whole percent, e.g. 0.125 -> 13."""
    return round_half_up(fraction * 100)
