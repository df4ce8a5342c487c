"""Extraction of ticker symbols and timeframes from free-text questions."""
import re

EXPLICIT_TICKERS = frozenset(
    {"AAPL", "SPY", "QQQ", "NVDA", "TSLA", "MSFT", "AMZN", "META", "GOOGL"}
)
DEFAULT_TIMEFRAME_DAYS = 30
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365
MAX_TICKER_LENGTH = 5

TIMEFRAME_PHRASES: list[tuple[str, int]] = [
    ("next month", DAYS_PER_MONTH),
    ("next week", DAYS_PER_WEEK),
    ("next year", DAYS_PER_YEAR),
]
UNIT_DAYS = {
    "day": 1,
    "week": DAYS_PER_WEEK,
    "month": DAYS_PER_MONTH,
    "year": DAYS_PER_YEAR,
}

COMMON_WORDS = frozenset({"I", "A"})

_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9]+")
_TIMEFRAME_PATTERN = re.compile(r"(\d+)\s*(day|days|week|weeks|month|months|year|years)")


def detect_ticker(query: str) -> str | None:
    """Return the first token that looks like a ticker symbol.

    A token counts when it is a known ticker in any case, or when it is
    written in capital letters and is at most five characters long. The
    words "I" and "A" are never treated as tickers.

    Args:
        query: Free-text question.

    Returns:
        Upper-cased ticker, or None when no token qualifies.
    """
    for token in _TOKEN_PATTERN.findall(query):
        upper = token.upper()
        if upper in EXPLICIT_TICKERS:
            return upper
        if token in COMMON_WORDS:
            continue
        if token.isalpha() and token == upper and len(token) <= MAX_TICKER_LENGTH:
            return upper
    return None


def extract_timeframe_days(query: str, default: int = DEFAULT_TIMEFRAME_DAYS) -> int:
    """Return the timeframe a question asks about, in days.

    Args:
        query: Free-text question.
        default: Days returned when the query names no timeframe.

    Returns:
        Number of days.
    """
    lowered = query.lower()
    for phrase, days in TIMEFRAME_PHRASES:
        if phrase in lowered:
            return days

    match = _TIMEFRAME_PATTERN.search(lowered)
    if match:
        unit = match.group(2).rstrip("s")
        return int(match.group(1)) * UNIT_DAYS[unit]

    return default
