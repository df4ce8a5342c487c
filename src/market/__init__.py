"""Market module for mock chart data."""

from .mock_prices import (
    ChartTimeRange,
    MockPriceService,
    PriceHistory,
    PriceProfile,
    detect_chart_ticker,
)

__all__ = [
    "ChartTimeRange",
    "MockPriceService",
    "PriceHistory",
    "PriceProfile",
    "detect_chart_ticker",
]
