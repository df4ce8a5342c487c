"""Mock price histories for chart display."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

import numpy as np
import pandas as pd

from src.analytics.formatting import round_half_up

logger = logging.getLogger(__name__)

INTRADAY_POINTS = 78
INTRADAY_STEP = timedelta(minutes=5)
INTRADAY_RETURN_SCALE = 0.1
PRICE_FLOOR_RATIO = 0.5
POINT_COLUMNS = ["date", "close", "high", "low"]


class ChartTimeRange(str, Enum):
    """Chart window options."""

    ONE_DAY = "1D"
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"

    @property
    def days(self) -> int:
        return {
            ChartTimeRange.ONE_DAY: 1,
            ChartTimeRange.ONE_MONTH: 30,
            ChartTimeRange.SIX_MONTHS: 180,
            ChartTimeRange.ONE_YEAR: 365,
        }[self]

    @property
    def is_intraday(self) -> bool:
        return self == ChartTimeRange.ONE_DAY


@dataclass(frozen=True)
class PriceProfile:
    """Random walk parameters for a ticker.

    Attributes:
        base_price: Starting price.
        volatility: Daily volatility.
        trend: Daily drift.
    """

    base_price: float
    volatility: float
    trend: float


PRICE_PROFILES: dict[str, PriceProfile] = {
    "NVDA": PriceProfile(875, 0.035, 0.002),
    "AAPL": PriceProfile(192, 0.015, 0.0005),
    "TSLA": PriceProfile(245, 0.04, -0.001),
    "MSFT": PriceProfile(415, 0.018, 0.001),
    "GOOGL": PriceProfile(175, 0.02, 0.0008),
    "AMZN": PriceProfile(185, 0.022, 0.001),
    "META": PriceProfile(505, 0.025, 0.0015),
    "AMD": PriceProfile(155, 0.038, 0.001),
    "SPY": PriceProfile(520, 0.012, 0.0004),
    "QQQ": PriceProfile(450, 0.015, 0.0005),
    "COIN": PriceProfile(215, 0.05, 0.0),
    "GLD": PriceProfile(215, 0.008, 0.0003),
    "USO": PriceProfile(78, 0.025, -0.0005),
    "XLE": PriceProfile(92, 0.02, 0.0002),
    "XLF": PriceProfile(42, 0.015, 0.0003),
    "VIX": PriceProfile(14, 0.08, 0.0),
}

NAME_TO_TICKER: dict[str, str] = {
    "NVIDIA": "NVDA",
    "APPLE": "AAPL",
    "TESLA": "TSLA",
    "MICROSOFT": "MSFT",
    "GOOGLE": "GOOGL",
    "ALPHABET": "GOOGL",
    "AMAZON": "AMZN",
    "FACEBOOK": "META",
    "OIL": "USO",
    "GOLD": "GLD",
    "ENERGY": "XLE",
    "FINANCIALS": "XLF",
    "BANKS": "XLF",
}


@dataclass
class PriceHistory:
    """Generated price path for a ticker.

    Attributes:
        ticker: Upper-cased ticker symbol.
        points: DataFrame with date, close, high and low columns, oldest first.
        current_price: Last close.
        change: Last close minus first close.
        change_percent: Change as a percentage of the first close.
    """

    ticker: str
    points: pd.DataFrame
    current_price: float
    change: float
    change_percent: float

    @property
    def is_positive(self) -> bool:
        return self.change >= 0

    @property
    def min_price(self) -> float:
        return float(self.points["low"].min()) if not self.points.empty else 0.0

    @property
    def max_price(self) -> float:
        return float(self.points["high"].max()) if not self.points.empty else 0.0


def _round2(value: float) -> float:
    return round_half_up(value * 100) / 100


def detect_chart_ticker(query: str) -> str | None:
    """Find a chartable ticker in a query.

    Known tickers are matched first, then common names such as "oil" or
    "Apple". Both are substring matches on the upper-cased query.

    Returns:
        Ticker symbol, or None.
    """
    normalized = query.upper()
    for ticker in PRICE_PROFILES:
        if ticker in normalized:
            return ticker
    for name, ticker in NAME_TO_TICKER.items():
        if name in normalized:
            return ticker
    return None


class MockPriceService:
    """Generates random walk price histories for known tickers."""

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        now: datetime | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            rng: Random generator for the walk. Defaults to an unseeded generator.
            now: Timestamp of the newest point. Defaults to the current time per call.
        """
        self._rng = rng or np.random.default_rng()
        self._now = now

    def price_history(
        self, ticker: str, time_range: ChartTimeRange = ChartTimeRange.ONE_MONTH
    ) -> PriceHistory | None:
        """Generate a price history.

        Daily ranges skip Saturdays and Sundays. Closes never fall below half
        the profile's base price.

        Args:
            ticker: Ticker symbol in any case.
            time_range: Chart window.

        Returns:
            PriceHistory, or None for a ticker without a profile.
        """
        symbol = ticker.strip().upper()
        profile = PRICE_PROFILES.get(symbol)
        if profile is None:
            return None

        now = self._now or datetime.now()
        if time_range.is_intraday:
            total_points = INTRADAY_POINTS
            step = INTRADAY_STEP
            return_scale = INTRADAY_RETURN_SCALE
            intraday_volatility = profile.volatility / 4
        else:
            total_points = time_range.days
            step = timedelta(days=1)
            return_scale = 1.0
            intraday_volatility = profile.volatility

        floor = profile.base_price * PRICE_FLOOR_RATIO
        price = profile.base_price
        rows = []
        for i in range(total_points):
            timestamp = now - step * (total_points - 1 - i)
            if not time_range.is_intraday and timestamp.weekday() >= 5:
                continue

            step_return = profile.trend + profile.volatility * self._rng.standard_normal()
            price = max(price * (1 + step_return * return_scale), floor)

            spread = price * intraday_volatility * 0.5
            rows.append({
                "date": timestamp,
                "close": _round2(price),
                "high": _round2(price + abs(self._rng.standard_normal()) * spread),
                "low": _round2(price - abs(self._rng.standard_normal()) * spread),
            })

        if not rows:
            return None

        points = pd.DataFrame(rows, columns=POINT_COLUMNS)
        first_close = float(points["close"].iloc[0])
        last_close = float(points["close"].iloc[-1])
        change = last_close - first_close

        logger.debug(f"Generated {len(points)} {time_range.value} price points for {symbol}")
        return PriceHistory(
            ticker=symbol,
            points=points,
            current_price=last_close,
            change=_round2(change),
            change_percent=_round2(change / first_close * 100),
        )
