"""Generator for realistic mock trade history."""
import asyncio
import logging
from datetime import date, timedelta

import numpy as np

from src.trades.models import Trade, TradeCategory
from src.trades.settings import TradesSettings

logger = logging.getLogger(__name__)


class EmptyTradeDataError(RuntimeError):
    """Raised when the mock source produces no trades."""


CORE_HOLDINGS = ["QQQ", "SPY", "AAPL", "UNH", "BND"]
SPECULATIVE_PLAYS = [
    "TSLA", "COIN", "NVDA", "MRNA", "VRTX", "BIIB",
    "SRPT", "EXEL", "CRSP", "EDIT", "NTLA",
]

BASE_PRICES: dict[str, float] = {
    "QQQ": 450.0,
    "SPY": 520.0,
    "AAPL": 190.0,
    "UNH": 520.0,
    "BND": 72.0,
    "TSLA": 230.0,
    "COIN": 210.0,
    "NVDA": 880.0,
    "MRNA": 110.0,
    "VRTX": 410.0,
    "BIIB": 220.0,
    "SRPT": 125.0,
    "EXEL": 23.0,
    "CRSP": 55.0,
    "EDIT": 7.0,
    "NTLA": 30.0,
}

CORE_QUANTITY_RANGES: dict[str, tuple[float, float]] = {
    "QQQ": (25.0, 160.0),
    "SPY": (25.0, 160.0),
    "AAPL": (50.0, 320.0),
    "UNH": (12.0, 90.0),
    "BND": (80.0, 300.0),
}
DEFAULT_QUANTITY_RANGE = (20.0, 120.0)


class MockTradeGenerator:
    """Generates closed trades with category-specific return profiles.

    Roughly 70% of trades are core holdings with modest returns; the rest are
    speculative plays with fat-tailed outcomes and smaller share counts.
    """

    def __init__(
        self,
        settings: TradesSettings | None = None,
        rng: np.random.Generator | None = None,
        today: date | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Trade source settings. Defaults are used when omitted.
            rng: Random generator. Seeded from settings.mock_seed when omitted.
            today: Reference date for entry/exit dates. Defaults to today.
        """
        self._settings = settings or TradesSettings()
        self._rng = rng or np.random.default_rng(self._settings.mock_seed)
        self._today = today

    async def fetch_mock_trades(self) -> list[Trade]:
        """Return a freshly generated trade history after a simulated delay.

        Returns:
            Closed trades sorted by exit date, most recent first.

        Raises:
            EmptyTradeDataError: If no trades were generated.
        """
        await asyncio.sleep(self._settings.mock_fetch_delay_seconds)

        trades = self.generate()
        if not trades:
            raise EmptyTradeDataError("Mock trade source returned no trades")

        logger.info(f"Generated {len(trades)} mock trades")
        return trades

    def generate(self) -> list[Trade]:
        """Generate trades synchronously, without the simulated delay."""
        today = self._today or date.today()
        trade_count = int(
            self._rng.integers(
                self._settings.mock_min_trades, self._settings.mock_max_trades + 1
            )
        )

        trades: list[Trade] = []
        for _ in range(trade_count):
            category = self._random_category()
            ticker = self._random_ticker(category)
            entry_date = today - timedelta(days=int(self._rng.integers(5, 331)))
            holding_days = self._random_holding_days(entry_date, today)
            entry_price = self._random_entry_price(ticker, category)
            exit_price = max(0.5, entry_price * (1 + self._random_return(category)))

            trades.append(
                Trade(
                    ticker=ticker,
                    entry_date=entry_date,
                    exit_date=entry_date + timedelta(days=holding_days),
                    quantity=self._random_quantity(ticker, category),
                    entry_price=round(entry_price, 2),
                    exit_price=round(exit_price, 2),
                    category=category,
                )
            )

        return sorted(trades, key=lambda t: t.exit_date, reverse=True)

    def _random_category(self) -> TradeCategory:
        if self._rng.random() < 0.7:
            return TradeCategory.CORE
        return TradeCategory.SPECULATIVE

    def _random_ticker(self, category: TradeCategory) -> str:
        universe = CORE_HOLDINGS if category == TradeCategory.CORE else SPECULATIVE_PLAYS
        return str(self._rng.choice(universe))

    def _random_holding_days(self, entry_date: date, today: date) -> int:
        days_since_entry = (today - entry_date).days
        capped_max = min(180, max(1, days_since_entry))
        return int(self._rng.integers(1, capped_max + 1))

    def _random_entry_price(self, ticker: str, category: TradeCategory) -> float:
        base = BASE_PRICES.get(ticker, 100.0)
        spread = 0.06 if category == TradeCategory.CORE else 0.12
        return base * (1 + self._rng.uniform(-spread, spread))

    def _random_return(self, category: TradeCategory) -> float:
        roll = self._rng.random()
        if category == TradeCategory.CORE:
            if roll < 0.1:
                return self._rng.uniform(0.10, 0.25)
            if roll < 0.2:
                return self._rng.uniform(-0.15, -0.05)
            return self._rng.uniform(-0.06, 0.08)

        if roll < 0.15:
            return self._rng.uniform(0.30, 0.90)
        if roll < 0.3:
            return self._rng.uniform(-0.60, -0.25)
        return self._rng.uniform(-0.15, 0.20)

    def _random_quantity(self, ticker: str, category: TradeCategory) -> float:
        low, high = CORE_QUANTITY_RANGES.get(ticker, DEFAULT_QUANTITY_RANGE)
        quantity = self._rng.uniform(low, high)
        if category == TradeCategory.CORE:
            return float(quantity)
        return float(max(1.0, quantity / 15))
