"""Synthesizer for descriptive per-ticker outlooks."""
import logging
import math
import random
from datetime import date
from pathlib import Path

from src.analytics.formatting import round_half_up, whole_percent
from src.analytics.metrics_calculator import average_holding_days, win_rate
from src.outlook.models import (
    MarketReference,
    Outlook,
    Sentiment,
    TickerMetadata,
    load_market_reference,
)
from src.outlook.settings import OutlookSettings
from src.preferences.models import UserPreferences
from src.trades.models import Trade

logger = logging.getLogger(__name__)

DRIVER_SAMPLE_SIZE = 3
SENTIMENT_DRIVERS = {
    Sentiment.POSITIVE: "Momentum indicators showing strength",
    Sentiment.CAUTIOUS: "Risk metrics elevated relative to recent history",
    Sentiment.MIXED: "Technical signals showing consolidation patterns",
}

BASE_WINDOW_DAYS = 30
NOISE_RANGE = (0.95, 1.05)
HIT_RATE_BOUNDS = (0.35, 0.80)
SENTIMENT_HIT_RATE_SHIFT = 0.05

MIN_HISTORY_TRADES = 3
QUICK_TRADER_DAYS = 5

VOLATILITY_WARNING = (
    "This ticker typically swings more than you've indicated you're comfortable with."
)


def _round_to(value: float, places: int) -> float:
    scale = 10**places
    return round_half_up(value * scale) / scale


class OutlookSynthesizer:
    """Builds Outlook objects from static reference data and the caller's context.

    Driver sampling and band noise draw from an injectable random.Random so
    callers can seed them.
    """

    def __init__(
        self,
        reference: MarketReference | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            reference: Ticker and sector tables. Defaults to the packaged data.
            rng: Random source for driver sampling and band noise.
        """
        self._reference = reference or load_market_reference()
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: OutlookSettings) -> "OutlookSynthesizer":
        path = Path(settings.reference_path) if settings.reference_path else None
        return cls(
            reference=load_market_reference(path),
            rng=random.Random(settings.random_seed),
        )

    @property
    def reference(self) -> MarketReference:
        return self._reference

    def synthesize(
        self,
        ticker: str,
        timeframe_days: int,
        preferences: UserPreferences | None = None,
        trades: list[Trade] | None = None,
    ) -> Outlook:
        """Synthesize an outlook for ticker.

        Args:
            ticker: Ticker symbol in any case.
            timeframe_days: Window in days; values below 1 are treated as 1.
            preferences: Caller preferences driving the warning and timeframe note.
            trades: Caller trade history driving the personal context.

        Returns:
            Outlook for the ticker.
        """
        symbol = ticker.strip().upper()
        days = max(1, timeframe_days)
        metadata = self._reference.ticker_metadata(symbol)
        trend = self._reference.sector_trend(metadata.sector)

        sentiment = self.classify_sentiment(
            metadata.historical_up_rate, trend.momentum, trend.strength
        )
        band = self._volatility_band(metadata.base_volatility, days, trend.strength)

        volatility_warning = None
        timeframe_note = None
        if preferences is not None:
            if band > preferences.risk_tolerance.volatility_warning_threshold:
                volatility_warning = VOLATILITY_WARNING
            timeframe_note = self._timeframe_note(days, preferences)

        personal_context = None
        if trades:
            personal_context = self._personal_context(symbol, metadata, days, trades)

        outlook = Outlook(
            ticker=symbol,
            timeframe_days=days,
            sentiment=sentiment,
            key_drivers=self._key_drivers(metadata.sector, sentiment),
            volatility_band=band,
            historical_hit_rate=self.adjust_hit_rate(
                metadata.historical_up_rate, sentiment, trend.strength
            ),
            personal_context=personal_context,
            volatility_warning=volatility_warning,
            timeframe_note=timeframe_note,
        )
        logger.debug(
            f"Outlook {symbol} {days}d: {sentiment.value}, band {band:.3f}, "
            f"hit rate {outlook.historical_hit_rate:.2f}"
        )
        return outlook

    def quick_outlook(self, ticker: str, timeframe_days: int = BASE_WINDOW_DAYS) -> Outlook:
        """Outlook without preferences or trade history."""
        return self.synthesize(ticker, timeframe_days)

    @staticmethod
    def classify_sentiment(
        historical_up_rate: float, momentum: Sentiment, strength: float
    ) -> Sentiment:
        """Classify sentiment from sector momentum and the combined score.

        The combined score is the mean of sector strength and up rate.
        """
        combined = (strength + historical_up_rate) / 2
        if momentum == Sentiment.POSITIVE and combined > 0.55:
            return Sentiment.POSITIVE
        if momentum == Sentiment.CAUTIOUS and combined < 0.50:
            return Sentiment.CAUTIOUS
        return Sentiment.MIXED

    @staticmethod
    def adjust_hit_rate(base_rate: float, sentiment: Sentiment, strength: float) -> float:
        """Shift the base up rate by sentiment and sector strength, then clamp."""
        adjusted = base_rate
        if sentiment == Sentiment.POSITIVE:
            adjusted += SENTIMENT_HIT_RATE_SHIFT
        elif sentiment == Sentiment.CAUTIOUS:
            adjusted -= SENTIMENT_HIT_RATE_SHIFT
        adjusted += (strength - 0.5) * 0.1

        low, high = HIT_RATE_BOUNDS
        return _round_to(min(high, max(low, adjusted)), 2)

    def _key_drivers(self, sector: str, sentiment: Sentiment) -> list[str]:
        candidates = self._reference.drivers_for(sector)
        sampled = self._rng.sample(candidates, min(DRIVER_SAMPLE_SIZE, len(candidates)))
        return [*sampled, SENTIMENT_DRIVERS[sentiment]]

    def _volatility_band(self, base_volatility: float, days: int, strength: float) -> float:
        time_adjustment = math.sqrt(days / BASE_WINDOW_DAYS)
        sector_adjustment = 1.0 + (0.5 - strength) * 0.3
        noise = self._rng.uniform(*NOISE_RANGE)
        return _round_to(base_volatility * time_adjustment * sector_adjustment * noise, 3)

    def _timeframe_note(self, days: int, preferences: UserPreferences) -> str | None:
        usual = preferences.trading_style.default_timeframe_days
        if days * 2 < usual:
            return (
                f"This {days}-day window is much shorter than the {usual}-day "
                f"horizon that fits your trading style."
            )
        if days > usual * 2:
            return (
                f"This {days}-day window is much longer than the {usual}-day "
                f"horizon that fits your trading style."
            )
        return None

    def _personal_context(
        self,
        symbol: str,
        metadata: TickerMetadata,
        days: int,
        trades: list[Trade],
    ) -> str | None:
        closed_trades = [t for t in trades if t.is_closed]
        ticker_trades = [t for t in closed_trades if t.ticker.upper() == symbol]

        if not ticker_trades:
            return self._sector_context(metadata.sector, closed_trades)

        count = len(ticker_trades)
        if count < MIN_HISTORY_TRADES:
            latest = max(ticker_trades, key=lambda t: t.exit_date or date.min)
            outcome = "profit" if latest.realized_pnl > 0 else "loss"
            return f"You last traded {symbol} for a {outcome}. One data point, but recent memory."

        rate = win_rate(ticker_trades)
        avg_days = average_holding_days(ticker_trades)
        if rate > 0.65:
            return (
                f"You've traded {symbol} {count} times with a {whole_percent(rate)}% win rate, "
                f"historically one of your stronger names."
            )
        if rate < 0.40:
            return (
                f"{symbol} has been tricky for you, with a {whole_percent(rate)}% win rate over "
                f"{count} trades. Past results don't predict the future, but worth noting."
            )
        if avg_days < QUICK_TRADER_DAYS and days > avg_days:
            return (
                f"You tend to trade {symbol} quickly (avg {round_half_up(avg_days)} days). "
                f"Your current lookback window is longer."
            )
        return None

    def _sector_context(self, sector: str, closed_trades: list[Trade]) -> str | None:
        peers = self._reference.tickers_in_sector(sector)
        sector_trades = [t for t in closed_trades if t.ticker.upper() in peers]
        if len(sector_trades) < MIN_HISTORY_TRADES:
            return None

        rate = win_rate(sector_trades)
        if rate > 0.6:
            return (
                f"You've had good results in the {sector} sector, with a "
                f"{whole_percent(rate)}% win rate across {len(sector_trades)} trades."
            )
        if rate < 0.4:
            return f"The {sector} sector has been challenging for you. Something to factor in."
        return None


def synthesize_outlook(
    ticker: str,
    timeframe_days: int,
    preferences: UserPreferences | None = None,
    trades: list[Trade] | None = None,
    rng: random.Random | None = None,
) -> Outlook:
    """Synthesize an outlook from the packaged reference data."""
    return OutlookSynthesizer(rng=rng).synthesize(ticker, timeframe_days, preferences, trades)
