"""User preference models."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TradingStyle(str, Enum):
    """Preferred holding horizon."""

    SHORT_TERM = "short_term"
    MIXED = "mixed"
    LONG_TERM = "long_term"

    @property
    def label(self) -> str:
        return {
            TradingStyle.SHORT_TERM: "Short-term",
            TradingStyle.MIXED: "Mix of both",
            TradingStyle.LONG_TERM: "Long-term",
        }[self]

    @property
    def default_timeframe_days(self) -> int:
        """Outlook window matching the style."""
        return {
            TradingStyle.SHORT_TERM: 7,
            TradingStyle.MIXED: 30,
            TradingStyle.LONG_TERM: 90,
        }[self]


class RiskTolerance(str, Enum):
    """Comfort level with price swings."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def volatility_warning_threshold(self) -> float:
        """Volatility band above which an outlook carries a warning."""
        return {
            RiskTolerance.LOW: 0.06,
            RiskTolerance.MODERATE: 0.12,
            RiskTolerance.HIGH: 0.20,
        }[self]


class UserPreferences(BaseModel):
    """Preferences captured during onboarding and settings changes.

    Attributes:
        trading_style: Preferred holding horizon.
        risk_tolerance: Comfort level with price swings.
        watched_tickers: Upper-cased tickers without duplicates.
        simple_mode: Prefer plain-language answers.
        has_completed_onboarding: Whether onboarding has been finished or skipped.
    """

    trading_style: TradingStyle = TradingStyle.MIXED
    risk_tolerance: RiskTolerance = RiskTolerance.MODERATE
    watched_tickers: list[str] = Field(default_factory=list)
    simple_mode: bool = False
    has_completed_onboarding: bool = False

    @field_validator("watched_tickers")
    @classmethod
    def normalize_tickers(cls, v: list[str]) -> list[str]:
        """Upper-case tickers and drop blanks and repeats, keeping order."""
        normalized: list[str] = []
        for ticker in v:
            ticker = ticker.strip().upper()
            if ticker and ticker not in normalized:
                normalized.append(ticker)
        return normalized

    @property
    def needs_onboarding(self) -> bool:
        return not self.has_completed_onboarding

    def with_watched_ticker(self, ticker: str) -> "UserPreferences":
        """Return a copy with ticker added to the watch list."""
        return self.model_copy(
            update={"watched_tickers": self.normalize_tickers([*self.watched_tickers, ticker])}
        )

    def without_watched_ticker(self, ticker: str) -> "UserPreferences":
        """Return a copy with ticker removed from the watch list."""
        target = ticker.strip().upper()
        return self.model_copy(
            update={"watched_tickers": [t for t in self.watched_tickers if t != target]}
        )
