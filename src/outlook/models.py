"""Data models for ticker outlooks and their reference data."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_PATH = Path(__file__).parent / "data" / "market_reference.yaml"


class Sentiment(str, Enum):
    """Descriptive read of current conditions, not a forecast."""

    POSITIVE = "positive"
    MIXED = "mixed"
    CAUTIOUS = "cautious"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return {
            Sentiment.POSITIVE: (
                "Current conditions appear favorable based on recent trends and sector momentum."
            ),
            Sentiment.MIXED: (
                "Signals are mixed, with some positive indicators balanced by areas of uncertainty."
            ),
            Sentiment.CAUTIOUS: (
                "Conditions suggest elevated uncertainty or headwinds in the near term."
            ),
        }[self]


@dataclass
class Outlook:
    """Structured, descriptive outlook for a ticker over a window.

    Attributes:
        ticker: Upper-cased ticker symbol.
        timeframe_days: Window the outlook describes.
        sentiment: Sector and history based read.
        key_drivers: Three sector drivers followed by one sentiment phrase.
        volatility_band: Typical swing over the window as a fraction of price.
        historical_hit_rate: Share of similar windows that closed up, in [0.35, 0.80].
        personal_context: Note drawn from the caller's own trades.
        volatility_warning: Set when the band exceeds the caller's risk tolerance.
        timeframe_note: Set when the window is far from the caller's usual horizon.
        generated_at: When the outlook was built.
    """

    ticker: str
    timeframe_days: int
    sentiment: Sentiment
    key_drivers: list[str]
    volatility_band: float
    historical_hit_rate: float
    personal_context: str | None = None
    volatility_warning: str | None = None
    timeframe_note: str | None = None
    generated_at: datetime = field(default_factory=datetime.now)


class TickerMetadata(BaseModel):
    """Static profile of a ticker."""

    sector: str
    base_volatility: float = Field(ge=0.0, le=1.0)
    historical_up_rate: float = Field(ge=0.0, le=1.0)


class SectorTrend(BaseModel):
    """Momentum and strength of a sector."""

    momentum: Sentiment
    strength: float = Field(ge=0.0, le=1.0)


class MarketReference(BaseModel):
    """Lookup tables used to synthesize outlooks."""

    tickers: dict[str, TickerMetadata] = Field(default_factory=dict)
    sector_trends: dict[str, SectorTrend] = Field(default_factory=dict)
    sector_drivers: dict[str, list[str]] = Field(default_factory=dict)
    default_ticker: TickerMetadata = Field(
        default_factory=lambda: TickerMetadata(
            sector="Broad Market", base_volatility=0.08, historical_up_rate=0.55
        )
    )
    default_sector_trend: SectorTrend = Field(
        default_factory=lambda: SectorTrend(momentum=Sentiment.MIXED, strength=0.50)
    )
    fallback_driver_sector: str = "Broad Market"

    @model_validator(mode="after")
    def validate_fallback_drivers(self) -> "MarketReference":
        """Validate that the fallback sector has driver phrases."""
        if self.fallback_driver_sector not in self.sector_drivers:
            raise ValueError(
                f"sector_drivers has no entry for fallback sector "
                f"'{self.fallback_driver_sector}'"
            )
        return self

    def ticker_metadata(self, ticker: str) -> TickerMetadata:
        return self.tickers.get(ticker.upper(), self.default_ticker)

    def sector_trend(self, sector: str) -> SectorTrend:
        return self.sector_trends.get(sector, self.default_sector_trend)

    def drivers_for(self, sector: str) -> list[str]:
        return self.sector_drivers.get(sector) or self.sector_drivers[self.fallback_driver_sector]

    def tickers_in_sector(self, sector: str) -> set[str]:
        return {ticker for ticker, meta in self.tickers.items() if meta.sector == sector}


def load_market_reference(path: Path | None = None) -> MarketReference:
    """Load outlook reference data from YAML.

    Args:
        path: YAML file to read. Defaults to the packaged reference file.

    Returns:
        Parsed MarketReference.
    """
    path = path or DEFAULT_REFERENCE_PATH
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    reference = MarketReference(**data)
    logger.debug(
        f"Loaded market reference from {path}: {len(reference.tickers)} tickers, "
        f"{len(reference.sector_trends)} sectors"
    )
    return reference
