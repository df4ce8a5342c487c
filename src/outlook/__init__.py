"""Outlook module for descriptive ticker outlooks."""

from .models import (
    MarketReference,
    Outlook,
    SectorTrend,
    Sentiment,
    TickerMetadata,
    load_market_reference,
)
from .outlook_engine import OutlookSynthesizer, synthesize_outlook
from .settings import OutlookSettings

__all__ = [
    "MarketReference",
    "Outlook",
    "OutlookSettings",
    "OutlookSynthesizer",
    "SectorTrend",
    "Sentiment",
    "TickerMetadata",
    "load_market_reference",
    "synthesize_outlook",
]
