# tests/outlook/test_models.py
"""Tests for outlook reference models."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from src.outlook.models import MarketReference, Sentiment, load_market_reference


class TestLoadMarketReference:
    """Tests for load_market_reference."""

    def test_packaged_reference(self):
        """The packaged file should hold every ticker and sector."""
        reference = load_market_reference()

        assert len(reference.tickers) == 17
        assert len(reference.sector_trends) == 11
        assert reference.tickers["NVDA"].sector == "Technology"
        assert reference.sector_trends["Energy"].momentum == Sentiment.CAUTIOUS

    def test_custom_file(self, tmp_path: Path):
        """A minimal YAML file can replace the packaged data."""
        path = tmp_path / "reference.yaml"
        path.write_text(
            "tickers:\n"
            "  ABC: {sector: Widgets, base_volatility: 0.3, historical_up_rate: 0.4}\n"
            "sector_drivers:\n"
            "  Broad Market: [Rates]\n"
        )

        reference = load_market_reference(path)

        assert reference.ticker_metadata("abc").sector == "Widgets"
        assert reference.drivers_for("Widgets") == ["Rates"]

    def test_missing_fallback_sector(self, tmp_path: Path):
        """The fallback driver sector must have phrases."""
        path = tmp_path / "reference.yaml"
        path.write_text("sector_drivers:\n  Energy: [Supply]\n")

        with pytest.raises(ValueError):
            load_market_reference(path)


class TestSentiment:
    """Tests for Sentiment display text."""

    def test_labels(self):
        assert [s.label for s in Sentiment] == ["Positive", "Mixed", "Cautious"]

    def test_descriptions(self):
        """Each sentiment has its own non-predictive description."""
        descriptions = {s.description for s in Sentiment}

        assert len(descriptions) == 3
        assert Sentiment.CAUTIOUS.description.startswith("Conditions suggest elevated uncertainty")


class TestMarketReference:
    """Tests for MarketReference lookups."""

    def test_unknown_ticker_uses_default(self):
        """Unknown tickers fall back to the Broad Market profile."""
        reference = load_market_reference()

        meta = reference.ticker_metadata("ZZZZ")

        assert meta.sector == "Broad Market"
        assert meta.base_volatility == 0.08
        assert meta.historical_up_rate == 0.55

    def test_unknown_sector_trend(self):
        """Sectors without a trend use the neutral default."""
        reference = load_market_reference()

        trend = reference.sector_trend("Broad Market")

        assert trend.momentum == Sentiment.MIXED
        assert trend.strength == 0.50

    def test_tickers_in_sector(self):
        """Sector membership comes from the ticker table."""
        reference = load_market_reference()

        assert reference.tickers_in_sector("Energy") == {"XLE", "USO"}

    def test_rates_are_bounded(self):
        """Up rates outside [0, 1] are rejected."""
        with pytest.raises(ValidationError):
            MarketReference(
                tickers={
                    "BAD": {"sector": "X", "base_volatility": 0.1, "historical_up_rate": 1.5}
                },
                sector_drivers={"Broad Market": ["Rates"]},
            )
