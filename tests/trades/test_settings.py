# tests/trades/test_settings.py
"""Tests for trades settings."""
import pytest

from src.trades.settings import TradesSettings


class TestTradesSettings:
    """Tests for TradesSettings."""

    def test_default_settings(self):
        """Default settings should have sensible values."""
        settings = TradesSettings()

        assert settings.import_dir == "data/imports"
        assert settings.import_file is None
        assert settings.mock_min_trades == 50
        assert settings.mock_max_trades == 120
        assert settings.mock_fetch_delay_seconds == 0.25
        assert settings.mock_seed is None

    def test_inverted_trade_bounds_rejected(self):
        """mock_min_trades above mock_max_trades should fail validation."""
        with pytest.raises(ValueError):
            TradesSettings(mock_min_trades=100, mock_max_trades=10)

    def test_negative_delay_rejected(self):
        """The simulated delay cannot be negative."""
        with pytest.raises(ValueError):
            TradesSettings(mock_fetch_delay_seconds=-1.0)
