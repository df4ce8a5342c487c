# tests/preferences/test_models.py
"""Tests for user preference models."""
from src.preferences.models import RiskTolerance, TradingStyle, UserPreferences


class TestTradingStyle:
    """Tests for TradingStyle."""

    def test_labels(self):
        """Each style has a display label."""
        assert TradingStyle.SHORT_TERM.label == "Short-term"
        assert TradingStyle.MIXED.label == "Mix of both"
        assert TradingStyle.LONG_TERM.label == "Long-term"

    def test_default_timeframes(self):
        """Styles map to a typical outlook window."""
        assert TradingStyle.SHORT_TERM.default_timeframe_days == 7
        assert TradingStyle.MIXED.default_timeframe_days == 30
        assert TradingStyle.LONG_TERM.default_timeframe_days == 90


class TestRiskTolerance:
    """Tests for RiskTolerance."""

    def test_thresholds_increase(self):
        """Higher tolerance allows wider bands."""
        assert RiskTolerance.LOW.volatility_warning_threshold == 0.06
        assert RiskTolerance.MODERATE.volatility_warning_threshold == 0.12
        assert RiskTolerance.HIGH.volatility_warning_threshold == 0.20

    def test_label(self):
        assert RiskTolerance.MODERATE.label == "Moderate"


class TestUserPreferences:
    """Tests for UserPreferences."""

    def test_defaults(self):
        """New preferences need onboarding."""
        preferences = UserPreferences()

        assert preferences.trading_style == TradingStyle.MIXED
        assert preferences.risk_tolerance == RiskTolerance.MODERATE
        assert preferences.watched_tickers == []
        assert preferences.simple_mode is False
        assert preferences.needs_onboarding is True

    def test_watched_tickers_normalized(self):
        """Tickers are upper-cased, stripped and deduplicated in order."""
        preferences = UserPreferences(watched_tickers=[" nvda", "SPY", "Nvda", "", "aapl"])

        assert preferences.watched_tickers == ["NVDA", "SPY", "AAPL"]

    def test_with_watched_ticker(self):
        """Adding a ticker returns a new object."""
        original = UserPreferences(watched_tickers=["SPY"])

        updated = original.with_watched_ticker("qqq").with_watched_ticker("spy")

        assert updated.watched_tickers == ["SPY", "QQQ"]
        assert original.watched_tickers == ["SPY"]

    def test_without_watched_ticker(self):
        """Removing a ticker ignores case."""
        preferences = UserPreferences(watched_tickers=["SPY", "QQQ"])

        assert preferences.without_watched_ticker("spy").watched_tickers == ["QQQ"]

    def test_string_enums(self):
        """Enum fields accept their stored values."""
        preferences = UserPreferences(trading_style="long_term", risk_tolerance="high")

        assert preferences.trading_style == TradingStyle.LONG_TERM
        assert preferences.risk_tolerance == RiskTolerance.HIGH
