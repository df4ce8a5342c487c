# tests/trades/test_models.py
"""Tests for trade models."""
from datetime import date

import pytest

from src.trades.models import Trade, TradeCategory, TradeImportSummary


def make_trade(
    ticker: str = "AAPL",
    entry_price: float = 100.0,
    exit_price: float | None = 110.0,
    quantity: float = 10.0,
    entry_date: date = date(2025, 3, 3),
    exit_date: date | None = date(2025, 3, 13),
    category: TradeCategory = TradeCategory.CORE,
) -> Trade:
    """Create a trade for testing."""
    return Trade(
        ticker=ticker,
        entry_date=entry_date,
        exit_date=exit_date,
        quantity=quantity,
        entry_price=entry_price,
        exit_price=exit_price,
        category=category,
    )


class TestTrade:
    """Tests for Trade."""

    def test_closed_trade_derived_values(self):
        """A closed trade should report PnL, return and holding days."""
        trade = make_trade()

        assert trade.is_closed is True
        assert trade.realized_pnl == pytest.approx(100.0)
        assert trade.return_percent == pytest.approx(0.10)
        assert trade.holding_days() == 10

    def test_open_trade_reports_zero(self):
        """An open trade should report zero PnL and zero return."""
        trade = make_trade(exit_date=None, exit_price=None)

        assert trade.is_closed is False
        assert trade.realized_pnl == 0.0
        assert trade.return_percent == 0.0
        assert trade.holding_days(as_of=date(2025, 3, 8)) == 5

    def test_exit_date_without_price_is_open(self):
        """A trade with an exit date but no exit price is not closed."""
        trade = make_trade(exit_price=None)

        assert trade.is_closed is False
        assert trade.realized_pnl == 0.0

    def test_losing_trade(self):
        """Exit below entry should give negative PnL."""
        trade = make_trade(entry_price=50.0, exit_price=45.0, quantity=4)

        assert trade.realized_pnl == pytest.approx(-20.0)
        assert trade.return_percent == pytest.approx(-0.10)

    @pytest.mark.parametrize("entry_price", [0.0, -5.0, float("nan")])
    def test_rejects_non_positive_entry_price(self, entry_price):
        """entry_price must be positive."""
        with pytest.raises(ValueError):
            make_trade(entry_price=entry_price)

    @pytest.mark.parametrize("quantity", [0.0, -1.0])
    def test_rejects_non_positive_quantity(self, quantity):
        """quantity must be positive."""
        with pytest.raises(ValueError):
            make_trade(quantity=quantity)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("entry_price", float("inf")),
            ("quantity", float("inf")),
            ("exit_price", float("inf")),
            ("exit_price", float("nan")),
            ("quantity", 1e309),
        ],
    )
    def test_rejects_non_finite_values(self, field, value):
        """Prices and quantity must be finite numbers."""
        with pytest.raises(ValueError, match="must be finite"):
            make_trade(**{field: value})

    def test_rejects_exit_price_without_exit_date(self):
        """An exit price needs an exit date."""
        with pytest.raises(ValueError):
            make_trade(exit_date=None, exit_price=120.0)

    def test_rejects_exit_before_entry(self):
        """exit_date must not precede entry_date."""
        with pytest.raises(ValueError):
            make_trade(entry_date=date(2025, 3, 10), exit_date=date(2025, 3, 9))

    def test_same_day_exit_allowed(self):
        """A same-day round trip is valid and holds zero raw days."""
        trade = make_trade(entry_date=date(2025, 3, 10), exit_date=date(2025, 3, 10))

        assert trade.holding_days() == 0

    def test_trade_ids_are_unique(self):
        """Each trade should receive its own identifier."""
        assert make_trade().trade_id != make_trade().trade_id

    def test_trade_is_immutable(self):
        """Trades cannot be edited after creation."""
        trade = make_trade()

        with pytest.raises(AttributeError):
            trade.exit_price = 200.0


class TestTradeImportSummary:
    """Tests for TradeImportSummary."""

    def test_status_message(self):
        """status_message should report counts."""
        summary = TradeImportSummary(total_rows=5, imported_rows=4, skipped_rows=1)

        assert summary.status_message == (
            "Imported 4 trade(s) from 5 row(s). Skipped 1 invalid row(s)."
        )
        assert summary.details == []
