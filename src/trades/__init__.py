"""Trades module for trade history records and data sources."""

from .csv_importer import TradeImporter
from .mock_trades import EmptyTradeDataError, MockTradeGenerator
from .models import Trade, TradeCategory, TradeImportSummary
from .settings import TradesSettings
from .trade_store import TradeStore

__all__ = [
    "EmptyTradeDataError",
    "MockTradeGenerator",
    "Trade",
    "TradeCategory",
    "TradeImportSummary",
    "TradeImporter",
    "TradeStore",
    "TradesSettings",
]
