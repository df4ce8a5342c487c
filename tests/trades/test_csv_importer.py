# tests/trades/test_csv_importer.py
"""Tests for TradeImporter."""
from datetime import date
from pathlib import Path

import pytest

from src.analytics.metrics_calculator import compute_summary
from src.analytics.pattern_analyzer import generate_insights
from src.trades.csv_importer import TradeImporter
from src.trades.models import TradeCategory
from src.trades.settings import TradesSettings
from src.trades.trade_store import TradeStore

HEADER = "ticker,entryDate,exitDate,qty,entryPrice,exitPrice,category"


class TestTradeImporter:
    """Tests for TradeImporter."""

    @pytest.fixture
    def store(self) -> TradeStore:
        """Create an empty trade store."""
        return TradeStore()

    @pytest.fixture
    def importer(self, store: TradeStore) -> TradeImporter:
        """Create an importer bound to the store."""
        return TradeImporter(store)

    def test_imports_all_valid_rows(self, importer: TradeImporter, store: TradeStore):
        """N well-formed rows should give N trades and no skips."""
        content = "\n".join([
            HEADER,
            "aapl,2025-01-02,2025-01-10,10,180.00,190.50,core",
            "TSLA,2025-02-03,2025-02-05,3,200,185,speculative",
            "SPY,2025-03-03,,5,500,,core",
        ])

        summary = importer.import_csv_text(content)

        assert summary.total_rows == 3
        assert summary.imported_rows == 3
        assert summary.skipped_rows == 0
        assert summary.details == []
        assert len(store) == 3

        first = store.trades[0]
        assert first.ticker == "AAPL"
        assert first.entry_date == date(2025, 1, 2)
        assert first.exit_price == 190.5
        assert store.trades[1].category == TradeCategory.SPECULATIVE
        assert store.trades[2].is_closed is False

    def test_skips_invalid_rows(self, importer: TradeImporter, store: TradeStore):
        """Bad rows should be skipped with per-row details."""
        content = "\n".join([
            HEADER,
            "AAPL,2025-01-02,2025-01-10,10,180,190,core",
            "MSFT,not-a-date,2025-01-10,10,400,410,core",
            "NVDA,2025-01-02,2025-01-10,-1,800,810,core",
            "AMD,2025-01-02,2025-01-10,10,150,160,unknown",
            "QQQ,2025-01-10,2025-01-02,10,450,460,core",
            "COIN,2025-01-02,2025-01-05,1,100,inf,speculative",
            "short,row",
        ])

        summary = importer.import_csv_text(content)

        assert summary.total_rows == 7
        assert summary.imported_rows == 1
        assert summary.skipped_rows == 6
        assert summary.details[0] == "Row 3: Skipped due to invalid or missing fields."
        assert summary.details[-1] == "Row 8: Skipped due to invalid or missing fields."
        assert [t.ticker for t in store.trades] == ["AAPL"]

    def test_non_finite_prices_keep_insights_usable(
        self, importer: TradeImporter, store: TradeStore
    ):
        """Infinite prices are skipped so analytics over the store still work."""
        content = "\n".join([
            HEADER,
            "COIN,2025-01-02,2025-01-05,1,100,inf,speculative",
            "TSLA,2025-01-02,2025-01-05,1e309,100,110,speculative",
            "AAPL,2025-01-02,2025-01-10,10,180,190,core",
        ])

        summary = importer.import_csv_text(content)

        assert summary.imported_rows == 1
        assert summary.skipped_rows == 2
        assert compute_summary(store.trades).realized_pnl_total == pytest.approx(100.0)
        assert len(generate_insights(store.trades)) == 6

    def test_exit_price_without_exit_date_skipped(self, importer: TradeImporter):
        """A row with an exit price but no exit date is invalid."""
        summary = importer.import_csv_text(HEADER + "\nAAPL,2025-01-02,,10,180,190,core")

        assert summary.imported_rows == 0
        assert summary.skipped_rows == 1

    def test_header_only(self, importer: TradeImporter):
        """A header without data rows should return a zero summary."""
        summary = importer.import_csv_text(HEADER + "\n\n")

        assert summary.total_rows == 0
        assert summary.imported_rows == 0
        assert summary.details == ["Import file had no data rows."]

    async def test_import_file(self, importer: TradeImporter, store: TradeStore, tmp_path: Path):
        """import_file should read and import a CSV from disk."""
        csv_file = tmp_path / "trades.csv"
        csv_file.write_text(HEADER + "\nGLD,2025-04-01,2025-04-20,8,215,220,core\n")

        summary = await importer.import_file(csv_file)

        assert summary.imported_rows == 1
        assert store.trades[0].ticker == "GLD"

    async def test_import_missing_file(self, importer: TradeImporter, tmp_path: Path):
        """A missing file should return a zero summary with a detail message."""
        summary = await importer.import_file(tmp_path / "missing.csv")

        assert summary.total_rows == 0
        assert summary.details == ["Import file was not found."]

    async def test_import_unreadable_file(self, importer: TradeImporter, tmp_path: Path):
        """Bytes that are not UTF-8 text should be reported as unreadable."""
        csv_file = tmp_path / "binary.csv"
        csv_file.write_bytes(b"\xff\xfe\x00\x81\x9f")

        summary = await importer.import_file(csv_file)

        assert summary.imported_rows == 0
        assert summary.details == ["Import file could not be read."]

    async def test_bare_name_resolved_in_import_dir(self, store: TradeStore, tmp_path: Path):
        """A file name without a directory should be looked up in import_dir."""
        (tmp_path / "history.csv").write_text(
            HEADER + "\nXLE,2025-05-01,2025-05-09,4,92,95,core\n"
        )
        importer = TradeImporter(store, TradesSettings(import_dir=str(tmp_path)))

        summary = await importer.import_file("history.csv")

        assert importer.resolve_path("history.csv") == tmp_path / "history.csv"
        assert summary.imported_rows == 1
