"""Importer for trade history CSV files."""
import csv
import logging
from datetime import date, datetime
from pathlib import Path

import aiofiles

from src.trades.models import Trade, TradeCategory, TradeImportSummary
from src.trades.settings import TradesSettings
from src.trades.trade_store import TradeStore

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
EXPECTED_COLUMNS = 7


class TradeImporter:
    """Parses CSV rows into trades and adds them to a TradeStore.

    Expected columns, after a header row:
    ticker,entryDate,exitDate,qty,entryPrice,exitPrice,category

    exitDate and exitPrice may be blank for open trades. Rows that fail to
    parse or validate are skipped and reported in the summary; they never
    abort the batch.
    """

    def __init__(self, store: TradeStore, settings: TradesSettings | None = None) -> None:
        self._store = store
        self._settings = settings or TradesSettings()

    def resolve_path(self, path: str | Path) -> Path:
        """Resolve a bare file name against the configured import directory."""
        path = Path(path)
        if path.parent == Path(".") and not path.is_absolute():
            return Path(self._settings.import_dir) / path
        return path

    async def import_file(self, path: str | Path) -> TradeImportSummary:
        """Import trades from a CSV file on disk.

        Args:
            path: Location of the CSV file. A bare file name is looked up in
                the configured import directory.

        Returns:
            Summary of imported and skipped rows.
        """
        path = self.resolve_path(path)
        if not path.exists():
            logger.warning(f"Import file not found: {path}")
            return TradeImportSummary(
                total_rows=0,
                imported_rows=0,
                skipped_rows=0,
                details=["Import file was not found."],
            )

        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Import file could not be read: {e}")
            return TradeImportSummary(
                total_rows=0,
                imported_rows=0,
                skipped_rows=0,
                details=["Import file could not be read."],
            )

        return self.import_csv_text(content)

    def import_csv_text(self, content: str) -> TradeImportSummary:
        """Import trades from CSV text.

        Args:
            content: Full CSV document including the header row.

        Returns:
            Summary of imported and skipped rows.
        """
        lines = [line for line in content.splitlines() if line.strip()]
        if len(lines) < 2:
            return TradeImportSummary(
                total_rows=0,
                imported_rows=0,
                skipped_rows=0,
                details=["Import file had no data rows."],
            )

        imported: list[Trade] = []
        details: list[str] = []
        skipped = 0

        for index, columns in enumerate(csv.reader(lines[1:])):
            line_number = index + 2
            trade = self.parse_row(columns)
            if trade is None:
                skipped += 1
                details.append(f"Row {line_number}: Skipped due to invalid or missing fields.")
                continue
            imported.append(trade)

        if imported:
            self._store.add_trades(imported)

        summary = TradeImportSummary(
            total_rows=len(lines) - 1,
            imported_rows=len(imported),
            skipped_rows=skipped,
            details=details,
        )
        logger.info(summary.status_message)
        return summary

    def parse_row(self, columns: list[str]) -> Trade | None:
        """Parse one CSV row into a Trade.

        Returns:
            The parsed trade, or None if any field is missing or invalid.
        """
        if len(columns) < EXPECTED_COLUMNS:
            return None

        values = [c.strip() for c in columns[:EXPECTED_COLUMNS]]
        ticker, entry_raw, exit_raw, qty_raw, entry_price_raw, exit_price_raw, category_raw = values

        if not ticker:
            return None

        try:
            entry_date = _parse_date(entry_raw)
            exit_date = _parse_date(exit_raw) if exit_raw else None
            quantity = float(qty_raw)
            entry_price = float(entry_price_raw)
            exit_price = float(exit_price_raw) if exit_price_raw else None
            category = TradeCategory(category_raw.lower())

            return Trade(
                ticker=ticker.upper(),
                entry_date=entry_date,
                exit_date=exit_date,
                quantity=quantity,
                entry_price=entry_price,
                exit_price=exit_price,
                category=category,
            )
        except ValueError:
            return None


def _parse_date(value: str) -> date:
    return datetime.strptime(value, DATE_FORMAT).date()
