"""Data models for trade history."""
import math
import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class TradeCategory(str, Enum):
    """Risk profile of a trade."""

    CORE = "core"
    SPECULATIVE = "speculative"


@dataclass(frozen=True)
class Trade:
    """A single entry/exit transaction.

    A trade is closed once both exit_date and exit_price are set. Open trades
    report zero realized PnL and zero return.
    """

    ticker: str
    entry_date: date
    quantity: float
    entry_price: float
    exit_date: date | None = None
    exit_price: float | None = None
    category: TradeCategory = TradeCategory.CORE
    trade_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        for name in ("entry_price", "quantity", "exit_price"):
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if not self.entry_price > 0:
            raise ValueError(f"entry_price must be positive, got {self.entry_price}")
        if not self.quantity > 0:
            raise ValueError(f"quantity must be positive, got {self.quantity}")
        if self.exit_price is not None and not self.exit_price >= 0:
            raise ValueError(f"exit_price must not be negative, got {self.exit_price}")
        if self.exit_price is not None and self.exit_date is None:
            raise ValueError("exit_price requires exit_date")
        if self.exit_date is not None and self.exit_date < self.entry_date:
            raise ValueError(
                f"exit_date {self.exit_date} is before entry_date {self.entry_date}"
            )

    @property
    def is_closed(self) -> bool:
        """Check if the trade has both an exit date and an exit price."""
        return self.exit_date is not None and self.exit_price is not None

    @property
    def realized_pnl(self) -> float:
        """Realized profit or loss in dollars, 0.0 while open."""
        if not self.is_closed:
            return 0.0
        return (self.exit_price - self.entry_price) * self.quantity

    @property
    def return_percent(self) -> float:
        """Price return as a fraction of entry price, 0.0 while open."""
        if not self.is_closed:
            return 0.0
        return (self.exit_price - self.entry_price) / self.entry_price

    def holding_days(self, as_of: date | None = None) -> int:
        """Whole days between entry and exit, or entry and as_of when open.

        Args:
            as_of: Reference date for open trades. Defaults to today.
        """
        end = self.exit_date or as_of or date.today()
        return (end - self.entry_date).days


@dataclass
class TradeImportSummary:
    """Outcome of a CSV import attempt."""

    total_rows: int
    imported_rows: int
    skipped_rows: int
    details: list[str] = field(default_factory=list)

    @property
    def status_message(self) -> str:
        return (
            f"Imported {self.imported_rows} trade(s) from {self.total_rows} row(s). "
            f"Skipped {self.skipped_rows} invalid row(s)."
        )
