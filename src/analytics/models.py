"""Data models for trade analytics."""
from dataclasses import dataclass


@dataclass
class UserSummary:
    """Aggregated trading performance over a trade list.

    win_rate, avg_hold_days, best/worst ticker and realized_pnl_total cover
    closed trades only; total_trades and speculative_percent count every trade.
    """

    total_trades: int
    win_rate: float
    avg_hold_days: float
    best_ticker: str | None
    worst_ticker: str | None
    speculative_percent: float
    realized_pnl_total: float


@dataclass(frozen=True)
class InsightItem:
    """A single behavioral observation."""

    title: str
    subtitle: str
    detail: str
