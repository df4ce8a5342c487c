"""Calculator for trade history summary statistics."""
from datetime import date

from src.analytics.models import UserSummary
from src.trades.models import Trade, TradeCategory


def holding_days(trade: Trade) -> int:
    """Holding period used by analytics, never shorter than one day."""
    return max(1, trade.holding_days())


def average_holding_days(trades: list[Trade]) -> float:
    """Mean holding days, 0.0 for an empty list."""
    if not trades:
        return 0.0
    return sum(holding_days(t) for t in trades) / len(trades)


def win_rate(trades: list[Trade]) -> float:
    """Fraction of trades with positive realized PnL, 0.0 for an empty list."""
    if not trades:
        return 0.0
    return sum(1 for t in trades if t.realized_pnl > 0) / len(trades)


class MetricsCalculator:
    """Calculates a UserSummary from a trade list."""

    def calculate(self, trades: list[Trade]) -> UserSummary:
        """Calculate summary statistics from trades.

        Open trades count toward total_trades and speculative_percent only.

        Args:
            trades: Trades to summarize, open or closed.

        Returns:
            UserSummary with all calculated values.
        """
        if not trades:
            return self._empty_summary()

        closed_trades = [t for t in trades if t.is_closed]
        speculative_count = sum(1 for t in trades if t.category == TradeCategory.SPECULATIVE)
        best_ticker, worst_ticker = self._ticker_extremes(closed_trades)

        return UserSummary(
            total_trades=len(trades),
            win_rate=win_rate(closed_trades),
            avg_hold_days=average_holding_days(closed_trades),
            best_ticker=best_ticker,
            worst_ticker=worst_ticker,
            speculative_percent=speculative_count / len(trades),
            realized_pnl_total=sum(t.realized_pnl for t in closed_trades),
        )

    def _empty_summary(self) -> UserSummary:
        """Return a summary with zero values for an empty trade list."""
        return UserSummary(
            total_trades=0,
            win_rate=0.0,
            avg_hold_days=0.0,
            best_ticker=None,
            worst_ticker=None,
            speculative_percent=0.0,
            realized_pnl_total=0.0,
        )

    def _ticker_extremes(self, trades: list[Trade]) -> tuple[str | None, str | None]:
        """Find tickers with the highest and lowest total realized PnL.

        Ties resolve to the ticker seen first in the input.

        Returns:
            Tuple of (best_ticker, worst_ticker), both None for no trades.
        """
        if not trades:
            return None, None

        totals: dict[str, float] = {}
        for trade in trades:
            totals[trade.ticker] = totals.get(trade.ticker, 0.0) + trade.realized_pnl

        best_ticker = max(totals, key=lambda ticker: totals[ticker])
        worst_ticker = min(totals, key=lambda ticker: totals[ticker])
        return best_ticker, worst_ticker

    def describe_trade(self, trade: Trade, as_of: date | None = None) -> str:
        """One-sentence recap of a trade's category, holding period and exit.

        Args:
            trade: The trade to describe.
            as_of: Reference date for open trades. Defaults to today.

        Returns:
            A sentence such as "This was a core position held 3 days. You exited
            into strength." Open trades are described as still open, counting
            days up to as_of.
        """
        days = max(1, trade.holding_days(as_of))
        day_label = "day" if days == 1 else "days"
        if not trade.is_closed:
            return (
                f"This is a {trade.category.value} position, still open after "
                f"{days} {day_label}."
            )
        return (
            f"This was a {trade.category.value} position held {days} {day_label}. "
            f"You exited {self._exit_descriptor(trade)}."
        )

    def _exit_descriptor(self, trade: Trade) -> str:
        change = trade.return_percent
        if change < -0.03:
            return "during a pullback"
        if change > 0.03:
            return "into strength"
        return "near your entry"


def compute_summary(trades: list[Trade]) -> UserSummary:
    """Compute a UserSummary for trades."""
    return MetricsCalculator().calculate(trades)
