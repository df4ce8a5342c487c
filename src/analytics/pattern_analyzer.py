"""Analyzer for behavioral patterns in trade history."""
from collections import defaultdict

from src.analytics.formatting import format_usd, whole_percent
from src.analytics.metrics_calculator import average_holding_days, holding_days
from src.analytics.models import InsightItem
from src.trades.models import Trade, TradeCategory

HOLDING_RANGES: list[tuple[str, int, int]] = [
    ("1–4", 1, 4),
    ("5–15", 5, 15),
    ("16–45", 16, 45),
    ("46+", 46, 365),
]
FALLBACK_RANGE_LABEL = "5–15"
OVERFLOW_RANGE_LABEL = "46+"

HIGH_VOLATILITY_MOVE = 0.18
CONCENTRATION_THRESHOLD = 0.25

HOLDING_RANGE_TITLE = "Holding Range"


class PatternAnalyzer:
    """Derives the six fixed insights from a trade list.

    Every insight is computed independently and falls back to a fixed sentence
    when the trades it needs are missing, so analyze always returns six items.
    """

    def analyze(self, trades: list[Trade]) -> list[InsightItem]:
        """Generate insights from trades.

        PnL-based insights use closed trades only. Over-concentration uses
        every trade, since open positions still hold capital.

        Args:
            trades: Trades to analyze.

        Returns:
            Exactly six InsightItem objects in a fixed order.
        """
        closed_trades = [t for t in trades if t.is_closed]

        return [
            self._holding_range_insight(closed_trades),
            self._volatility_insight(closed_trades),
            self._speculative_impact_insight(closed_trades),
            self._holding_discipline_insight(closed_trades),
            self._over_concentration_insight(trades),
            self._speculative_drag_insight(closed_trades),
        ]

    def _holding_range_insight(self, trades: list[Trade]) -> InsightItem:
        label = self.best_holding_range(trades) or FALLBACK_RANGE_LABEL
        return InsightItem(
            title=HOLDING_RANGE_TITLE,
            subtitle="Where results have tended to cluster",
            detail=f"Your outcomes have leaned strongest around {label} days",
        )

    def best_holding_range(self, trades: list[Trade]) -> str | None:
        """Find the holding range label with the highest mean realized PnL.

        Ties resolve to the earlier range in HOLDING_RANGES order.

        Returns:
            Range label, or None when there are no trades.
        """
        range_pnl: dict[str, list[float]] = defaultdict(list)

        for trade in trades:
            range_pnl[self._range_label(holding_days(trade))].append(trade.realized_pnl)

        range_avg = [
            (label, sum(range_pnl[label]) / len(range_pnl[label]))
            for label, _, _ in HOLDING_RANGES
            if range_pnl[label]
        ]
        if not range_avg:
            return None

        return max(range_avg, key=lambda x: x[1])[0]

    def _range_label(self, days: int) -> str:
        for label, low, high in HOLDING_RANGES:
            if low <= days <= high:
                return label
        return OVERFLOW_RANGE_LABEL

    def _volatility_insight(self, trades: list[Trade]) -> InsightItem:
        high_vol_tickers = {
            t.ticker for t in trades if abs(t.return_percent) > HIGH_VOLATILITY_MOVE
        }
        high_vol_losses = [
            t for t in trades if t.ticker in high_vol_tickers and t.realized_pnl < 0
        ]

        if high_vol_losses:
            detail = f"High volatility names were tied to {len(high_vol_losses)} losing trades"
        else:
            detail = "High volatility names have weighed less on results recently"

        return InsightItem(
            title="Volatility Impact",
            subtitle="How faster movers shaped outcomes",
            detail=detail,
        )

    def _speculative_impact_insight(self, trades: list[Trade]) -> InsightItem:
        title = "Speculative Impact"
        subtitle = "Share of wins or losses"

        if not trades:
            return InsightItem(
                title=title,
                subtitle=subtitle,
                detail="Speculative trades make up 0% but drive 0% of losses",
            )

        speculative = [t for t in trades if t.category == TradeCategory.SPECULATIVE]
        speculative_share = len(speculative) / len(trades)

        total_wins = sum(t.realized_pnl for t in trades if t.realized_pnl > 0)
        total_losses = sum(abs(t.realized_pnl) for t in trades if t.realized_pnl < 0)
        speculative_wins = sum(t.realized_pnl for t in speculative if t.realized_pnl > 0)
        speculative_losses = sum(abs(t.realized_pnl) for t in speculative if t.realized_pnl < 0)

        drives_wins = total_wins >= total_losses
        total_impact = total_wins if drives_wins else total_losses
        speculative_impact = speculative_wins if drives_wins else speculative_losses
        impact_share = speculative_impact / total_impact if total_impact > 0 else 0.0
        impact_label = "wins" if drives_wins else "losses"

        return InsightItem(
            title=title,
            subtitle=subtitle,
            detail=(
                f"Speculative trades make up {whole_percent(speculative_share)}% "
                f"but drive {whole_percent(impact_share)}% of {impact_label}"
            ),
        )

    def _holding_discipline_insight(self, trades: list[Trade]) -> InsightItem:
        title = "Holding Discipline"
        subtitle = "Winner vs loser exit timing"

        winners = [t for t in trades if t.realized_pnl > 0]
        losers = [t for t in trades if t.realized_pnl < 0]
        if not winners or not losers:
            return InsightItem(
                title=title,
                subtitle=subtitle,
                detail="Not enough winning and losing trades to compare exits",
            )

        winner_avg = average_holding_days(winners)
        loser_avg = average_holding_days(losers)

        if winner_avg < loser_avg:
            detail = (
                "Winners have been cut faster than losers in your history, "
                "which can deepen drawdowns."
            )
        elif winner_avg > loser_avg:
            detail = (
                "Winners have been held longer than losers, "
                "which has kept exit timing more balanced."
            )
        else:
            detail = "Winners and losers are held for similar stretches."

        return InsightItem(title=title, subtitle=subtitle, detail=detail)

    def _over_concentration_insight(self, trades: list[Trade]) -> InsightItem:
        title = "Over-Concentration Risk"
        subtitle = "Largest ticker share of capital at risk"
        empty = InsightItem(
            title=title, subtitle=subtitle, detail="No capital at risk tracked yet"
        )

        risk_by_ticker: dict[str, float] = {}
        for trade in trades:
            risk = abs(trade.entry_price * trade.quantity)
            risk_by_ticker[trade.ticker] = risk_by_ticker.get(trade.ticker, 0.0) + risk

        total_risk = sum(risk_by_ticker.values())
        if total_risk <= 0:
            return empty

        top_ticker = max(risk_by_ticker, key=lambda ticker: risk_by_ticker[ticker])
        share = risk_by_ticker[top_ticker] / total_risk

        if share > CONCENTRATION_THRESHOLD:
            detail = f"{top_ticker} represents {whole_percent(share)}% of capital at risk."
        else:
            detail = "No ticker is above 25% of capital at risk."

        return InsightItem(title=title, subtitle=subtitle, detail=detail)

    def _speculative_drag_insight(self, trades: list[Trade]) -> InsightItem:
        title = "Speculative Drag"
        subtitle = "Speculative vs core PnL contribution"

        if not trades:
            return InsightItem(
                title=title,
                subtitle=subtitle,
                detail="Speculative and core PnL are evenly balanced.",
            )

        # Compared in cents so float noise does not read as a gap.
        speculative_pnl = round(
            sum(t.realized_pnl for t in trades if t.category == TradeCategory.SPECULATIVE), 2
        )
        core_pnl = round(
            sum(t.realized_pnl for t in trades if t.category == TradeCategory.CORE), 2
        )

        if speculative_pnl == 0 and core_pnl == 0:
            detail = "Speculative and core PnL are flat overall."
        elif speculative_pnl == core_pnl:
            detail = "Speculative and core PnL are aligned."
        elif speculative_pnl < core_pnl:
            detail = f"Speculative PnL trails core by {format_usd(core_pnl - speculative_pnl)}."
        else:
            detail = f"Speculative PnL leads core by {format_usd(speculative_pnl - core_pnl)}."

        return InsightItem(title=title, subtitle=subtitle, detail=detail)


def generate_insights(trades: list[Trade]) -> list[InsightItem]:
    """Generate the six fixed insights for trades."""
    return PatternAnalyzer().analyze(trades)
