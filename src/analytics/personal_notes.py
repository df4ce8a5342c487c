"""Topic-gated personal notes drawn from trade history.

Rules are evaluated in priority order. A rule is eligible when the query
contains one of its keywords (rules without keywords are always eligible),
fires when both trade groups meet their sample size and the trigger holds,
and otherwise falls through to the next rule. At most one note is returned.
"""
from dataclasses import dataclass
from typing import Callable

from src.analytics.formatting import whole_percent
from src.analytics.metrics_calculator import holding_days, win_rate
from src.analytics.models import UserSummary
from src.trades.models import Trade

MIN_CLOSED_TRADES = 5

ETF_TICKERS = frozenset(
    {"SPY", "QQQ", "BND", "GLD", "USO", "XLE", "XLF", "IWM", "DIA", "VTI", "VOO"}
)
TECH_TICKERS = frozenset(
    {"NVDA", "AAPL", "MSFT", "GOOGL", "META", "AMD", "QQQ", "AVGO", "CRM", "ADBE"}
)

HIGH_VOLATILITY_MOVE = 0.10
QUICK_EXIT_DAYS = 3
LONG_HOLD_DAYS = 7
EARLY_EXIT_GAP = 1.5
COMPARE_PRECISION = 9


@dataclass(frozen=True)
class Comparison:
    """Two trade groups and the metric value computed for each."""

    primary: list[Trade]
    baseline: list[Trade]
    primary_value: float
    baseline_value: float


@dataclass(frozen=True)
class NoteRule:
    """One entry of the personal-note priority table.

    Attributes:
        name: Rule identifier.
        keywords: Query substrings that make the rule eligible. Empty means always.
        min_primary: Minimum trades in the primary group.
        min_baseline: Minimum trades in the baseline group.
        split: Splits closed trades into (primary, baseline).
        metric: Value computed per group.
        triggered: Decides whether the comparison is notable.
        render: Builds the note text; the flag selects simple wording.
    """

    name: str
    keywords: tuple[str, ...]
    min_primary: int
    min_baseline: int
    split: Callable[[list[Trade], UserSummary], tuple[list[Trade], list[Trade]]]
    metric: Callable[[list[Trade]], float]
    triggered: Callable[[Comparison, UserSummary], bool]
    render: Callable[[Comparison, UserSummary, bool], str]

    def matches(self, query: str) -> bool:
        if not self.keywords:
            return True
        return any(keyword in query for keyword in self.keywords)

    def evaluate(
        self, trades: list[Trade], summary: UserSummary, simple: bool
    ) -> str | None:
        """Return the note text if this rule fires for trades, else None."""
        primary, baseline = self.split(trades, summary)
        if len(primary) < self.min_primary or len(baseline) < self.min_baseline:
            return None

        comparison = Comparison(
            primary=primary,
            baseline=baseline,
            primary_value=self.metric(primary),
            baseline_value=self.metric(baseline),
        )
        if not self.triggered(comparison, summary):
            return None
        return self.render(comparison, summary, simple)


def _gap(first: float, second: float) -> float:
    """Absolute difference rounded so a gap equal to a threshold never exceeds it."""
    return round(abs(first - second), COMPARE_PRECISION)


def _win_rate_gap(threshold: float) -> Callable[[Comparison, UserSummary], bool]:
    def triggered(comparison: Comparison, summary: UserSummary) -> bool:
        return _gap(comparison.primary_value, comparison.baseline_value) > threshold

    return triggered


def _mean_gain(trades: list[Trade]) -> float:
    if not trades:
        return 0.0
    return sum(t.return_percent for t in trades) / len(trades)


def _split_etf(trades: list[Trade], summary: UserSummary) -> tuple[list[Trade], list[Trade]]:
    etfs = [t for t in trades if t.ticker.upper() in ETF_TICKERS]
    stocks = [t for t in trades if t.ticker.upper() not in ETF_TICKERS]
    return etfs, stocks


def _render_etf(comparison: Comparison, summary: UserSummary, simple: bool) -> str:
    etf_rate = whole_percent(comparison.primary_value)
    stock_rate = whole_percent(comparison.baseline_value)
    if simple:
        if comparison.primary_value > comparison.baseline_value:
            return (
                f"Your fund trades (ETFs) worked out {etf_rate}% of the time, "
                f"compared with {stock_rate}% for single stocks."
            )
        return (
            f"Your single-stock trades worked out {stock_rate}% of the time, "
            f"compared with {etf_rate}% for funds (ETFs)."
        )
    return (
        f"Your ETF trades have a {etf_rate}% win rate versus {stock_rate}% "
        f"for individual stocks across {len(comparison.primary) + len(comparison.baseline)} trades."
    )


def _split_high_volatility(
    trades: list[Trade], summary: UserSummary
) -> tuple[list[Trade], list[Trade]]:
    big_moves = [t for t in trades if abs(t.return_percent) > HIGH_VOLATILITY_MOVE]
    return big_moves, trades


def _high_volatility_triggered(comparison: Comparison, summary: UserSummary) -> bool:
    return _gap(comparison.primary_value, summary.win_rate) > 0.10


def _render_high_volatility(comparison: Comparison, summary: UserSummary, simple: bool) -> str:
    move_rate = whole_percent(comparison.primary_value)
    overall_rate = whole_percent(summary.win_rate)
    direction = "above" if comparison.primary_value > summary.win_rate else "below"
    if simple:
        return (
            f"When a trade moved a lot (more than 10%), it went your way {move_rate}% "
            f"of the time. That's {direction} your usual {overall_rate}%."
        )
    return (
        f"On trades that moved more than 10%, your win rate was {move_rate}%, "
        f"{direction} your overall {overall_rate}%."
    )


def _split_holding(trades: list[Trade], summary: UserSummary) -> tuple[list[Trade], list[Trade]]:
    short_holds = [t for t in trades if holding_days(t) <= QUICK_EXIT_DAYS]
    long_holds = [t for t in trades if holding_days(t) >= LONG_HOLD_DAYS]
    return short_holds, long_holds


def _render_holding(comparison: Comparison, summary: UserSummary, simple: bool) -> str:
    short_rate = whole_percent(comparison.primary_value)
    long_rate = whole_percent(comparison.baseline_value)
    if simple:
        return (
            f"Trades you closed within {QUICK_EXIT_DAYS} days worked out {short_rate}% of "
            f"the time. Trades you held a week or more worked out {long_rate}% of the time."
        )
    return (
        f"Positions closed within {QUICK_EXIT_DAYS} days have a {short_rate}% win rate, "
        f"compared with {long_rate}% for holds of {LONG_HOLD_DAYS} days or longer."
    )


def _split_tech(trades: list[Trade], summary: UserSummary) -> tuple[list[Trade], list[Trade]]:
    tech = [t for t in trades if t.ticker.upper() in TECH_TICKERS]
    non_tech = [t for t in trades if t.ticker.upper() not in TECH_TICKERS]
    return tech, non_tech


def _render_tech(comparison: Comparison, summary: UserSummary, simple: bool) -> str:
    tech_rate = whole_percent(comparison.primary_value)
    other_rate = whole_percent(comparison.baseline_value)
    if simple:
        return (
            f"Your tech trades worked out {tech_rate}% of the time, "
            f"compared with {other_rate}% for everything else."
        )
    return (
        f"Tech names have a {tech_rate}% win rate in your history, "
        f"versus {other_rate}% outside the sector."
    )


def _split_early_exit(
    trades: list[Trade], summary: UserSummary
) -> tuple[list[Trade], list[Trade]]:
    winners = [t for t in trades if t.realized_pnl > 0]
    quick = [t for t in winners if holding_days(t) <= QUICK_EXIT_DAYS]
    longer = [t for t in winners if holding_days(t) >= LONG_HOLD_DAYS]
    return quick, longer


def _early_exit_triggered(comparison: Comparison, summary: UserSummary) -> bool:
    quick_gain = comparison.primary_value
    longer_gain = comparison.baseline_value
    excess = round(longer_gain - quick_gain * EARLY_EXIT_GAP, COMPARE_PRECISION)
    return quick_gain > 0 and excess >= 0


def _render_early_exit(comparison: Comparison, summary: UserSummary, simple: bool) -> str:
    quick_gain = comparison.primary_value * 100
    longer_gain = comparison.baseline_value * 100
    if simple:
        return (
            f"When you sold a winner quickly, you made about {quick_gain:.1f}% on average. "
            f"Winners you held longer made about {longer_gain:.1f}%."
        )
    return (
        f"Winners closed within {QUICK_EXIT_DAYS} days averaged a {quick_gain:.1f}% gain, "
        f"while winners held {LONG_HOLD_DAYS}+ days averaged {longer_gain:.1f}%. "
        f"Early exits have tended to leave part of the move behind."
    )


NOTE_RULES: list[NoteRule] = [
    NoteRule(
        name="etf_vs_stock",
        keywords=("etf", "index", "fund", "spy", "qqq"),
        min_primary=3,
        min_baseline=3,
        split=_split_etf,
        metric=win_rate,
        triggered=_win_rate_gap(0.15),
        render=_render_etf,
    ),
    NoteRule(
        name="high_volatility",
        keywords=("volatil", "swing", "nvda", "nvidia", "tsla", "tesla", "coin", "mrna"),
        min_primary=3,
        min_baseline=MIN_CLOSED_TRADES,
        split=_split_high_volatility,
        metric=win_rate,
        triggered=_high_volatility_triggered,
        render=_render_high_volatility,
    ),
    NoteRule(
        name="holding_period",
        keywords=("hold", "exit", "sell", "short term", "long term", "patien"),
        min_primary=3,
        min_baseline=3,
        split=_split_holding,
        metric=win_rate,
        triggered=_win_rate_gap(0.15),
        render=_render_holding,
    ),
    NoteRule(
        name="tech_vs_non_tech",
        keywords=("tech", "growth", "semiconductor", "nasdaq", "artificial intelligence"),
        min_primary=3,
        min_baseline=3,
        split=_split_tech,
        metric=win_rate,
        triggered=_win_rate_gap(0.10),
        render=_render_tech,
    ),
    NoteRule(
        name="early_exit_drag",
        keywords=(),
        min_primary=5,
        min_baseline=3,
        split=_split_early_exit,
        metric=_mean_gain,
        triggered=_early_exit_triggered,
        render=_render_early_exit,
    ),
]


class PersonalNoteSelector:
    """Picks at most one personal note for a topic query."""

    def __init__(self, rules: list[NoteRule] | None = None) -> None:
        """Initialize with a rule table.

        Args:
            rules: Rules in priority order. Defaults to NOTE_RULES.
        """
        self._rules = NOTE_RULES if rules is None else rules

    def select(
        self,
        trades: list[Trade],
        summary: UserSummary,
        topic_query: str,
        simple: bool = False,
    ) -> str | None:
        """Return the first note whose rule fires, or None.

        Args:
            trades: Trade history. Open trades are ignored.
            summary: Summary already computed for the same trades.
            topic_query: Free-text query, matched case-insensitively.
            simple: Use plain-language wording.
        """
        closed_trades = [t for t in trades if t.is_closed]
        if len(closed_trades) < MIN_CLOSED_TRADES:
            return None

        query = topic_query.lower()
        for rule in self._rules:
            if not rule.matches(query):
                continue
            note = rule.evaluate(closed_trades, summary, simple)
            if note is not None:
                return note
        return None


def personal_note(
    trades: list[Trade],
    summary: UserSummary,
    topic_query: str,
    simple: bool = False,
) -> str | None:
    """Return at most one topic-relevant personal note for trades."""
    return PersonalNoteSelector().select(trades, summary, topic_query, simple)
