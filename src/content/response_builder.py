"""Assembly of sectioned answers to market questions."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.analytics.formatting import format_percentage, format_usd, round_half_up
from src.analytics.metrics_calculator import compute_summary
from src.analytics.models import InsightItem, UserSummary
from src.analytics.pattern_analyzer import HOLDING_RANGE_TITLE, generate_insights
from src.analytics.personal_notes import personal_note
from src.content.topic_content import TopicContentSelector, select_topic_content
from src.trades.models import Trade

YOUR_CONTEXT_INTRO = (
    "Based on your trading history, here's how this topic relates to your activity:"
)


class SectionType(str, Enum):
    """Answer section kinds, valued by their display title."""

    CURRENT_SITUATION = "What's happening now"
    KEY_DRIVERS = "Key drivers"
    RISK_OPPORTUNITY = "Risk vs opportunity"
    HISTORICAL = "Historical context"
    RECAP = "Quick take"
    YOUR_CONTEXT = "Your trading context"
    PERSONAL_NOTE = "Personal note"

    @property
    def title(self) -> str:
        return self.value


@dataclass
class Section:
    """One titled block of an answer."""

    type: SectionType
    content: str
    bullet_points: list[str] | None = None


@dataclass
class StructuredResponse:
    """A sectioned answer to a single question."""

    query: str
    sections: list[Section]
    timestamp: datetime = field(default_factory=datetime.now)

    def section(self, section_type: SectionType) -> Section | None:
        """Return the first section of section_type, or None."""
        for section in self.sections:
            if section.type == section_type:
                return section
        return None

    def to_text(self) -> str:
        """Flatten the response into plain paragraphs."""
        parts = []
        for section in self.sections:
            lines = [section.type.title, section.content]
            lines.extend(f"- {point}" for point in section.bullet_points or [])
            parts.append("\n".join(lines))
        return "\n\n".join(parts)


class ResponseBuilder:
    """Builds StructuredResponse objects from topic content and trade history."""

    def __init__(self, selector: TopicContentSelector | None = None) -> None:
        """Initialize the builder.

        Args:
            selector: Topic selector. Defaults to the packaged topic bundles.
        """
        self._selector = selector

    def build(
        self,
        question: str,
        trades: list[Trade],
        simple: bool = False,
        insights: list[InsightItem] | None = None,
    ) -> StructuredResponse:
        """Build the answer to question.

        The five topic sections always come first. A trading context section
        follows when trades exist, then a personal note when one applies.

        Args:
            question: Free-text question.
            trades: The caller's trade history.
            simple: Use plain-language wording.
            insights: Precomputed insights for trades, generated when omitted.

        Returns:
            StructuredResponse for question.
        """
        if self._selector is None:
            content = select_topic_content(question, simple)
        else:
            content = self._selector.select(question, simple)

        sections = [
            Section(SectionType.CURRENT_SITUATION, content.current),
            Section(SectionType.KEY_DRIVERS, content.drivers_intro, list(content.drivers)),
            Section(SectionType.RISK_OPPORTUNITY, content.risk_opportunity),
            Section(SectionType.HISTORICAL, content.historical),
            Section(SectionType.RECAP, content.recap),
        ]

        if trades:
            summary = compute_summary(trades)
            if insights is None:
                insights = generate_insights(trades)
            sections.append(self._your_context_section(trades, summary, insights))

            note = personal_note(trades, summary, question, simple)
            if note is not None:
                sections.append(Section(SectionType.PERSONAL_NOTE, note))

        return StructuredResponse(query=question, sections=sections)

    def _your_context_section(
        self, trades: list[Trade], summary: UserSummary, insights: list[InsightItem]
    ) -> Section:
        closed_count = sum(1 for t in trades if t.is_closed)

        points = [
            f"You have {closed_count} closed trades with a "
            f"{format_percentage(summary.win_rate)} win rate",
            f"Average hold period: {round_half_up(summary.avg_hold_days)} days",
            f"Total realized P/L: {format_usd(summary.realized_pnl_total)}",
        ]
        if summary.best_ticker is not None:
            points.append(f"Strongest performer: {summary.best_ticker}")
        if summary.worst_ticker is not None:
            points.append(f"Weakest performer: {summary.worst_ticker}")

        holding_insight = next(
            (item for item in insights if item.title == HOLDING_RANGE_TITLE), None
        )
        if holding_insight is not None:
            points.append(holding_insight.detail)

        return Section(SectionType.YOUR_CONTEXT, YOUR_CONTEXT_INTRO, points)


def build_response(
    question: str,
    trades: list[Trade],
    simple: bool = False,
    insights: list[InsightItem] | None = None,
) -> StructuredResponse:
    """Build a sectioned answer to question for trades."""
    return ResponseBuilder().build(question, trades, simple, insights)
