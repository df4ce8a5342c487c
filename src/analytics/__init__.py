"""Analytics module for trade summaries, insights and personal notes."""

from .metrics_calculator import MetricsCalculator, compute_summary
from .models import InsightItem, UserSummary
from .pattern_analyzer import PatternAnalyzer, generate_insights
from .personal_notes import NoteRule, PersonalNoteSelector, personal_note

__all__ = [
    "InsightItem",
    "MetricsCalculator",
    "NoteRule",
    "PatternAnalyzer",
    "PersonalNoteSelector",
    "UserSummary",
    "compute_summary",
    "generate_insights",
    "personal_note",
]
