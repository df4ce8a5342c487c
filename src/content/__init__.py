"""Content module for topic answers and question parsing."""

from .query_parser import detect_ticker, extract_timeframe_days
from .response_builder import (
    ResponseBuilder,
    Section,
    SectionType,
    StructuredResponse,
    build_response,
)
from .settings import ContentSettings
from .topic_content import (
    TopicBundle,
    TopicCatalog,
    TopicContent,
    TopicContentSelector,
    load_topic_catalog,
    select_topic_content,
)

__all__ = [
    "ContentSettings",
    "ResponseBuilder",
    "Section",
    "SectionType",
    "StructuredResponse",
    "TopicBundle",
    "TopicCatalog",
    "TopicContent",
    "TopicContentSelector",
    "build_response",
    "detect_ticker",
    "extract_timeframe_days",
    "load_topic_catalog",
    "select_topic_content",
]
