"""Canned topic bundles selected by keyword match."""
import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_TOPICS_PATH = Path(__file__).parent / "data" / "topics.yaml"


class TopicContent(BaseModel):
    """Text for the five topic sections of an answer."""

    current: str
    drivers_intro: str
    drivers: list[str] = Field(default_factory=list)
    risk_opportunity: str
    historical: str
    recap: str


class TopicBundle(BaseModel):
    """One topic with its match keywords and both wordings."""

    name: str
    keywords: list[str] = Field(default_factory=list)
    standard: TopicContent
    simple: TopicContent

    def matches(self, query: str) -> bool:
        return any(keyword in query for keyword in self.keywords)

    def content(self, simple: bool) -> TopicContent:
        return self.simple if simple else self.standard


class TopicCatalog(BaseModel):
    """Ordered topic bundles plus the bundle used when nothing matches."""

    topics: list[TopicBundle] = Field(default_factory=list)
    default: TopicBundle


def load_topic_catalog(path: Path | None = None) -> TopicCatalog:
    """Load topic bundles from YAML.

    Args:
        path: YAML file to read. Defaults to the packaged topics file.

    Returns:
        Parsed TopicCatalog.
    """
    path = path or DEFAULT_TOPICS_PATH
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    catalog = TopicCatalog(**data)
    logger.debug(f"Loaded {len(catalog.topics)} topic bundles from {path}")
    return catalog


class TopicContentSelector:
    """Picks the first topic bundle whose keyword appears in a query."""

    def __init__(self, catalog: TopicCatalog | None = None) -> None:
        self._catalog = catalog or load_topic_catalog()

    @property
    def catalog(self) -> TopicCatalog:
        return self._catalog

    def match(self, query: str) -> TopicBundle:
        """Return the matching bundle, or the default bundle.

        Matching is a case-insensitive substring test in catalog order.
        """
        lowered = query.lower()
        for bundle in self._catalog.topics:
            if bundle.matches(lowered):
                return bundle
        return self._catalog.default

    def select(self, query: str, simple: bool = False) -> TopicContent:
        return self.match(query).content(simple)


@lru_cache(maxsize=1)
def _packaged_selector() -> TopicContentSelector:
    return TopicContentSelector()


def select_topic_content(query: str, simple: bool = False) -> TopicContent:
    """Return the topic content for query from the packaged bundles.

    Args:
        query: Free-text question.
        simple: Use the plain-language bundle set.

    Returns:
        TopicContent for the first matching topic, or the default topic.
    """
    return _packaged_selector().select(query, simple)
