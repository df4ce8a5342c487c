"""Settings for the content module."""
from pydantic import BaseModel


class ContentSettings(BaseModel):
    """Configuration settings for topic answers.

    Attributes:
        topics_path: YAML file with topic bundles, None for the packaged file.
        simple_mode: Answer with plain-language bundles by default.
    """

    topics_path: str | None = None
    simple_mode: bool = False
