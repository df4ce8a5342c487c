"""Settings for the outlook module."""
from pydantic import BaseModel, Field


class OutlookSettings(BaseModel):
    """Configuration settings for outlook synthesis.

    Attributes:
        reference_path: YAML reference data, None for the packaged file.
        default_timeframe_days: Window used when none is given.
        random_seed: Seed for driver sampling and band noise, None for fresh draws.
    """

    reference_path: str | None = None
    default_timeframe_days: int = Field(default=30, ge=1, le=3650)
    random_seed: int | None = None
