"""Settings for the trades module."""
from pydantic import BaseModel, Field, model_validator


class TradesSettings(BaseModel):
    """Configuration settings for trade data sources.

    Attributes:
        import_dir: Directory searched for CSV files named without a path.
        import_file: CSV file to import at startup instead of mock trades.
        mock_min_trades: Minimum number of generated mock trades.
        mock_max_trades: Maximum number of generated mock trades.
        mock_fetch_delay_seconds: Simulated latency before mock trades arrive.
        mock_seed: Seed for the mock generator, None for a fresh sequence.
    """

    import_dir: str = "data/imports"
    import_file: str | None = None

    mock_min_trades: int = Field(default=50, ge=1, le=1000)
    mock_max_trades: int = Field(default=120, ge=1, le=1000)
    mock_fetch_delay_seconds: float = Field(default=0.25, ge=0.0, le=10.0)
    mock_seed: int | None = None

    @model_validator(mode="after")
    def validate_trade_bounds(self) -> "TradesSettings":
        """Validate that the mock trade count range is not inverted."""
        if self.mock_min_trades > self.mock_max_trades:
            raise ValueError(
                f"mock_min_trades ({self.mock_min_trades}) must not exceed "
                f"mock_max_trades ({self.mock_max_trades})"
            )
        return self
