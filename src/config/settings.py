# src/config/settings.py
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.content.settings import ContentSettings
from src.outlook.settings import OutlookSettings
from src.preferences.settings import PreferencesSettings
from src.trades.settings import TradesSettings


class SystemConfig(BaseModel):
    name: str = "TradeLens"
    version: str = "1.0.0"


class RuntimeConfig(BaseSettings):
    """Runtime switches read from TRADELENS_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="TRADELENS_")

    log_level: str = "INFO"
    simple_mode: bool | None = None
    mock_seed: int | None = None


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    trades: TradesSettings = Field(default_factory=TradesSettings)
    content: ContentSettings = Field(default_factory=ContentSettings)
    outlook: OutlookSettings = Field(default_factory=OutlookSettings)
    preferences: PreferencesSettings = Field(default_factory=PreferencesSettings)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides.

        A runtime section in the YAML file supplies defaults; TRADELENS_*
        environment variables take precedence over it.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        file_runtime = data.pop("runtime", None) or {}
        env_runtime = RuntimeConfig().model_dump(exclude_unset=True)
        runtime = RuntimeConfig(**{**file_runtime, **env_runtime})
        settings = cls(**data, runtime=runtime)

        if runtime.simple_mode is not None:
            settings.content.simple_mode = runtime.simple_mode
        if runtime.mock_seed is not None:
            settings.trades.mock_seed = runtime.mock_seed
            settings.outlook.random_seed = runtime.mock_seed
        return settings
