"""Preferences module for user trading style and risk settings."""

from .models import RiskTolerance, TradingStyle, UserPreferences
from .preferences_store import PreferencesStore
from .settings import PreferencesSettings

__all__ = [
    "PreferencesSettings",
    "PreferencesStore",
    "RiskTolerance",
    "TradingStyle",
    "UserPreferences",
]
