# tests/preferences/test_preferences_store.py
"""Tests for preference persistence."""
import json
from pathlib import Path

from src.preferences.models import RiskTolerance, TradingStyle, UserPreferences
from src.preferences.preferences_store import PreferencesStore
from src.preferences.settings import PreferencesSettings


def make_store(tmp_path: Path) -> PreferencesStore:
    """Create a store writing under tmp_path."""
    return PreferencesStore(PreferencesSettings(path=str(tmp_path / "prefs" / "preferences.json")))


class TestPreferencesStore:
    """Tests for PreferencesStore."""

    async def test_missing_file_gives_defaults(self, tmp_path: Path):
        """Loading before any save returns defaults."""
        preferences = await make_store(tmp_path).load()

        assert preferences == UserPreferences()

    async def test_round_trip(self, tmp_path: Path):
        """Saved preferences load back unchanged."""
        store = make_store(tmp_path)
        saved = UserPreferences(
            trading_style=TradingStyle.SHORT_TERM,
            risk_tolerance=RiskTolerance.LOW,
            watched_tickers=["NVDA"],
            simple_mode=True,
            has_completed_onboarding=True,
        )

        await store.save(saved)

        assert await store.load() == saved

    async def test_saved_as_json(self, tmp_path: Path):
        """The file stores enum values as strings."""
        store = make_store(tmp_path)

        await store.save(UserPreferences(trading_style=TradingStyle.LONG_TERM))

        data = json.loads(store.path.read_text())
        assert data["trading_style"] == "long_term"
        assert data["risk_tolerance"] == "moderate"

    async def test_corrupt_file_gives_defaults(self, tmp_path: Path):
        """Unreadable documents fall back to defaults."""
        store = make_store(tmp_path)
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")

        assert await store.load() == UserPreferences()

    async def test_invalid_values_give_defaults(self, tmp_path: Path):
        """Documents failing validation fall back to defaults."""
        store = make_store(tmp_path)
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"trading_style": "day_trading"}))

        assert await store.load() == UserPreferences()

    async def test_reset(self, tmp_path: Path):
        """Reset saves and returns defaults."""
        store = make_store(tmp_path)
        await store.save(UserPreferences(simple_mode=True))

        preferences = await store.reset()

        assert preferences == UserPreferences()
        assert (await store.load()).simple_mode is False
