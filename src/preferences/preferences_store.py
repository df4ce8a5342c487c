"""JSON file persistence for user preferences."""
import json
import logging
from pathlib import Path

import aiofiles

from src.preferences.models import UserPreferences
from src.preferences.settings import PreferencesSettings

logger = logging.getLogger(__name__)


class PreferencesStore:
    """Reads and writes UserPreferences as a single JSON document."""

    def __init__(self, settings: PreferencesSettings | None = None) -> None:
        """Initialize the store.

        Args:
            settings: Preferences configuration. Defaults to PreferencesSettings().
        """
        self._settings = settings or PreferencesSettings()
        self._path = Path(self._settings.path)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> UserPreferences:
        """Load saved preferences.

        Returns:
            Saved preferences, or defaults when the file is missing or unreadable.
        """
        if not self._path.exists():
            return UserPreferences()

        try:
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                content = await f.read()
            return UserPreferences.model_validate(json.loads(content))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read preferences from {self._path}, using defaults: {e}")
            return UserPreferences()

    async def save(self, preferences: UserPreferences) -> None:
        """Write preferences, replacing any saved document."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self._path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(preferences.model_dump(mode="json"), indent=2))
        logger.debug(f"Saved preferences to {self._path}")

    async def reset(self) -> UserPreferences:
        """Restore and save the default preferences."""
        preferences = UserPreferences()
        await self.save(preferences)
        return preferences
