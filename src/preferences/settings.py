"""Settings for the preferences module."""
from pydantic import BaseModel


class PreferencesSettings(BaseModel):
    """Configuration settings for preference storage.

    Attributes:
        path: JSON file holding the saved preferences.
    """

    path: str = "data/preferences.json"
