# tests/content/test_settings.py
"""Tests for content settings."""
from src.content.settings import ContentSettings


class TestContentSettings:
    """Tests for ContentSettings."""

    def test_default_settings(self):
        """Defaults use the packaged topics in standard wording."""
        settings = ContentSettings()

        assert settings.topics_path is None
        assert settings.simple_mode is False
