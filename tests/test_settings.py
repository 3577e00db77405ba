"""Tests for environment settings."""

import pytest

from core.settings import load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings.platforms["bluesky"].char_limit == 300
        assert settings.platforms["mastodon"].char_limit == 500
        assert settings.platforms["bluesky"].end_marker == "..."
        assert settings.language == "en"
        assert settings.host == "localhost"
        assert settings.port == 5001
        assert settings.log_level == "INFO"

    def test_overrides(self):
        settings = load_settings({
            "BLUESKY_CHAR_LIMIT": "280",
            "MASTODON_CHAR_LIMIT": " 1000 ",
            "THREAD_END_MARKER": "…",
            "DEFAULT_LANGUAGE": "ja",
            "PREVIEW_PORT": "8000",
            "LOG_LEVEL": "debug",
        })
        assert settings.platforms["bluesky"].char_limit == 280
        assert settings.platforms["mastodon"].char_limit == 1000
        assert settings.platforms["mastodon"].end_marker == "…"
        assert settings.language == "ja"
        assert settings.port == 8000
        assert settings.log_level == "DEBUG"

    def test_empty_marker_is_kept(self):
        settings = load_settings({"THREAD_END_MARKER": ""})
        assert settings.platforms["bluesky"].end_marker == ""

    def test_blank_limit_uses_default(self):
        assert load_settings({"BLUESKY_CHAR_LIMIT": " "}).platforms["bluesky"].char_limit == 300

    def test_non_integer_limit_raises(self):
        with pytest.raises(ValueError, match="BLUESKY_CHAR_LIMIT must be an integer"):
            load_settings({"BLUESKY_CHAR_LIMIT": "lots"})

    def test_non_positive_limit_raises(self):
        with pytest.raises(ValueError, match="MASTODON_CHAR_LIMIT must be positive"):
            load_settings({"MASTODON_CHAR_LIMIT": "0"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("BLUESKY_CHAR_LIMIT", "123")
        assert load_settings().platforms["bluesky"].char_limit == 123
