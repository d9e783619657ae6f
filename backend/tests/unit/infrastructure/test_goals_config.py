"""Unit tests for environment configuration helpers."""

from infrastructure.config import (
    get_activity_window_days,
    get_default_activity_multiplier,
    get_log_format,
    get_log_level,
    get_repository_backend,
)


class TestConfig:
    """Test env var parsing and defaults."""

    def test_defaults(self, monkeypatch):
        for name in (
            "LOG_LEVEL",
            "LOG_FORMAT",
            "ACTIVITY_WINDOW_DAYS",
            "DEFAULT_ACTIVITY_MULTIPLIER",
            "REPOSITORY_BACKEND",
        ):
            monkeypatch.delenv(name, raising=False)

        assert get_log_level() == "INFO"
        assert get_log_format() == "console"
        assert get_activity_window_days() == 7
        assert get_default_activity_multiplier() == 1.55
        assert get_repository_backend() == "inmemory"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("ACTIVITY_WINDOW_DAYS", "14")
        monkeypatch.setenv("DEFAULT_ACTIVITY_MULTIPLIER", "1.375")
        monkeypatch.setenv("REPOSITORY_BACKEND", "InMemory")

        assert get_log_level() == "DEBUG"
        assert get_log_format() == "json"
        assert get_activity_window_days() == 14
        assert get_default_activity_multiplier() == 1.375
        assert get_repository_backend() == "inmemory"

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        monkeypatch.setenv("ACTIVITY_WINDOW_DAYS", "0")
        monkeypatch.setenv("DEFAULT_ACTIVITY_MULTIPLIER", "fast")

        assert get_log_format() == "console"
        assert get_activity_window_days() == 7
        assert get_default_activity_multiplier() == 1.55

    def test_non_numeric_window(self, monkeypatch):
        monkeypatch.setenv("ACTIVITY_WINDOW_DAYS", "week")

        assert get_activity_window_days() == 7
