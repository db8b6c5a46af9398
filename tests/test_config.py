"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from foodlog.config import get_settings
from foodlog.server.app import create_app


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("FOODLOG_DIARY_TIMEOUT", "0"),
        ("FOODLOG_DIARY_TIMEOUT", "-5"),
        ("FOODLOG_DIARY_TIMEOUT", "soon"),
        ("FOODLOG_DIARY_TIMEOUT", "inf"),
        ("FOODLOG_ICON_MATCH_THRESHOLD", "150"),
        ("FOODLOG_ICON_MATCH_THRESHOLD", "-1"),
        ("FOODLOG_ICON_MATCH_THRESHOLD", "nan"),
    ],
)
def test_invalid_numeric_overrides_keep_defaults(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.diary_timeout == 30.0
    assert settings.icon_match_threshold == 85.0


def test_valid_numeric_overrides_apply(monkeypatch):
    monkeypatch.setenv("FOODLOG_DIARY_TIMEOUT", "12.5")
    monkeypatch.setenv("FOODLOG_ICON_MATCH_THRESHOLD", "100")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.diary_timeout == 12.5
    assert settings.icon_match_threshold == 100.0


def test_env_file_values_are_read(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(
        "# local overrides\nFOODLOG_DIARY_BASE_URL=http://diary.local/\nFOODLOG_LOG_REQUESTS=no\n",
        encoding="utf-8",
    )
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.diary_base_url == "http://diary.local"
    assert settings.log_requests is False


def test_app_starts_with_out_of_range_timeout(monkeypatch):
    monkeypatch.setenv("FOODLOG_DIARY_TIMEOUT", "0")
    get_settings.cache_clear()

    assert create_app().title == "Food Log Normalizer"
