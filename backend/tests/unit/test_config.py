"""
Unit tests for environment-driven settings.
"""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

import pytest

from core.config import Settings, get_settings


def test_defaults_without_environment() -> None:
    with pytest.MonkeyPatch.context() as m:
        for name in (
            "APP_NAME",
            "DATABASE_URL",
            "LOG_LEVEL",
            "PORT",
            "DB_ECHO",
            "AUTO_CREATE_SCHEMA",
            "PROGRAM_PRESERVE_COMPLETED_ON",
        ):
            m.delenv(name, raising=False)
        settings = Settings.from_env()
    assert settings.app_name == "MentorMe"
    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.preserve_completed_on is False
    assert settings.auto_create_schema is True
    assert settings.port == 8000


def test_environment_overrides() -> None:
    with pytest.MonkeyPatch.context() as m:
        m.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/mentorme")
        m.setenv("LOG_LEVEL", "debug")
        m.setenv("DB_ECHO", "yes")
        m.setenv("PROGRAM_PRESERVE_COMPLETED_ON", "true")
        m.setenv("AUTO_CREATE_SCHEMA", "0")
        settings = Settings.from_env()
    assert settings.database_url == "postgresql+asyncpg://u:p@db/mentorme"
    assert settings.log_level == "debug"
    assert settings.db_echo is True
    assert settings.preserve_completed_on is True
    assert settings.auto_create_schema is False


def test_unrecognised_boolean_falls_back_to_default() -> None:
    with pytest.MonkeyPatch.context() as m:
        m.setenv("PROGRAM_PRESERVE_COMPLETED_ON", "maybe")
        assert Settings.from_env().preserve_completed_on is False


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
