from __future__ import annotations

from types import SimpleNamespace

import pytest

import config
from config import testing as testing_settings
from src.teacher_portal.teacher_portal.core.exceptions import ConfigurationError
from src.teacher_portal.teacher_portal.database.connection import db_config_from_settings
from src.teacher_portal.teacher_portal.main import create_app


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert config.get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "test")
    assert config.get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV", raising=False)
    assert config.get_settings_module() == "config.development"


def test_db_config_from_url_and_key():
    settings = SimpleNamespace(
        DATABASE_URL="mysql://portal_ro@db.internal:3307/teacher_portal",
        DATABASE_KEY="s3cr@t",
        DB_TIMEOUT_SECONDS=5,
    )

    assert db_config_from_settings(settings) == {
        "host": "db.internal",
        "port": 3307,
        "user": "portal_ro",
        "password": "s3cr@t",
        "database": "teacher_portal",
        "timeout": 5,
    }


def test_db_config_defaults_port_and_timeout():
    cfg = db_config_from_settings(SimpleNamespace(DATABASE_URL="mysql://u@h/db", DATABASE_KEY="k"))

    assert cfg["port"] == 3306
    assert cfg["timeout"] == 10


@pytest.mark.parametrize(
    "url,key",
    [
        (None, "k"),
        ("mysql://u@h/db", None),
        ("", ""),
        ("postgres://u@h/db", "k"),
        ("mysql://u@h/", "k"),
    ],
)
def test_bad_or_missing_settings_raise(url, key):
    with pytest.raises(ConfigurationError):
        db_config_from_settings(SimpleNamespace(DATABASE_URL=url, DATABASE_KEY=key))


def test_create_app_refuses_to_start_without_database_settings(monkeypatch, container):
    monkeypatch.setattr(testing_settings, "DATABASE_KEY", None)

    with pytest.raises(ConfigurationError, match="DATABASE_KEY"):
        create_app("config.testing", container=container)
