from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlparse

import mysql.connector

from ..core.constants import DEFAULT_MYSQL_PORT, DEFAULT_TIMEOUT_SECONDS
from ..core.exceptions import ConfigurationError


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    timeout: int = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port") or DEFAULT_MYSQL_PORT),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
            timeout=int(db_config.get("timeout") or DEFAULT_TIMEOUT_SECONDS),
        )


def db_config_from_settings(settings) -> dict:
    """Build the connection dict from DATABASE_URL + DATABASE_KEY.

    Both are required; a missing value stops the app at startup.
    """
    url = getattr(settings, "DATABASE_URL", None)
    key = getattr(settings, "DATABASE_KEY", None)
    missing = [name for name, value in (("DATABASE_URL", url), ("DATABASE_KEY", key)) if not value]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    parsed = urlparse(url)
    if not parsed.scheme.startswith("mysql") or not parsed.hostname:
        raise ConfigurationError("DATABASE_URL must look like mysql://user@host:port/dbname")

    database = (parsed.path or "").lstrip("/")
    if not database:
        raise ConfigurationError("DATABASE_URL has no database name")

    return {
        "host": parsed.hostname,
        "port": parsed.port or DEFAULT_MYSQL_PORT,
        "user": unquote(parsed.username or "root"),
        "password": str(key),
        "database": database,
        "timeout": int(getattr(settings, "DB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
    }


class DatabaseConnection:
    """DB connection factory bound to one config.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            connection_timeout=int(self._config.timeout),
        )
