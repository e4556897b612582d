from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_IDLE_SECONDS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_teachers, list_tables
from .database.connection import db_config_from_settings
from .relay.controller import register as register_relay
from .sheets.controller import register as register_sheets
from .teachers.controller import register as register_teachers

logger = logging.getLogger("teacher_portal")

REPO_ROOT = Path(__file__).resolve().parents[3]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    # Raises ConfigurationError when DATABASE_URL / DATABASE_KEY are missing.
    db_config = db_config_from_settings(settings)
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config["user"],
        db_config["host"],
        db_config["port"],
        db_config["database"],
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_teachers(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            strict_school=bool(getattr(settings, "STRICT_SCHOOL_CHECK", True)),
            relay_url=str(getattr(settings, "RELAY_URL", "") or ""),
            relay_timeout=float(getattr(settings, "RELAY_TIMEOUT_SECONDS", 10)),
            session_idle_seconds=float(getattr(settings, "SESSION_IDLE_SECONDS", DEFAULT_SESSION_IDLE_SECONDS)),
        )

    register_teachers(app, container)
    register_sheets(app, container)
    register_relay(app, container)

    return app


def run() -> None:
    """Console entrypoint installed as ``teacher-portal``."""
    app = create_app()
    app.run(debug=bool(app.config.get("DEBUG", False)))
