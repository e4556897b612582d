from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.teacher_portal.teacher_portal.database.bootstrap import apply_schema, list_tables
from src.teacher_portal.teacher_portal.database.connection import db_config_from_settings


def main() -> None:
    db_config = db_config_from_settings(load_settings())

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = list_tables(db_config)
    print(
        "OK: Applied schema.sql -> "
        f"{db_config['user']}@{db_config['host']}:{db_config['port']}/{db_config['database']} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
