from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.teacher_portal.teacher_portal.database.bootstrap import apply_seed_sql, ensure_demo_teachers
from src.teacher_portal.teacher_portal.database.connection import db_config_from_settings


def main() -> None:
    db_config = db_config_from_settings(load_settings())

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_teachers(db_config)

    print(
        "OK: Seeded database -> "
        f"{db_config['user']}@{db_config['host']}:{db_config['port']}/{db_config['database']}"
    )


if __name__ == "__main__":
    main()
