"""Example: log in through the service layer (no Flask).

Controllers are a thin layer; the login flow lives in SessionHolder and the services.
"""

import sys

from config import load_settings

from src.teacher_portal.teacher_portal.container import build_container
from src.teacher_portal.teacher_portal.database.connection import db_config_from_settings


def main(login_id: str = "teacher001", password: str = "password123"):
    container = build_container(db_config=db_config_from_settings(load_settings()))
    _, holder = container.sessions.create()

    if not holder.login(login_id, password):
        print(f"login failed: {holder.last_error}")
        return

    auth = holder.current
    print(f"{auth.teacher.name} @ {auth.school_name}")
    if auth.warning:
        print(f"warning: {auth.warning}")
    for link in auth.sheet_links:
        print(f"  [{link.grade_level:>2}] {link.sheet_name}: {link.access_url}")


if __name__ == "__main__":
    main(*sys.argv[1:3])
