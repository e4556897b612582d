from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

# (login_id, password, name, school name)
DEMO_TEACHERS = (
    ("teacher001", "password123", "Sarah Johnson", "Greenwood Elementary School"),
    ("teacher002", "password123", "Michael Chen", "Greenwood Elementary School"),
    ("teacher003", "password123", "Emily Rodriguez", "Riverside High School"),
    ("teacher004", "password123", "David Thompson", "Riverside High School"),
    ("teacher005", "password123", "Lisa Anderson", "Oakmont Middle School"),
    ("teacher006", "password123", "James Wilson", "Oakmont Middle School"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        connection_timeout=target.timeout,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _apply_sql_file(db_config: dict, path: str | Path) -> int:
    target = DBConfig.from_dict(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))

    conn = _connect(target)
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    n = _apply_sql_file(db_config, schema_path)
    logger.info("applied %d schema statements from %s", n, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    n = _apply_sql_file(db_config, seed_path)
    logger.info("applied %d seed statements from %s", n, seed_path)


def ensure_demo_teachers(db_config: dict) -> None:
    """Upsert the demo teachers with hashed passwords.

    Requires the demo schools from seed.sql to exist.
    """
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)

        def school_id(name: str) -> str:
            cur.execute("SELECT id FROM schools WHERE name=%s", (name,))
            row = cur.fetchone()
            if not row:
                raise RuntimeError(f"Missing schools row for name={name}")
            return str(row["id"])

        for login_id, password, name, school_name in DEMO_TEACHERS:
            password_hash = generate_password_hash(password)
            sid = school_id(school_name)
            cur.execute("SELECT id FROM teachers WHERE login_id=%s", (login_id,))
            if cur.fetchone():
                cur.execute(
                    "UPDATE teachers SET password_hash=%s, name=%s, school_id=%s WHERE login_id=%s",
                    (password_hash, name, sid, login_id),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO teachers (id, login_id, password_hash, name, school_id)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (str(uuid.uuid4()), login_id, password_hash, name, sid),
                )

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
