from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errors as mysql_errors

from ..core.exceptions import DatabaseError, NetworkError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# Client-side connection failures (CR_* codes). The C extension raises some of
# these as plain DatabaseError, so the errno is checked as well as the type.
_CONNECTION_ERRNOS = frozenset({2002, 2003, 2005, 2006, 2013, 2055})


def translate_error(exc: mysql.connector.Error) -> Exception:
    errno = getattr(exc, "errno", None)
    if isinstance(exc, (mysql_errors.InterfaceError, mysql_errors.OperationalError)) or errno in _CONNECTION_ERRNOS:
        return NetworkError(f"Database unreachable (errno={errno})")
    return DatabaseError(f"Database query failed (errno={errno})")


def _rollback_quietly(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        logger.debug("rollback failed on a broken connection", exc_info=True)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.warning("database connect failed: %s", e)
        raise translate_error(e) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        logger.warning("database query failed: %s", e)
        raise translate_error(e) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
