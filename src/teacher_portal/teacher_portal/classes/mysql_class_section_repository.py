from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ClassSection
from .repository import ClassSectionRepository


class MySQLClassSectionRepository(ClassSectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_by_school(self, school_id: str) -> Sequence[ClassSection]:
        # Binary collation keeps the order lexicographic on the stored string.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, school_id, class_name, sheet_link, created_at
                FROM class_sections
                WHERE school_id=%s
                ORDER BY class_name COLLATE utf8mb4_bin
                """,
                (school_id,),
            )
            rows = fetchall(cur)
            return [
                ClassSection(
                    id=str(r["id"]),
                    school_id=str(r["school_id"]),
                    class_name=r["class_name"],
                    sheet_link=r["sheet_link"],
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]
