from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..schools.model import School
from .model import Teacher, TeacherLookup
from .repository import TeacherRepository


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_with_school(self, login_id: str) -> Optional[TeacherLookup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT t.id, t.login_id, t.password_hash, t.name, t.school_id,
                       s.id AS s_id, s.name AS s_name
                FROM teachers t
                LEFT JOIN schools s ON s.id = t.school_id
                WHERE t.login_id=%s
                LIMIT 1
                """,
                (login_id,),
            )
            row = fetchone(cur)
            if not row:
                return None

            teacher = Teacher(
                id=str(row["id"]),
                login_id=row["login_id"],
                password_hash=row["password_hash"] or "",
                name=row["name"],
                school_id=str(row["school_id"]) if row.get("school_id") else None,
            )
            school = School(id=str(row["s_id"]), name=row["s_name"]) if row.get("s_id") else None
            return TeacherLookup(teacher=teacher, school=school)
