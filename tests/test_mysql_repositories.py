from __future__ import annotations

from datetime import datetime

from src.teacher_portal.teacher_portal.classes.model import ClassSection
from src.teacher_portal.teacher_portal.classes.mysql_class_section_repository import MySQLClassSectionRepository
from src.teacher_portal.teacher_portal.schools.model import School
from src.teacher_portal.teacher_portal.teachers.mysql_teacher_repository import MySQLTeacherRepository

from conftest import PASSWORD_HASH, FakeConn, FakeCursor, FakeFactory


def make_repo(repo_cls, rows):
    cur = FakeCursor(rows=rows)
    conn = FakeConn(cur)
    return repo_cls(FakeFactory(conn=conn)), cur, conn


def teacher_row(**overrides):
    row = {
        "id": "t-1",
        "login_id": "teacher001",
        "password_hash": PASSWORD_HASH,
        "name": "Sarah Johnson",
        "school_id": "s-green",
        "s_id": "s-green",
        "s_name": "Greenwood Elementary School",
    }
    row.update(overrides)
    return row


def test_teacher_lookup_maps_joined_school():
    repo, cur, conn = make_repo(MySQLTeacherRepository, [teacher_row()])

    found = repo.find_with_school("teacher001")

    assert found.teacher.id == "t-1"
    assert found.teacher.login_id == "teacher001"
    assert found.teacher.password_hash == PASSWORD_HASH
    assert found.teacher.school_id == "s-green"
    assert found.school == School(id="s-green", name="Greenwood Elementary School")

    sql, params = cur.executed[0]
    assert "LEFT JOIN schools" in sql
    assert "LIMIT 1" in sql
    assert params == ("teacher001",)
    assert conn.committed and conn.closed


def test_teacher_lookup_orphan_row_has_no_school():
    repo, _, _ = make_repo(MySQLTeacherRepository, [teacher_row(school_id="s-deleted", s_id=None, s_name=None)])

    found = repo.find_with_school("teacher001")

    assert found.teacher.school_id == "s-deleted"
    assert found.school is None


def test_teacher_lookup_null_columns_and_int_ids():
    repo, _, _ = make_repo(MySQLTeacherRepository, [teacher_row(id=7, password_hash=None, school_id=None, s_id=None)])

    found = repo.find_with_school("teacher001")

    assert found.teacher.id == "7"
    assert found.teacher.password_hash == ""
    assert found.teacher.school_id is None
    assert found.school is None


def test_teacher_lookup_unknown_login():
    repo, _, _ = make_repo(MySQLTeacherRepository, [])

    assert repo.find_with_school("ghost") is None


def test_class_sections_keep_store_order():
    created = datetime(2025, 6, 12, 8, 0, 0)
    rows = [
        {"id": 1, "school_id": 3, "class_name": "Grade 1A", "sheet_link": "https://x/1a", "created_at": created},
        {"id": 2, "school_id": 3, "class_name": "Grade 10", "sheet_link": "https://x/10"},
    ]
    repo, cur, _ = make_repo(MySQLClassSectionRepository, rows)

    sections = repo.list_by_school("3")

    assert sections == [
        ClassSection(id="1", school_id="3", class_name="Grade 1A", sheet_link="https://x/1a", created_at=created),
        ClassSection(id="2", school_id="3", class_name="Grade 10", sheet_link="https://x/10", created_at=None),
    ]
    sql, params = cur.executed[0]
    assert "WHERE school_id=%s" in sql
    assert "ORDER BY class_name COLLATE utf8mb4_bin" in sql
    assert params == ("3",)


def test_class_sections_empty_school():
    repo, _, _ = make_repo(MySQLClassSectionRepository, [])

    assert repo.list_by_school("s-empty") == []
