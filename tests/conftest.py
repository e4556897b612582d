from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

import pytest
from werkzeug.security import generate_password_hash

from src.teacher_portal.teacher_portal.classes.model import ClassSection
from src.teacher_portal.teacher_portal.container import wire_container
from src.teacher_portal.teacher_portal.main import create_app
from src.teacher_portal.teacher_portal.schools.model import School
from src.teacher_portal.teacher_portal.teachers.model import Teacher, TeacherLookup

PASSWORD = "password123"
PASSWORD_HASH = generate_password_hash(PASSWORD)

GREENWOOD = School(id="s-green", name="Greenwood Elementary School")
RIVERSIDE = School(id="s-river", name="Riverside High School")
EMPTY_SCHOOL = School(id="s-empty", name="Empty School")


def sheet_url(sheet_id: str) -> str:
    return f"https://docs.google.com/spreadsheets/d/{sheet_id}/edit"


def make_teacher(login_id: str, school_id: Optional[str], *, name: str = "Teacher", password_hash: str = PASSWORD_HASH):
    return Teacher(id=f"t-{login_id}", login_id=login_id, password_hash=password_hash, name=name, school_id=school_id)


def make_section(section_id: str, school_id: str, class_name: str, sheet_id: str = "SHEET") -> ClassSection:
    return ClassSection(
        id=section_id,
        school_id=school_id,
        class_name=class_name,
        sheet_link=sheet_url(sheet_id),
        created_at=datetime(2025, 6, 12, 8, 0, 0),
    )


class InMemoryTeachers:
    def __init__(self, teachers: Iterable[Teacher], schools: Iterable[School]):
        self._teachers = {t.login_id: t for t in teachers}
        self._schools = {s.id: s for s in schools}
        self.lookups: list[str] = []

    def find_with_school(self, login_id: str) -> Optional[TeacherLookup]:
        self.lookups.append(login_id)
        teacher = self._teachers.get(login_id)
        if not teacher:
            return None
        return TeacherLookup(teacher=teacher, school=self._schools.get(teacher.school_id))


class InMemoryClasses:
    def __init__(self, sections: Iterable[ClassSection]):
        self._sections = list(sections)
        self.calls: list[str] = []

    def list_by_school(self, school_id: str):
        self.calls.append(school_id)
        rows = [s for s in self._sections if s.school_id == school_id]
        return sorted(rows, key=lambda s: s.class_name)


class FailingRepo:
    """Stands in for either repository and raises on every call."""

    def __init__(self, exc: Exception):
        self._exc = exc

    def find_with_school(self, login_id):
        raise self._exc

    def list_by_school(self, school_id):
        raise self._exc


class FakeCursor:
    """mysql.connector dictionary-cursor stand-in: records SQL, returns preset rows."""

    def __init__(self, exc=None, rows=None):
        self._exc = exc
        self._rows = list(rows or [])
        self.executed: list[tuple] = []
        self.closed = False

    def execute(self, sql, params=None):
        if self._exc:
            raise self._exc
        self.executed.append((sql, params))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, exc=None):
        self._conn = conn
        self._exc = exc

    def connect(self):
        if self._exc:
            raise self._exc
        return self._conn


@pytest.fixture
def teachers_repo() -> InMemoryTeachers:
    return InMemoryTeachers(
        [
            make_teacher("teacher001", GREENWOOD.id, name="Sarah Johnson"),
            make_teacher("teacher003", RIVERSIDE.id, name="Emily Rodriguez"),
            make_teacher("teacher009", EMPTY_SCHOOL.id, name="Nora Empty"),
            make_teacher("orphan01", "s-deleted", name="Olly Orphan"),
            make_teacher("noschool", None, name="Nadia None"),
            make_teacher("legacy01", GREENWOOD.id, password_hash="password123"),
        ],
        [GREENWOOD, RIVERSIDE, EMPTY_SCHOOL],
    )


@pytest.fixture
def classes_repo() -> InMemoryClasses:
    return InMemoryClasses(
        [
            make_section("c-2b", GREENWOOD.id, "Grade 2B", "sheet2B"),
            make_section("c-1a", GREENWOOD.id, "Grade 1A", "sheet1A"),
            make_section("c-2a", GREENWOOD.id, "Grade 2A", "sheet2A"),
            make_section("c-1b", GREENWOOD.id, "Grade 1B", "sheet1B"),
            make_section("c-10e", RIVERSIDE.id, "Grade 10 English", "sheet10E"),
            make_section("c-9m", RIVERSIDE.id, "Grade 9 Math", "sheet9M"),
        ]
    )


@pytest.fixture
def make_container(teachers_repo, classes_repo):
    def _make(**kwargs):
        kwargs.setdefault("teachers_repo", teachers_repo)
        kwargs.setdefault("classes_repo", classes_repo)
        kwargs.setdefault("relay_url", "https://script.example.test/exec")
        return wire_container(conn=None, **kwargs)

    return _make


@pytest.fixture
def container(make_container):
    return make_container()


@pytest.fixture
def app(container):
    app = create_app("config.testing", container=container)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
