from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..schools.model import School


@dataclass(frozen=True)
class Teacher:
    """Thực thể miền (domain): Teacher.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    id: str
    login_id: str
    password_hash: str
    name: str
    school_id: Optional[str]


@dataclass(frozen=True)
class TeacherProfile:
    """Teacher as exposed after login (never carries the password hash)."""

    id: str
    name: str
    login_id: str
    school_id: Optional[str]

    @classmethod
    def from_teacher(cls, teacher: Teacher) -> "TeacherProfile":
        return cls(id=teacher.id, name=teacher.name, login_id=teacher.login_id, school_id=teacher.school_id)


@dataclass(frozen=True)
class TeacherLookup:
    """One row of the teachers/schools join. `school` is None when the reference does not resolve."""

    teacher: Teacher
    school: Optional[School]
