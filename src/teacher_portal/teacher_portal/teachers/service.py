from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import is_blank
from ..core.exceptions import InvalidCredentials, MissingSchool
from ..schools.model import School
from .model import TeacherProfile
from .repository import TeacherRepository

logger = logging.getLogger(__name__)

# Checked against when the login id is unknown, so both failure paths pay one hash.
_DUMMY_HASH = generate_password_hash("unused-placeholder-password")


@dataclass(frozen=True)
class AuthResult:
    teacher: TeacherProfile
    school: Optional[School]


class AuthService:
    """Use case: authenticate teacher (login).

    With ``strict_school=True`` a teacher whose school does not resolve is a
    login failure (``MissingSchool``). With ``strict_school=False`` the result
    carries ``school=None`` and the caller decides how to degrade.
    """

    def __init__(self, teachers: TeacherRepository, *, strict_school: bool = True):
        self._teachers = teachers
        self._strict_school = bool(strict_school)

    @staticmethod
    def _verify(password_hash: str, password: str) -> bool:
        try:
            return check_password_hash(password_hash, password)
        except (ValueError, TypeError):
            # e.g. plaintext legacy values or corrupted hashes
            return False

    def authenticate(self, login_id: str, password: str) -> AuthResult:
        if is_blank(login_id) or is_blank(password):
            raise InvalidCredentials("login id and password are required")

        found = self._teachers.find_with_school(login_id)
        if not found or found.teacher.login_id != login_id:
            self._verify(_DUMMY_HASH, password)
            logger.info("login rejected: unknown login id")
            raise InvalidCredentials("no teacher for login id")

        teacher = found.teacher
        if not self._verify(teacher.password_hash, password):
            logger.info("login rejected: bad password for teacher %s", teacher.id)
            raise InvalidCredentials("password mismatch")

        if not teacher.school_id:
            logger.warning("teacher %s has no school association", teacher.id)
            raise MissingSchool(f"teacher {teacher.id} has no school")

        if found.school is None and self._strict_school:
            logger.warning("teacher %s references missing school %s", teacher.id, teacher.school_id)
            raise MissingSchool(f"school {teacher.school_id} not found")

        return AuthResult(teacher=TeacherProfile.from_teacher(teacher), school=found.school)
