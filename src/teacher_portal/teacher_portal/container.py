from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from .classes.mysql_class_section_repository import MySQLClassSectionRepository
from .classes.repository import ClassSectionRepository
from .core.constants import DEFAULT_SESSION_IDLE_SECONDS, DEFAULT_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .relay.client import AttendanceRelay
from .relay.service import AttendanceRelayService
from .sessions.holder import SessionHolder
from .sessions.registry import SessionRegistry
from .sheets.service import SheetLinkService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    teachers_repo: TeacherRepository
    classes_repo: ClassSectionRepository

    auth_service: AuthService
    sheet_service: SheetLinkService
    sessions: SessionRegistry
    relay_service: AttendanceRelayService


def wire_container(
    *,
    conn: Optional[DatabaseConnection],
    teachers_repo: TeacherRepository,
    classes_repo: ClassSectionRepository,
    strict_school: bool = True,
    relay_url: str = "",
    relay_timeout: float = DEFAULT_TIMEOUT_SECONDS,
    relay_transport: Optional[httpx.BaseTransport] = None,
    session_idle_seconds: float = DEFAULT_SESSION_IDLE_SECONDS,
) -> Container:
    auth_service = AuthService(teachers_repo, strict_school=strict_school)
    sheet_service = SheetLinkService(classes_repo)
    sessions = SessionRegistry(
        lambda: SessionHolder(auth_service, sheet_service),
        idle_seconds=session_idle_seconds,
    )
    relay_service = AttendanceRelayService(
        AttendanceRelay(relay_url, timeout=relay_timeout, transport=relay_transport)
    )

    return Container(
        conn=conn,
        teachers_repo=teachers_repo,
        classes_repo=classes_repo,
        auth_service=auth_service,
        sheet_service=sheet_service,
        sessions=sessions,
        relay_service=relay_service,
    )


def build_container(
    *,
    db_config: dict,
    strict_school: bool = True,
    relay_url: str = "",
    relay_timeout: float = DEFAULT_TIMEOUT_SECONDS,
    session_idle_seconds: float = DEFAULT_SESSION_IDLE_SECONDS,
) -> Container:
    # One factory per container; each carries its own config.
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_container(
        conn=conn,
        teachers_repo=MySQLTeacherRepository(conn),
        classes_repo=MySQLClassSectionRepository(conn),
        strict_school=strict_school,
        relay_url=relay_url,
        relay_timeout=relay_timeout,
        session_idle_seconds=session_idle_seconds,
    )
