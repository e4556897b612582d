from __future__ import annotations

from enum import Enum


class PermissionLevel(str, Enum):
    """Quyền của giáo viên trên một sheet điểm danh."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return {
            PermissionLevel.READ: "View Only",
            PermissionLevel.WRITE: "Edit Access",
            PermissionLevel.ADMIN: "Full Access",
        }[self]


class SessionState(str, Enum):
    """Trạng thái của một phiên đăng nhập trong bộ nhớ."""

    LOGGED_OUT = "LOGGED_OUT"
    LOGGING_IN = "LOGGING_IN"
    LOGGED_IN = "LOGGED_IN"


class AttendanceMark(str, Enum):
    PRESENT = "P"
    ABSENT = "A"
