from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..common.validators import require_non_empty
from ..core.enums import AttendanceMark
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    student_name: str
    class_name: str
    date: str
    status: AttendanceMark
    teacher_id: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], *, class_name: str, teacher_id: str) -> "AttendanceRecord":
        try:
            status = AttendanceMark(str(payload.get("status", "")).upper())
        except ValueError:
            raise ValidationError("status must be 'P' or 'A'")
        return cls(
            student_name=require_non_empty(payload.get("student_name", ""), "student_name"),
            class_name=class_name,
            date=require_non_empty(payload.get("date", ""), "date"),
            status=status,
            teacher_id=teacher_id,
        )

    def to_wire(self) -> Dict[str, str]:
        # Field names expected by the Apps Script endpoint.
        return {
            "studentName": self.student_name,
            "class": self.class_name,
            "date": self.date,
            "status": self.status.value,
            "teacherId": self.teacher_id,
        }
