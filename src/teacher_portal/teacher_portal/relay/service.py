from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.urls import extract_sheet_id
from ..core.exceptions import ValidationError
from ..sessions.model import AuthSession
from .client import AttendanceRelay
from .model import AttendanceRecord


class AttendanceRelayService:
    """Use case: submit attendance for one of the logged-in teacher's classes."""

    def __init__(self, relay: AttendanceRelay):
        self._relay = relay

    def submit_for_class(
        self,
        session: AuthSession,
        *,
        class_id: str,
        records: Optional[Sequence[Dict[str, Any]]],
    ) -> int:
        link = session.find_link(class_id)
        if link is None:
            raise ValidationError("Class does not belong to your school")

        sheet_id = extract_sheet_id(link.access_url)
        if not sheet_id:
            raise ValidationError(f"No attendance sheet found for {link.class_name}")

        if records is None:
            records = []
        if not isinstance(records, (list, tuple)):
            raise ValidationError("records must be a list")

        parsed = []
        for item in records:
            if not isinstance(item, dict):
                raise ValidationError("Each attendance record must be an object")
            parsed.append(
                AttendanceRecord.from_payload(item, class_name=link.class_name, teacher_id=session.teacher.id)
            )
        self._relay.submit(parsed, sheet_id=sheet_id)
        return len(parsed)
