from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

import httpx

from ..core.constants import DEFAULT_TIMEOUT_SECONDS
from ..core.exceptions import NetworkError, RelayError, ValidationError
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceRelay:
    """Fire-and-forget POST of attendance records to an external script endpoint.

    No retry: a failed submission is reported and the user resubmits.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    def submit(self, records: Sequence[AttendanceRecord], *, sheet_id: str) -> None:
        if not records:
            raise ValidationError("No attendance records provided")
        if not self.url:
            raise RelayError("Attendance relay endpoint is not configured")

        form = {
            "action": "submitAttendance",
            "sheetId": sheet_id,
            "records": json.dumps([r.to_wire() for r in records]),
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                r = client.post(self.url, data=form)
        except httpx.RequestError as e:
            logger.warning("attendance relay unreachable: %s", e)
            raise NetworkError("Unable to reach the attendance service. Please check your connection.") from e

        body = _json_or_none(r)
        if not r.is_success:
            detail = (body or {}).get("error") or r.reason_phrase
            raise RelayError(f"Server error: {detail}")

        if not body or not body.get("success"):
            raise RelayError((body or {}).get("error") or "Server reported submission failure")

        logger.info("relayed %d attendance records to sheet %s", len(records), sheet_id)


def _json_or_none(r: httpx.Response) -> Optional[dict]:
    try:
        data = r.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
