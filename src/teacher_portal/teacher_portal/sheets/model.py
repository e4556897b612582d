from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.urls import is_google_sheet_url
from ..core.enums import PermissionLevel


@dataclass(frozen=True)
class SheetLinkDescriptor:
    """Display-ready view of a ClassSection. Derived on every fetch, never stored."""

    class_id: str
    class_name: str
    sheet_name: str
    access_url: str
    last_modified: Optional[datetime]
    permission_level: PermissionLevel
    is_active: bool
    grade_level: int

    @property
    def permission_label(self) -> str:
        return self.permission_level.label

    @property
    def looks_like_google_sheet(self) -> bool:
        return is_google_sheet_url(self.access_url)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["permission_level"] = self.permission_level.value
        data["last_modified"] = self.last_modified.isoformat() if self.last_modified else None
        return data
