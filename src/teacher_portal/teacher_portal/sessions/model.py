from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import SCHOOL_NAME_UNAVAILABLE
from ..schools.model import School
from ..sheets.model import SheetLinkDescriptor
from ..teachers.model import TeacherProfile


@dataclass(frozen=True)
class AuthSession:
    """In-memory record of the current login, including any non-fatal warning."""

    teacher: TeacherProfile
    school: Optional[School]
    sheet_links: List[SheetLinkDescriptor] = field(default_factory=list)
    warning: Optional[str] = None

    @property
    def school_name(self) -> str:
        return self.school.name if self.school else SCHOOL_NAME_UNAVAILABLE

    def find_link(self, class_id: str) -> Optional[SheetLinkDescriptor]:
        for link in self.sheet_links:
            if link.class_id == class_id:
                return link
        return None
