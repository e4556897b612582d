from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..classes.repository import ClassSectionRepository
from ..core.constants import SHEET_NAME_SUFFIX
from ..core.enums import PermissionLevel
from ..core.exceptions import NoSheetLinks
from .model import SheetLinkDescriptor

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")


def extract_grade(class_name: str) -> Optional[int]:
    """First run of ASCII digits in the class name, e.g. "Grade 10 English" -> 10."""
    m = _DIGITS_RE.search(class_name or "")
    return int(m.group(0)) if m else None


def permission_level_for(teacher_id: str, class_id: str) -> PermissionLevel:
    # Every teacher can edit the sheets of their own school.
    return PermissionLevel.WRITE


class SheetLinkService:
    """Use case: list the attendance sheets of a school."""

    def __init__(self, classes: ClassSectionRepository):
        self._classes = classes

    def list_sheet_links(self, school_id: str, *, teacher_id: str = "") -> List[SheetLinkDescriptor]:
        sections = self._classes.list_by_school(school_id)
        if not sections:
            raise NoSheetLinks(f"no class sections for school {school_id}")

        links: List[SheetLinkDescriptor] = []
        for position, section in enumerate(sections, start=1):
            grade = extract_grade(section.class_name)
            links.append(
                SheetLinkDescriptor(
                    class_id=section.id,
                    class_name=section.class_name,
                    sheet_name=f"{section.class_name} {SHEET_NAME_SUFFIX}",
                    access_url=section.sheet_link,
                    last_modified=section.created_at,
                    permission_level=permission_level_for(teacher_id, section.id),
                    is_active=True,
                    # Weak on purpose: position in the name-ordered list.
                    grade_level=grade if grade is not None else position,
                )
            )

        # list.sort is stable, so equal grades keep the class_name order.
        links.sort(key=lambda link: link.grade_level)
        logger.debug("school %s: %d sheet links", school_id, len(links))
        return links
