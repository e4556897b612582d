from __future__ import annotations

from typing import Optional, Protocol

from .model import TeacherLookup


class TeacherRepository(Protocol):
    """Giao diện repository cho Teacher.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def find_with_school(self, login_id: str) -> Optional[TeacherLookup]:
        raise NotImplementedError
