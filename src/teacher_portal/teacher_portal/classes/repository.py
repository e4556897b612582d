from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClassSection


class ClassSectionRepository(Protocol):
    def list_by_school(self, school_id: str) -> Sequence[ClassSection]:
        """Class sections of one school, ordered by class_name ascending."""
        raise NotImplementedError
