from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ClassSection:
    id: str
    school_id: str
    class_name: str
    sheet_link: str
    created_at: Optional[datetime] = None
