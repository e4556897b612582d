from __future__ import annotations

from ..core.exceptions import ValidationError


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def require_non_empty(value, field_name: str) -> str:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()
