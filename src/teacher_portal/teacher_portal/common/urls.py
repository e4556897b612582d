from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

from ..core.constants import GOOGLE_SHEETS_HOST, GOOGLE_SHEETS_PATH

_SHEET_ID_RE = re.compile(r"/spreadsheets/d/([A-Za-z0-9_-]+)")


def is_google_sheet_url(url: str) -> bool:
    """Soft validity signal for a stored sheet link (not an access check)."""
    try:
        parsed = urlparse(url or "")
    except ValueError:
        return False
    return parsed.hostname == GOOGLE_SHEETS_HOST and GOOGLE_SHEETS_PATH in (parsed.path or "")


def extract_sheet_id(url: str) -> Optional[str]:
    m = _SHEET_ID_RE.search(url or "")
    return m.group(1) if m else None
