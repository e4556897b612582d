from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from ..core.constants import DEFAULT_SESSION_IDLE_SECONDS
from .holder import SessionHolder

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Process-local SessionHolders keyed by an opaque browser key.

    Nothing is persisted: a restart drops every login. A key not used for
    ``idle_seconds`` is evicted on the next ``create``/``get``.
    """

    def __init__(
        self,
        factory: Callable[[], SessionHolder],
        *,
        idle_seconds: float = DEFAULT_SESSION_IDLE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._factory = factory
        self._idle_seconds = float(idle_seconds)
        self._clock = clock
        self._holders: Dict[str, SessionHolder] = {}
        self._last_seen: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _evict_idle_locked(self, now: float) -> List[SessionHolder]:
        cutoff = now - self._idle_seconds
        stale = [key for key, seen in self._last_seen.items() if seen <= cutoff]
        evicted = []
        for key in stale:
            del self._last_seen[key]
            evicted.append(self._holders.pop(key))
        return evicted

    def _logout_all(self, holders: List[SessionHolder]) -> None:
        if holders:
            logger.info("evicted %d idle session(s)", len(holders))
        for holder in holders:
            holder.logout()

    def create(self) -> Tuple[str, SessionHolder]:
        key = secrets.token_urlsafe(32)
        holder = self._factory()
        with self._lock:
            now = self._clock()
            evicted = self._evict_idle_locked(now)
            self._holders[key] = holder
            self._last_seen[key] = now
        self._logout_all(evicted)
        return key, holder

    def get(self, key: Optional[str]) -> Optional[SessionHolder]:
        if not key:
            return None
        with self._lock:
            now = self._clock()
            evicted = self._evict_idle_locked(now)
            holder = self._holders.get(key)
            if holder is not None:
                self._last_seen[key] = now
        self._logout_all(evicted)
        return holder

    def discard(self, key: Optional[str]) -> None:
        if not key:
            return
        with self._lock:
            holder = self._holders.pop(key, None)
            self._last_seen.pop(key, None)
        if holder is not None:
            holder.logout()

    def __len__(self) -> int:
        with self._lock:
            return len(self._holders)
