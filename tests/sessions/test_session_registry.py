from __future__ import annotations

from src.teacher_portal.teacher_portal.core.enums import SessionState
from src.teacher_portal.teacher_portal.sessions.holder import SessionHolder
from src.teacher_portal.teacher_portal.sessions.registry import SessionRegistry

from conftest import PASSWORD


def test_create_and_get(container):
    key, holder = container.sessions.create()

    assert container.sessions.get(key) is holder
    assert container.sessions.get("other") is None
    assert container.sessions.get(None) is None
    assert len(container.sessions) == 1


def test_keys_are_unique(container):
    key1, h1 = container.sessions.create()
    key2, h2 = container.sessions.create()

    assert key1 != key2
    assert h1 is not h2


def test_discard_logs_out_and_forgets(container):
    key, holder = container.sessions.create()
    holder.login("teacher001", PASSWORD)

    container.sessions.discard(key)
    container.sessions.discard(key)
    container.sessions.discard(None)

    assert holder.state is SessionState.LOGGED_OUT
    assert container.sessions.get(key) is None
    assert len(container.sessions) == 0


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_registry(container, clock, idle_seconds=60):
    return SessionRegistry(
        lambda: SessionHolder(container.auth_service, container.sheet_service),
        idle_seconds=idle_seconds,
        clock=clock,
    )


def test_idle_sessions_are_evicted(container):
    clock = FakeClock()
    registry = make_registry(container, clock)
    old_key, old_holder = registry.create()
    old_holder.login("teacher001", PASSWORD)

    clock.now += 61
    new_key, _ = registry.create()

    assert registry.get(old_key) is None
    assert old_holder.state is SessionState.LOGGED_OUT
    assert registry.get(new_key) is not None
    assert len(registry) == 1


def test_get_refreshes_last_seen(container):
    clock = FakeClock()
    registry = make_registry(container, clock)
    key, holder = registry.create()

    for _ in range(3):
        clock.now += 45
        assert registry.get(key) is holder

    clock.now += 60
    assert registry.get(key) is None
    assert len(registry) == 0


def test_abandoned_logins_do_not_accumulate(container):
    clock = FakeClock()
    registry = make_registry(container, clock)

    for _ in range(50):
        _, holder = registry.create()
        holder.login("teacher001", PASSWORD)
        clock.now += 120

    assert len(registry) == 1
