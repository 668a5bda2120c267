import re

import pytest

from session_registry.dependencies import build_session_registry, build_session_store
from session_registry.errors import SessionAlreadyExistsError, SessionNotFoundError
from session_registry.sessions import InMemorySessionStore, SessionManager, SessionStatus
from session_registry.settings import Settings


def test_manager_rejects_non_store():
    with pytest.raises(TypeError):
        SessionManager(store={})


def test_open_session_composes_id(manager):
    record = manager.open_session("alice", date="2024-01-01")

    assert record.session_id == "alice#2024-01-01"
    assert record.status == SessionStatus.ACTIVE
    assert manager.get_session("alice#2024-01-01") is record


def test_open_session_defaults_to_today(manager):
    record = manager.open_session("alice")
    assert re.fullmatch(r"alice#\d{4}-\d{2}-\d{2}", record.session_id)


def test_open_session_twice_raises(manager):
    manager.open_session("alice", date="2024-01-01")
    with pytest.raises(SessionAlreadyExistsError) as exc_info:
        manager.open_session("alice", date="2024-01-01")
    assert exc_info.value.session_id == "alice#2024-01-01"
    assert len(manager.store) == 1


def test_sessions_for_user(manager):
    manager.open_session("bob", date="2024-01-01")
    manager.open_session("alice", date="2024-01-02")
    manager.open_session("alice", date="2024-01-01")

    sessions = manager.sessions_for_user("alice")

    assert [s.date for s in sessions] == ["2024-01-01", "2024-01-02"]
    assert manager.sessions_for_user("carol") == []


def test_close_session_updates_status(manager):
    manager.open_session("alice", date="2024-01-01", status=SessionStatus.PREPARING)

    closed = manager.close_session("alice#2024-01-01")

    assert closed.status == SessionStatus.CLOSED
    assert manager.get_session("alice#2024-01-01").status == SessionStatus.CLOSED


def test_set_status_on_missing_session_raises(manager):
    with pytest.raises(SessionNotFoundError):
        manager.set_status("ghost#2024-01-01", SessionStatus.ACTIVE)


def test_remove_session(manager):
    opened = manager.open_session("alice", date="2024-01-01")

    removed = manager.remove_session("alice#2024-01-01")

    assert removed is opened
    assert manager.get_session("alice#2024-01-01") is None
    with pytest.raises(SessionNotFoundError):
        manager.remove_session("alice#2024-01-01")


def test_report_matches_store_dump(manager):
    manager.open_session("alice", date="2024-01-01")
    assert manager.report() == manager.store.dump()
    assert "alice#2024-01-01" in manager.report()


def test_registry_builds_one_store_shared_by_manager():
    registry = build_session_registry(Settings(store_thread_safe=True))

    assert isinstance(registry.store, InMemorySessionStore)
    assert registry.manager.store is registry.store
    registry.manager.open_session("alice", date="2024-01-01")
    assert len(registry.store) == 1


def test_each_registry_gets_its_own_store():
    first = build_session_store(Settings())
    second = build_session_store(Settings())
    assert first is not second
