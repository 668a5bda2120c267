import json

import pytest

from session_registry.sessions import InMemorySessionStore, SessionManager, SessionRecord


@pytest.fixture
def store():
    """An empty single-threaded store."""
    return InMemorySessionStore(thread_safe=False)


@pytest.fixture
def manager(store):
    return SessionManager(store)


@pytest.fixture
def make_record():
    """Factory for records keyed as <user>#<date>."""
    def _make(user_id: str, date: str, **kwargs) -> SessionRecord:
        return SessionRecord.open(user_id=user_id, date=date, **kwargs)
    return _make


@pytest.fixture
def seed_file(tmp_path):
    """A seed file holding sessions for alice and bob."""
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps([
        {"user_id": "bob", "date": "2024-01-01"},
        {"user_id": "alice", "date": "2024-01-02", "status": "closed"},
        {"user_id": "alice", "date": "2024-01-01"},
    ]), encoding="utf-8")
    return path
