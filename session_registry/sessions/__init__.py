"""
Session storage module for the Session Registry.

This module provides the session record model, the sorted in-memory store
and the facade used to open, close and query user sessions.
"""

from .session_data import SessionRecord, SessionStatus, compose_session_id
from .results import StoreResult
from .session_store import AbstractSessionStore, InMemorySessionStore
from .session_manager import SessionManager

# Export public API components for session storage
__all__ = [
    "SessionRecord",
    "SessionStatus",
    "compose_session_id",
    "StoreResult",
    "AbstractSessionStore",
    "InMemorySessionStore",
    "SessionManager",
]
