"""
Session Registry: an in-memory, key-ordered store of user sessions.
"""

from .errors import (
    SessionAlreadyExistsError,
    SessionNotFoundError,
    SessionStoreError,
    StoreErrorKind,
)
from .sessions import (
    AbstractSessionStore,
    InMemorySessionStore,
    SessionManager,
    SessionRecord,
    SessionStatus,
    StoreResult,
)

__all__ = [
    "SessionStoreError",
    "SessionAlreadyExistsError",
    "SessionNotFoundError",
    "StoreErrorKind",
    "AbstractSessionStore",
    "InMemorySessionStore",
    "SessionManager",
    "SessionRecord",
    "SessionStatus",
    "StoreResult",
]
