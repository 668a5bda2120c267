# session_registry/errors.py
from enum import Enum
from typing import Optional


class StoreErrorKind(str, Enum):
    """Tags for the two recoverable failures a session store can report."""

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


class SessionStoreError(Exception):
    """Base exception class for session store failures.

    Carries the failure ``kind`` and the session identifier involved so that
    callers can branch on the error without parsing the message.
    """

    kind: StoreErrorKind

    def __init__(self, session_id: str, detail: Optional[str] = None):
        self.session_id = session_id
        self.detail = detail or f"Session store error for '{session_id}'."
        super().__init__(self.detail)


class SessionAlreadyExistsError(SessionStoreError):
    """Raised when inserting a session whose identifier is already stored."""

    kind = StoreErrorKind.ALREADY_EXISTS

    def __init__(self, session_id: str, detail: Optional[str] = None):
        super().__init__(session_id, detail or f"Session '{session_id}' already exists.")


class SessionNotFoundError(SessionStoreError):
    """Raised when deleting or updating a session that is not stored."""

    kind = StoreErrorKind.NOT_FOUND

    def __init__(self, session_id: str, detail: Optional[str] = None):
        super().__init__(session_id, detail or f"Session '{session_id}' does not exist.")


_ERRORS_BY_KIND = {
    StoreErrorKind.ALREADY_EXISTS: SessionAlreadyExistsError,
    StoreErrorKind.NOT_FOUND: SessionNotFoundError,
}


def error_for_kind(
    kind: StoreErrorKind, session_id: str, detail: Optional[str] = None
) -> SessionStoreError:
    """Build the exception matching a store error tag."""
    return _ERRORS_BY_KIND[kind](session_id, detail)
