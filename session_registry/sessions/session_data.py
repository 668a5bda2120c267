# session_registry/sessions/session_data.py
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

# Separates the user id from the date inside a session identifier
SESSION_ID_SEPARATOR = "#"


class SessionStatus(str, Enum):
    """Lifecycle state of a user session."""

    PREPARING = "preparing"
    ACTIVE = "active"
    CLOSED = "closed"


def compose_session_id(user_id: str, date: str) -> str:
    """Build the composite key ``<user_id>#<date>`` used to order sessions."""
    if not user_id or not date:
        raise ValueError("user_id and date are required to compose a session id.")
    return f"{user_id}{SESSION_ID_SEPARATOR}{date}"


class SessionRecord(BaseModel):
    """
    A single user session as kept by the session store.

    Only ``session_id`` takes part in ordering and lookup. ``user_id`` drives
    the per-user query and is expected to be the prefix of ``session_id``;
    ``date`` and ``status`` are payload that the store only copies on update.
    """

    session_id: str = Field(
        min_length=1,
        description="Composite key (user id + date); compared case-insensitively."
    )
    user_id: str = Field(min_length=1, description="Owner of the session.")
    date: str = Field(description="Date the session belongs to.")
    status: SessionStatus = Field(default=SessionStatus.ACTIVE)

    @classmethod
    def open(
        cls,
        user_id: str,
        date: str,
        status: SessionStatus = SessionStatus.ACTIVE,
        session_id: Optional[str] = None,
    ) -> "SessionRecord":
        """Create a record, composing the session id unless one is given."""
        return cls(
            session_id=session_id or compose_session_id(user_id, date),
            user_id=user_id,
            date=date,
            status=status,
        )

    def __str__(self) -> str:
        return (
            f"Session {self.session_id}: user={self.user_id} "
            f"date={self.date} status={self.status.value}"
        )
