# session_registry/sessions/session_manager.py
import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..errors import SessionNotFoundError
from ..settings import settings as registry_settings
from .session_data import SessionRecord, SessionStatus
from .session_store import AbstractSessionStore

logger = logging.getLogger(__name__)


class SessionManager:
    """Facade over a session store: opens, closes, lists and removes user sessions."""

    def __init__(self, store: AbstractSessionStore):
        if not isinstance(store, AbstractSessionStore):
            raise TypeError("SessionManager requires an instance of AbstractSessionStore.")
        self.store = store
        logger.info(f"SessionManager initialized with store: {type(store).__name__}")

    def _today(self) -> str:
        return datetime.now(timezone.utc).strftime(registry_settings.session_date_format)

    def open_session(
        self,
        user_id: str,
        date: Optional[str] = None,
        status: SessionStatus = SessionStatus.ACTIVE,
    ) -> SessionRecord:
        """
        Register a new session for ``user_id``.

        The date defaults to today (UTC) in the configured format.

        Raises:
            SessionAlreadyExistsError: If the user already has a session on that date
        """
        record = SessionRecord.open(user_id=user_id, date=date or self._today(), status=status)
        logger.info(f"open_session: Opening session '{record.session_id}' for user '{user_id}'")
        return self.store.insert(record).unwrap()

    def get_session(self, session_id: str) -> Optional[SessionRecord]:
        """Retrieve a session by id, None when absent."""
        return self.store.find(session_id)

    def sessions_for_user(self, user_id: str) -> List[SessionRecord]:
        """All sessions of one user in key order."""
        sessions = self.store.find_all(user_id)
        logger.debug(f"sessions_for_user: {len(sessions)} session(s) for user '{user_id}'")
        return sessions

    def set_status(self, session_id: str, status: SessionStatus) -> SessionRecord:
        """
        Change the status of a stored session.

        Raises:
            SessionNotFoundError: If no session is stored under ``session_id``
        """
        current = self.store.find(session_id)
        if current is None:
            logger.warning(f"set_status: Session '{session_id}' does not exist")
            raise SessionNotFoundError(session_id)
        changed = current.model_copy(update={"status": status})
        logger.info(f"set_status: Session '{session_id}' -> {status.value}")
        return self.store.update(changed).unwrap()

    def close_session(self, session_id: str) -> SessionRecord:
        """Mark a session as closed."""
        return self.set_status(session_id, SessionStatus.CLOSED)

    def remove_session(self, session_id: str) -> SessionRecord:
        """
        Delete a session and return it.

        Raises:
            SessionNotFoundError: If no session is stored under ``session_id``
        """
        removed = self.store.delete(session_id).unwrap()
        logger.info(f"remove_session: Session '{session_id}' removed")
        return removed

    def report(self) -> str:
        """Text listing of every stored session."""
        return self.store.dump()
