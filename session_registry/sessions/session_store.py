# session_registry/sessions/session_store.py
import logging
import threading
from abc import ABC, abstractmethod
from contextlib import nullcontext
from typing import List, Optional, Tuple

from ..errors import StoreErrorKind
from ..settings import settings as registry_settings
from .results import StoreResult
from .session_data import SessionRecord

# Global logger instance to avoid repeated initialization
_session_store_logger_instance = None


def _get_session_store_logger():
    """
    Returns a singleton logger instance for session store operations.
    Sets appropriate log level based on debug mode and global settings.
    """
    global _session_store_logger_instance
    if _session_store_logger_instance is None:
        _session_store_logger_instance = logging.getLogger(__name__)
        effective_level = (
            logging.DEBUG
            if registry_settings.debug_mode
            else registry_settings.session_store_log_level.upper()
        )
        _session_store_logger_instance.setLevel(effective_level)
    return _session_store_logger_instance


def _fold(value: str) -> str:
    """Comparison key for case-insensitive ordering."""
    return value.lower()


class AbstractSessionStore(ABC):
    """
    Abstract base class defining the interface for session storage implementations.

    Lookups report a miss with ``None`` or an empty list. Mutations never raise
    for a missing or duplicate key; they return a failed ``StoreResult``.
    """

    @abstractmethod
    def find(self, session_id: str) -> Optional[SessionRecord]:
        """Return the session stored under ``session_id``, or None."""
        pass

    @abstractmethod
    def find_all(self, user_id: str) -> List[SessionRecord]:
        """Return every session owned by ``user_id`` in stored order."""
        pass

    @abstractmethod
    def insert(self, record: SessionRecord) -> StoreResult:
        """Store a new session; fails with ALREADY_EXISTS on a duplicate key."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> StoreResult:
        """Remove a session; the result carries the removed record."""
        pass

    @abstractmethod
    def update(self, record: SessionRecord) -> StoreResult:
        """Overwrite the payload of the session sharing ``record``'s key."""
        pass

    @abstractmethod
    def dump(self) -> str:
        """Render every stored session, one per line."""
        pass

    def find_record(self, record: SessionRecord) -> Optional[SessionRecord]:
        """Look up the stored counterpart of ``record`` by its session id."""
        return self.find(record.session_id)


class InMemorySessionStore(AbstractSessionStore):
    """
    Session store backed by a Python list kept sorted by session id.

    Ordering is case-insensitive and keys are unique. ``find_all`` relies on
    every session id starting with its user id.
    """

    def __init__(self, thread_safe: Optional[bool] = None):
        """
        Args:
            thread_safe: Guard operations with one re-entrant lock. Defaults to
                the ``store_thread_safe`` setting.
        """
        if thread_safe is None:
            thread_safe = registry_settings.store_thread_safe
        self._sessions: List[SessionRecord] = []
        self._lock = threading.RLock() if thread_safe else None
        _get_session_store_logger().info(
            f"InMemorySessionStore initialized. Thread safe: {thread_safe}"
        )

    def _guard(self):
        return self._lock if self._lock is not None else nullcontext()

    def __len__(self) -> int:
        return len(self._sessions)

    def _search(self, session_id: str) -> Tuple[int, bool]:
        """
        Binary search by session id.

        Returns (index, found). When not found, index is the insertion point
        that keeps the list sorted.
        """
        target = _fold(session_id)
        low = 0
        high = len(self._sessions) - 1
        while low <= high:
            middle = (low + high) // 2
            current = _fold(self._sessions[middle].session_id)
            if current == target:
                return middle, True
            if current < target:
                low = middle + 1
            else:
                high = middle - 1
        return low, False

    def _lower_bound(self, prefix: str) -> int:
        """Index of the first session whose folded id is not below ``prefix``."""
        low = 0
        high = len(self._sessions)
        while low < high:
            middle = (low + high) // 2
            if _fold(self._sessions[middle].session_id) < prefix:
                low = middle + 1
            else:
                high = middle
        return low

    def find(self, session_id: str) -> Optional[SessionRecord]:
        with self._guard():
            index, found = self._search(session_id)
            return self._sessions[index] if found else None

    def find_all(self, user_id: str) -> List[SessionRecord]:
        logger = _get_session_store_logger()
        with self._guard():
            target = _fold(user_id)
            # Ids starting with the user id form one block; other users whose
            # id shares that prefix ("ann" / "ann!x") may sit inside it.
            first = self._lower_bound(target)
            matches = []
            index = first
            while (
                index < len(self._sessions)
                and _fold(self._sessions[index].session_id).startswith(target)
            ):
                if _fold(self._sessions[index].user_id) == target:
                    matches.append(self._sessions[index])
                index += 1

            if not matches:
                logger.debug(f"No sessions found for user '{user_id}'")
            else:
                logger.debug(
                    f"Found {len(matches)} session(s) for user '{user_id}' "
                    f"within positions {first}..{index - 1}"
                )
            return matches

    def insert(self, record: SessionRecord) -> StoreResult:
        logger = _get_session_store_logger()
        with self._guard():
            index, found = self._search(record.session_id)
            if found:
                logger.warning(f"Insert rejected, session already exists: '{record.session_id}'")
                return StoreResult.failure(
                    StoreErrorKind.ALREADY_EXISTS,
                    record.session_id,
                    f"Session '{record.session_id}' already exists.",
                )
            self._sessions.insert(index, record)
            logger.debug(f"Inserted session '{record.session_id}' at position {index}")
            return StoreResult.success(record)

    def delete(self, session_id: str) -> StoreResult:
        logger = _get_session_store_logger()
        with self._guard():
            index, found = self._search(session_id)
            if not found:
                logger.warning(f"Delete rejected, session does not exist: '{session_id}'")
                return StoreResult.failure(
                    StoreErrorKind.NOT_FOUND,
                    session_id,
                    f"Session '{session_id}' does not exist.",
                )
            removed = self._sessions.pop(index)
            logger.info(f"Session deleted: '{removed.session_id}'")
            return StoreResult.success(removed)

    def update(self, record: SessionRecord) -> StoreResult:
        logger = _get_session_store_logger()
        with self._guard():
            index, found = self._search(record.session_id)
            if not found:
                logger.warning(f"Update rejected, session does not exist: '{record.session_id}'")
                return StoreResult.failure(
                    StoreErrorKind.NOT_FOUND,
                    record.session_id,
                    f"Session '{record.session_id}' does not exist.",
                )
            stored = self._sessions[index]
            # session_id is the sort key and stays untouched
            stored.user_id = record.user_id
            stored.date = record.date
            stored.status = record.status
            logger.debug(f"Updated session '{stored.session_id}' at position {index}")
            return StoreResult.success(stored)

    def dump(self) -> str:
        with self._guard():
            return "\n".join(str(s) for s in self._sessions if s is not None)

    def list_sessions(self) -> List[SessionRecord]:
        """Snapshot of the stored sessions in key order."""
        with self._guard():
            return list(self._sessions)
