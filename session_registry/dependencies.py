# session_registry/dependencies.py
import logging
from dataclasses import dataclass
from typing import Optional

from .settings import Settings, settings
from .sessions import InMemorySessionStore, SessionManager

logger = logging.getLogger(__name__)


@dataclass
class SessionRegistry:
    """The store and the facade built for one application run."""

    store: InMemorySessionStore
    manager: SessionManager


def build_session_store(app_settings: Optional[Settings] = None) -> InMemorySessionStore:
    """Create the session store from settings. Call once at startup."""
    app_settings = app_settings or settings
    return InMemorySessionStore(thread_safe=app_settings.store_thread_safe)


def build_session_registry(app_settings: Optional[Settings] = None) -> SessionRegistry:
    """
    Composition root: build the single store and the manager that owns it.

    The caller keeps the returned registry and passes it on explicitly;
    nothing here is cached at module level.
    """
    app_settings = app_settings or settings
    store = build_session_store(app_settings)
    manager = SessionManager(store)
    logger.info(f"{app_settings.app_name}: session registry ready")
    return SessionRegistry(store=store, manager=manager)
