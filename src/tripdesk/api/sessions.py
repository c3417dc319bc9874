"""In-memory session store backing ``/simple_login``.

Sessions map an opaque id to the customer name the login resolved to. They
are never expired or revoked; the store lives as long as the app instance
that owns it.
"""

from __future__ import annotations

import threading
import uuid

from tripdesk.logging import get_logger
from tripdesk.logging.logging import short_id

logger = get_logger(__name__)


class SessionStore:
    """Lock-guarded mapping of session id to customer name."""

    def __init__(self) -> None:
        self._sessions: dict[str, str] = {}
        self._lock = threading.Lock()

    def issue(self, customer_name: str) -> str:
        """Create a session for ``customer_name`` and return its id."""

        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = customer_name
            total = len(self._sessions)
        logger.info("Issued session %s for %s (%d active)", short_id(session_id), customer_name, total)
        return session_id

    def resolve(self, session_id: str | None) -> str | None:
        """Return the customer bound to ``session_id`` or ``None``."""

        if not session_id:
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
