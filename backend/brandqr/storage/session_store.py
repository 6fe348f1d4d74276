"""In-memory session store — the current generation result per session.

Each session holds at most one result. Storing a new result replaces the
old one; results themselves are immutable, so exports already running
against the previous result are unaffected. The store is LRU-bounded.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict

from brandqr.engine.session import GenerationResult
from brandqr.errors import SessionNotFoundError

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self, max_sessions: int = 256) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._results: OrderedDict[str, GenerationResult] = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    def put(self, result: GenerationResult, session_id: str | None = None) -> str:
        """Make ``result`` the current result of ``session_id`` (new session if None)."""
        sid = session_id or self.new_session_id()
        with self._lock:
            replaced = sid in self._results
            self._results[sid] = result
            self._results.move_to_end(sid)
            while len(self._results) > self.max_sessions:
                evicted, _ = self._results.popitem(last=False)
                logger.debug("Evicted session %s", evicted)
        logger.debug("%s session %s", "Replaced" if replaced else "Created", sid)
        return sid

    def get(self, session_id: str) -> GenerationResult:
        with self._lock:
            try:
                result = self._results[session_id]
            except KeyError:
                raise SessionNotFoundError(session_id) from None
            self._results.move_to_end(session_id)
            return result

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._results.pop(session_id, None)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._results

    def __len__(self) -> int:
        return len(self._results)


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get or create the global SessionStore singleton."""
    global _store
    if _store is None:
        from brandqr.config import settings

        _store = SessionStore(max_sessions=settings.max_sessions)
    return _store
