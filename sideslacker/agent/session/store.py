from __future__ import annotations

import threading
from typing import Any, Protocol


class SessionStore(Protocol):
    def get(self, session_id: str, key: str) -> Any | None: ...
    def set(self, session_id: str, key: str, value: Any) -> None: ...
    def clear(self, session_id: str) -> None: ...


class InMemorySessionStore:
    """Conversation-scoped attribute bags; nothing is visible across session ids."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[str, dict[str, Any]] = {}

    def get(self, session_id: str, key: str) -> Any | None:
        with self._lock:
            return self._sessions.get(session_id, {}).get(key)

    def set(self, session_id: str, key: str, value: Any) -> None:
        with self._lock:
            self._sessions.setdefault(session_id, {})[key] = value

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def snapshot(self, session_id: str) -> dict[str, Any]:
        with self._lock:
            return dict(self._sessions.get(session_id, {}))
