"""In-process session registry mapping opaque tokens to user ids."""

from __future__ import annotations

import secrets
import threading

DEFAULT_TOKEN_BYTES = 32


class SessionRegistry:
    """Issue, resolve, and revoke session tokens.

    Tokens are random and carry no data; the registry is the only place the
    token -> user mapping exists, so dropping the registry logs everyone out.
    """

    def __init__(self, *, token_bytes: int = DEFAULT_TOKEN_BYTES) -> None:
        self._token_bytes = token_bytes
        self._sessions: dict[str, str] = {}
        self._lock = threading.Lock()

    def open(self, user_id: str) -> str:
        token = secrets.token_urlsafe(self._token_bytes)
        with self._lock:
            self._sessions[token] = user_id
        return token

    def resolve(self, token: str | None) -> str | None:
        """Return the user id bound to *token*, or None."""
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def close(self, token: str | None) -> bool:
        """Revoke *token*. Returns whether it was active."""
        if not token:
            return False
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
