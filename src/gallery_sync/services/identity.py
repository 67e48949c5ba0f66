"""Local session identity."""

import secrets
import string
import time
from dataclasses import dataclass
from typing import Protocol

SESSION_KEY = "gallery-session-id"

_BASE36 = string.digits + string.ascii_lowercase


class KeyValueStore(Protocol):
    """Durable local storage for small string values."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Persist a value for a key."""


@dataclass
class IdentityProvider:
    """Produces a stable opaque session token for this profile."""

    store: KeyValueStore
    key: str = SESSION_KEY

    def get_or_create_session(self) -> str:
        """Return the persisted session token, creating it on first use."""
        session_id = self.store.get(self.key)
        if not session_id:
            session_id = new_session_id()
            self.store.set(self.key, session_id)
        return session_id


def new_session_id() -> str:
    """Build a session token from the current time and a random suffix."""
    return f"session_{time.time_ns() // 1_000_000}_{random_token()}"


def random_token(length: int = 11) -> str:
    """Return a random lowercase base36 string."""
    return "".join(secrets.choice(_BASE36) for _ in range(length))
