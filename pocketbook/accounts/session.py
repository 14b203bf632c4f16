"""
Session

The caller holds a Session and passes it into every accounting call.
There is no process-wide "current user": two sessions for two users
can coexist, and a closed session can no longer act.
"""

from typing import Optional
from uuid import UUID, uuid4


class Session:
    """An authenticated user's handle on the accounting service."""

    def __init__(self, login: str):
        self._login: Optional[str] = login
        self.session_id: UUID = uuid4()

    def __repr__(self) -> str:
        return f"Session(login={self._login!r}, active={self.is_active})"

    @property
    def login(self) -> Optional[str]:
        """Login of the session's user, or None once closed."""
        return self._login

    @property
    def is_active(self) -> bool:
        return self._login is not None

    def close(self) -> None:
        self._login = None
