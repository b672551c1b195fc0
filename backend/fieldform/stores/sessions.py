"""Session registry mapping opaque tokens to signed-in users."""

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    user_id: str
    email: str
    name: str


class SessionRegistry:
    """
    In-process session table.
    
    Entries live until ``delete_session`` is called; expiry is left to the
    client cookie's max-age.
    """
    
    def __init__(self):
        self._sessions: Dict[str, Session] = {}
    
    def __len__(self) -> int:
        return len(self._sessions)
    
    def create_session(self, user_id: str, email: str, name: str) -> str:
        """Register a session and return its token."""
        token = f"session-{int(time.time() * 1000)}-{secrets.token_hex(4)}"
        self._sessions[token] = Session(user_id=user_id, email=email, name=name)
        logger.debug("Opened session for %s", user_id)
        return token
    
    def get_session(self, token: Optional[str]) -> Optional[Session]:
        if not token:
            return None
        return self._sessions.get(token)
    
    def delete_session(self, token: str) -> None:
        self._sessions.pop(token, None)
