"""User account store."""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from fieldform.models.user import User
from fieldform.stores.base import InMemoryStore


class UserStore(InMemoryStore[User]):
    record_type = User
    prefix = "user"
    
    def _creation_stamps(self, values: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        return {"created_at": now}
    
    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._records.values():
            if user.email == email:
                return user
        return None
