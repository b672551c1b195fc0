"""User model for authentication and authorization."""

from datetime import datetime
from enum import Enum as PyEnum

from fieldform.models.base import Record


class UserRole(str, PyEnum):
    """User roles in the system."""
    ADMIN = "admin"
    MANAGER = "manager"
    FIELD_WORKER = "field-worker"
    VIEWER = "viewer"
    
    def __str__(self) -> str:
        return self.value


class User(Record):
    """A registered account. ``hashed_password`` never leaves the server."""
    id: str
    email: str
    name: str
    role: UserRole = UserRole.FIELD_WORKER
    hashed_password: str = ""
    created_at: datetime
    
    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
