"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from fieldform.models.base import CamelModel
from fieldform.models.user import UserRole


class UserCreate(CamelModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = UserRole.FIELD_WORKER


class UserLogin(CamelModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    """Schema for user responses."""
    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime
    
    class Config:
        from_attributes = True


class AuthResponse(CamelModel):
    """Returned by register and login alongside the session cookie."""
    user: UserResponse
