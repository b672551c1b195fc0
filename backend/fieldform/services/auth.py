"""Authentication: password scheme, sessions and request dependencies."""

import logging
import time
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, Response, status

from fieldform.config import Settings
from fieldform.database import get_app_settings, get_session_registry, get_user_store
from fieldform.models.user import User
from fieldform.schemas.user import UserCreate
from fieldform.services.permissions import has_permission
from fieldform.stores import Session, SessionRegistry, UserStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for accounts and sign-in."""
    
    @staticmethod
    def get_password_hash(password: str) -> str:
        # Placeholder scheme, not a real hash: hashed_{password}_{epoch ms}
        return f"hashed_{password}_{int(time.time() * 1000)}"
    
    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        prefix, _, stamp = hashed_password.rpartition("_")
        return bool(stamp) and prefix == f"hashed_{password}"
    
    @staticmethod
    def create_user(users: UserStore, user_data: UserCreate) -> User:
        """Register a new account. Raises 400 if the e-mail is taken."""
        if users.get_by_email(user_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already exists"
            )
        
        user = users.create({
            "email": user_data.email,
            "name": user_data.name,
            "role": user_data.role,
            "hashed_password": AuthService.get_password_hash(user_data.password),
        })
        logger.info("Registered user %s (%s)", user.id, user.role)
        return user
    
    @staticmethod
    def authenticate_user(users: UserStore, email: str, password: str) -> Optional[User]:
        user = users.get_by_email(email)
        if not user or not AuthService.verify_password(password, user.hashed_password):
            logger.info("Failed login for %s", email)
            return None
        return user
    
    @staticmethod
    def start_session(
        response: Response,
        sessions: SessionRegistry,
        user: User,
        settings: Settings,
    ) -> str:
        """Open a session for ``user`` and set its cookie on ``response``."""
        token = sessions.create_session(user.id, user.email, user.name)
        response.set_cookie(
            key=settings.session_cookie_name,
            value=token,
            max_age=settings.session_max_age_seconds,
            httponly=True,
            secure=settings.cookie_secure,
            samesite="lax",
        )
        return token
    
    @staticmethod
    def end_session(
        request: Request,
        response: Response,
        sessions: SessionRegistry,
        settings: Settings,
    ) -> None:
        token = request.cookies.get(settings.session_cookie_name)
        if token:
            sessions.delete_session(token)
        response.delete_cookie(settings.session_cookie_name)


def get_current_session(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> Session:
    """Resolve the session cookie, or fail with 401."""
    session = sessions.get_session(request.cookies.get(settings.session_cookie_name))
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session


def get_current_user(
    session: Session = Depends(get_current_session),
    users: UserStore = Depends(get_user_store),
) -> User:
    user = users.get(session.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return user


def require_permission(resource: str, action: str) -> Callable[..., User]:
    """Dependency factory requiring the signed-in user's role to allow an action."""
    def permission_checker(current_user: User = Depends(get_current_user)) -> User:
        if not has_permission(current_user.role, resource, action):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not authorized to {action} {resource}"
            )
        return current_user
    return permission_checker
