"""Authentication router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from fieldform.config import Settings
from fieldform.database import get_app_settings, get_session_registry, get_user_store
from fieldform.models.user import User
from fieldform.schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse
from fieldform.services.auth import AuthService, get_current_user, require_permission
from fieldform.stores import SessionRegistry, UserStore

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(
    user_data: UserCreate,
    response: Response,
    users: UserStore = Depends(get_user_store),
    sessions: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_app_settings)
):
    """Register a new user and sign them in."""
    user = AuthService.create_user(users, user_data)
    AuthService.start_session(response, sessions, user, settings)
    return AuthResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    users: UserStore = Depends(get_user_store),
    sessions: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_app_settings)
):
    """Login and receive a session cookie."""
    user = AuthService.authenticate_user(users, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )
    
    AuthService.start_session(response, sessions, user, settings)
    return AuthResponse(user=UserResponse.model_validate(user))


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    sessions: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_app_settings)
):
    """End the current session, if any."""
    AuthService.end_session(request, response, sessions, settings)
    return {"success": True}


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Get current user information."""
    return current_user


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    users: UserStore = Depends(get_user_store),
    current_user: User = Depends(require_permission("users", "read"))
):
    """List all users (admin only)."""
    return users.get_all()
