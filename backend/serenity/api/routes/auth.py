"""
Authentication routes for registration, login and profile lookup.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from serenity.core.config import Settings, get_settings
from serenity.core.exceptions import AuthError, ValidationError
from serenity.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from serenity.db.models import User
from serenity.db.session import get_db
from serenity.dependencies import get_current_user
from serenity.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(user: User, settings: Settings) -> AuthResponse:
    return AuthResponse(
        id=str(user.id),
        username=user.username,
        email=user.email,
        token=create_access_token(str(user.id), settings),
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    body: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a new user and return an access token."""
    if not body.username or not body.email or not body.password:
        raise ValidationError("Invalid user data")

    if db.query(User).filter(User.email == body.email).first():
        raise ValidationError("User already exists")

    user = User(
        username=body.username,
        email=body.email,
        password_hash=get_password_hash(body.password),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return _auth_response(user, settings)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate a user by email and password."""
    user = db.query(User).filter(User.email == body.email).first()

    if not user or not verify_password(body.password, user.password_hash):
        raise AuthError("Invalid email or password")

    return _auth_response(user, settings)


@router.get("/profile", response_model=UserResponse)
async def get_profile(user: User = Depends(get_current_user)):
    return UserResponse(id=str(user.id), username=user.username, email=user.email)
