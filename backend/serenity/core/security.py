"""
Security utilities for JWT authentication and password hashing.
"""

from datetime import timedelta
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from serenity.core.config import Settings
from serenity.utils.datetime_helper import utc_now

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(user_id: str, settings: Settings) -> str:
    """
    Create a JWT access token for a user.

    Args:
        user_id: Identifier stored in the ``sub`` claim
        settings: Application settings holding the key and expiry

    Returns:
        Encoded JWT access token
    """
    expire = utc_now() + timedelta(days=settings.access_token_expire_days)
    to_encode = {"sub": str(user_id), "exp": expire}

    return jwt.encode(
        to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Decode and verify a JWT token.

    Args:
        token: JWT token to verify
        settings: Application settings holding the key

    Returns:
        Token payload if valid

    Raises:
        ValueError: If the token is invalid, expired or has no subject
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except jwt.JWTError:
        raise ValueError("Invalid token")

    if not payload.get("sub"):
        raise ValueError("User ID not found in token")

    return payload


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to compare against

    Returns:
        True if password matches hash, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password for secure storage.

    Args:
        password: Plain text password to hash

    Returns:
        Securely hashed password
    """
    return pwd_context.hash(password)
