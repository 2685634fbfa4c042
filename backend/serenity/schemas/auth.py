"""
Authentication schema models using Pydantic.
"""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Schema for user registration."""

    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Schema for user login."""

    email: str
    password: str


class UserResponse(BaseModel):
    """Schema for user data in responses."""

    id: str
    username: str
    email: str


class AuthResponse(UserResponse):
    """User data together with a fresh access token."""

    token: str
