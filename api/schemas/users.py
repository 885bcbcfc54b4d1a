"""
Pydantic schemas for user endpoints.
"""

from __future__ import annotations

from pydantic import EmailStr

from greencare.models import UserRecord

from .base import CamelModel


class UserCreate(CamelModel):
    """Request body for registering a user profile."""

    uid: str | None = None
    name: str | None = None
    email: EmailStr
    profile_picture: str | None = None


class UserRegistrationResponse(CamelModel):
    """Response body for POST /users."""

    message: str
    user: UserRecord
