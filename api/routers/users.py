"""
Users Router - Profile registration and lookup.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from greencare.models import UserRecord
from greencare.users import UserDirectory

from ..dependencies import get_user_directory
from ..schemas import UserCreate, UserRegistrationResponse

router = APIRouter(prefix="/users", tags=["users"])

DirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]


@router.post("", response_model=UserRegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserCreate, response: Response, users: DirectoryDep) -> UserRegistrationResponse:
    """Register a user profile; an existing email is returned unchanged with 200."""
    user, created = await users.register(request.model_dump(exclude_none=True))
    if not created:
        response.status_code = status.HTTP_200_OK
        return UserRegistrationResponse(message="User already registered", user=user)
    return UserRegistrationResponse(message="User registered successfully", user=user)


@router.get("/{email}", response_model=UserRecord)
async def get_user(email: str, users: DirectoryDep) -> UserRecord:
    return await users.get_by_email(email)
