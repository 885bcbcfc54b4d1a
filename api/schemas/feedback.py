"""
Pydantic schemas for feedback endpoints.
"""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class FeedbackCreate(CamelModel):
    """Request body for submitting feedback about a camp."""

    camp_id: str = Field(min_length=1)
    participant_email: str | None = None
    participant_name: str | None = None
    rating: int = Field(ge=1, le=5)
    comment: str = Field(default="", max_length=2000)
