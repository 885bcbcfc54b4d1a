"""
Pydantic schemas for camp endpoints.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from greencare.models import Fee

from .base import OpenCamelModel


class CampCreate(OpenCamelModel):
    """Request body for creating a camp. Unknown descriptive fields are kept."""

    camp_name: str = Field(min_length=1)
    camp_fees: Fee = Field(ge=0)
    participant_count: int = Field(default=0, ge=0)
    location: str | None = None
    date_time: str | None = None
    healthcare_professional: str | None = None
    description: str | None = None
    image: str | None = None


class CampUpdate(OpenCamelModel):
    """Partial camp update; participantCount may be set to reseed the counter."""

    camp_name: str | None = Field(default=None, min_length=1)
    camp_fees: Fee | None = Field(default=None, ge=0)
    participant_count: int | None = Field(default=None, ge=0)
    location: str | None = None
    date_time: str | None = None
    healthcare_professional: str | None = None
    description: str | None = None
    image: str | None = None

    @model_validator(mode="after")
    def forbid_identity_fields(self) -> CampUpdate:
        for key in self.model_extra or {}:
            if key in ("id", "created", "updated"):
                raise ValueError(f"{key} cannot be updated")
        return self
