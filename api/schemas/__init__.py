"""
Pydantic schemas for the GreenCare API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .base import CamelModel, MessageResponse, OpenCamelModel
from .camps import CampCreate, CampUpdate
from .feedback import FeedbackCreate
from .participants import (
    CampUpdateCount,
    CancellationResponse,
    ParticipantSummary,
    RegistrationRequest,
)
from .payments import PaymentIntentRequest, PaymentIntentResponse
from .users import UserCreate, UserRegistrationResponse

__all__ = [
    "CamelModel",
    "CampCreate",
    "CampUpdate",
    "CampUpdateCount",
    "CancellationResponse",
    "FeedbackCreate",
    "MessageResponse",
    "OpenCamelModel",
    "ParticipantSummary",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "RegistrationRequest",
    "UserCreate",
    "UserRegistrationResponse",
]
