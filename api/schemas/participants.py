"""
Pydantic schemas for participant registration endpoints.
"""

from __future__ import annotations

from pydantic import EmailStr, Field

from greencare.models import ConfirmationStatus, CounterOutcome, PaymentStatus

from .base import CamelModel, OpenCamelModel


class RegistrationRequest(OpenCamelModel):
    """Request body for registering a participant in a camp.

    Any paymentStatus/confirmationStatus sent by the client is ignored; new
    registrations always start Unpaid/Pending.
    """

    camp_id: str = Field(min_length=1)
    participant_email: EmailStr
    participant_name: str | None = None

    def extra_fields(self) -> dict[str, object]:
        return self.store_fields(exclude={"camp_id", "participant_email"})


class ParticipantSummary(CamelModel):
    """Response body for a newly created registration."""

    id: str
    camp_id: str
    participant_email: str
    participant_name: str | None = None
    payment_status: PaymentStatus
    confirmation_status: ConfirmationStatus


class CampUpdateCount(CamelModel):
    """Response body for the legacy update-by-camp endpoint."""

    camp_id: str
    matched: int


class CancellationResponse(CamelModel):
    """Response body for a cancelled registration."""

    message: str
    participant_id: str
    camp_id: str
    counter_outcome: CounterOutcome
