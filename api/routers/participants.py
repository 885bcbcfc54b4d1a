"""
Participants Router - Registration lifecycle endpoints.

Registering creates an Unpaid/Pending record and adds the participant to the
camp's count; deleting cancels the registration and releases the place.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from greencare.ledger import RegistrationLedger
from greencare.models import ParticipantRecord, StatusUpdate

from ..dependencies import get_ledger
from ..schemas import CampUpdateCount, CancellationResponse, ParticipantSummary, RegistrationRequest

router = APIRouter(prefix="/participants", tags=["participants"])

LedgerDep = Annotated[RegistrationLedger, Depends(get_ledger)]


@router.post("", response_model=ParticipantSummary, status_code=status.HTTP_201_CREATED)
async def register_participant(request: RegistrationRequest, ledger: LedgerDep) -> ParticipantSummary:
    """Register a participant for a camp (404 if the camp does not exist)."""
    participant = await ledger.register(request.camp_id, request.participant_email, request.extra_fields())
    return ParticipantSummary.model_validate(participant.model_dump())


@router.get("", response_model=list[ParticipantRecord])
async def list_participants(ledger: LedgerDep) -> list[ParticipantRecord]:
    """List every registration, unfiltered."""
    return await ledger.list_all()


@router.get("/{email}", response_model=list[ParticipantRecord])
async def list_participants_by_email(email: str, ledger: LedgerDep) -> list[ParticipantRecord]:
    """List the registrations made with one email address."""
    return await ledger.list_by_email(email)


@router.patch("/camp/{camp_id}", response_model=CampUpdateCount)
async def update_participants_by_camp(camp_id: str, update: StatusUpdate, ledger: LedgerDep) -> CampUpdateCount:
    """Apply a status update to every participant of a camp.

    Kept for clients that still address registrations by camp; new clients
    should use PATCH /participants/{participant_id}.
    """
    matched = await ledger.update_status_by_camp(camp_id, update)
    return CampUpdateCount(camp_id=camp_id, matched=matched)


@router.patch("/{participant_id}", response_model=ParticipantRecord)
async def update_participant(participant_id: str, update: StatusUpdate, ledger: LedgerDep) -> ParticipantRecord:
    """Update payment and/or confirmation status of one registration."""
    return await ledger.update_status(participant_id, update)


@router.delete("/{participant_id}", response_model=CancellationResponse)
async def cancel_participant(participant_id: str, ledger: LedgerDep) -> CancellationResponse:
    """Cancel a registration and release its place on the camp."""
    result = await ledger.cancel(participant_id)
    return CancellationResponse(
        message="Registration cancelled",
        participant_id=result.participant_id,
        camp_id=result.camp_id,
        counter_outcome=result.counter_outcome,
    )
