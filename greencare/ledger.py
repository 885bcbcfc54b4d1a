"""
Registration ledger - participant records and their lifecycle.

Lifecycle:
    register  -> record created as Unpaid/Pending, camp counter +1
    update    -> payment/confirmation status transitions
    cancel    -> record deleted, camp counter -1

The record write and the counter delta are two separate store operations.
If the process dies between them the counter is left over-counted; the
counter is best-effort and can be reseeded through a camp update.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .camps import CampCatalog
from .counter import CampCapacityCounter
from .errors import NotFoundError, StoreError
from .models import (
    CancellationResult,
    ConfirmationStatus,
    CounterOutcome,
    ParticipantRecord,
    PaymentStatus,
    StatusUpdate,
)
from .schema import pack_details
from .store import PARTICIPANTS, StoreHandle, quote

logger = logging.getLogger(__name__)

# Fields the server owns at registration time
SERVER_ASSIGNED_FIELDS = frozenset({"id", "payment_status", "confirmation_status", "created", "updated"})


class RegistrationLedger:
    """Owns participant records and keeps the camp counter in step with them."""

    def __init__(
        self,
        store: StoreHandle,
        counter: CampCapacityCounter,
        camps: CampCatalog,
        increment_on_register: bool = True,
    ) -> None:
        self.store = store
        self.counter = counter
        self.camps = camps
        self.increment_on_register = increment_on_register

    async def register(
        self,
        camp_id: str,
        participant_email: str,
        extra_fields: dict[str, Any] | None = None,
    ) -> ParticipantRecord:
        """Create a Pending/Unpaid registration for an existing camp.

        Caller-supplied status fields in `extra_fields` are discarded.

        Raises:
            NotFoundError: if `camp_id` does not resolve to a camp
        """
        await self.camps.get(camp_id)

        data = {key: value for key, value in (extra_fields or {}).items() if key not in SERVER_ASSIGNED_FIELDS}
        data.update(
            {
                "camp_id": camp_id,
                "participant_email": participant_email,
                "payment_status": PaymentStatus.UNPAID.value,
                "confirmation_status": ConfirmationStatus.PENDING.value,
            }
        )

        collection = self.store.collection(PARTICIPANTS)
        body = pack_details(PARTICIPANTS, data)
        record = await self.store.run("Participant", participant_email, collection.create, body)
        participant = ParticipantRecord.from_record(record)
        logger.info(f"Registered participant {participant.id} ({participant_email}) for camp {camp_id}")

        if self.increment_on_register:
            await self._adjust_counter(self.counter.increment, camp_id)

        return participant

    async def list_all(self) -> list[ParticipantRecord]:
        collection = self.store.collection(PARTICIPANTS)
        records = await self.store.run("Participant", "*", collection.get_full_list)
        return [ParticipantRecord.from_record(r) for r in records]

    async def list_by_email(self, email: str) -> list[ParticipantRecord]:
        collection = self.store.collection(PARTICIPANTS)
        filter_str = f"participant_email = {quote(email)}"
        logger.debug(f"Listing participants with filter: {filter_str}")
        records = await self.store.run(
            "Participant", email, collection.get_full_list, query_params={"filter": filter_str}
        )
        return [ParticipantRecord.from_record(r) for r in records]

    async def update_status(self, participant_id: str, update: StatusUpdate) -> ParticipantRecord:
        """Apply a status transition to one participant, matched by record id."""
        collection = self.store.collection(PARTICIPANTS)
        record = await self.store.run(
            "Participant", participant_id, collection.update, participant_id, update.to_store_fields()
        )
        logger.info(f"Updated participant {participant_id}: {update.to_store_fields()}")
        return ParticipantRecord.from_record(record)

    async def update_status_by_camp(self, camp_id: str, update: StatusUpdate) -> int:
        """Apply a status transition to every participant of a camp.

        Legacy behaviour kept for older clients: the match key is the camp
        reference, so this touches zero, one, or many registrations.

        Returns:
            Number of participant records matched
        """
        collection = self.store.collection(PARTICIPANTS)
        records = await self.store.run(
            "Participant",
            camp_id,
            collection.get_full_list,
            query_params={"filter": f"camp_id = {quote(camp_id)}"},
        )
        fields = update.to_store_fields()
        for record in records:
            await self.store.run("Participant", record.id, collection.update, record.id, fields)

        logger.info(f"Updated {len(records)} participants of camp {camp_id}: {fields}")
        return len(records)

    async def cancel(self, participant_id: str) -> CancellationResult:
        """Delete a registration, then release its place on the camp.

        Raises:
            NotFoundError: if the participant does not exist (no counter change)
        """
        collection = self.store.collection(PARTICIPANTS)
        record = await self.store.run("Participant", participant_id, collection.get_one, participant_id)
        participant = ParticipantRecord.from_record(record)

        await self.store.run("Participant", participant_id, collection.delete, participant_id)
        outcome = await self._adjust_counter(self.counter.decrement, participant.camp_id)

        logger.info(f"Cancelled participant {participant_id} of camp {participant.camp_id}: counter {outcome.value}")
        return CancellationResult(
            participant_id=participant_id,
            camp_id=participant.camp_id,
            counter_outcome=outcome,
        )

    async def _adjust_counter(
        self,
        delta: Callable[[str], Awaitable[CounterOutcome]],
        camp_id: str,
    ) -> CounterOutcome:
        # The participant write already happened; a counter failure must not undo it
        try:
            return await delta(camp_id)
        except StoreError as e:
            logger.error(f"Counter update for camp {camp_id} failed, count is now stale: {e}")
            return CounterOutcome.FAILED
