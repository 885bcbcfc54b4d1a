"""Camp capacity counter - the denormalized participant_count on camp records.

Deltas are applied by PocketBase itself through the `field+` / `field-`
update modifiers, so concurrent adjustments never race on a read-modify-write
in this process.
"""

from __future__ import annotations

import logging

from .errors import NotFoundError, ValidationError
from .models import CampRecord, CounterOutcome
from .store import CAMPS, StoreHandle

logger = logging.getLogger(__name__)

DEFAULT_POPULAR_LIMIT = 6

# Most participants first; ties keep insertion order
POPULAR_SORT = "-participant_count,created"


class CampCapacityCounter:
    """Applies +1/-1 deltas to camps and ranks camps by participant count."""

    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    async def _apply_delta(self, camp_id: str, modifier: str) -> CounterOutcome:
        collection = self.store.collection(CAMPS)
        try:
            await self.store.run("Camp", camp_id, collection.update, camp_id, {modifier: 1})
        except NotFoundError:
            logger.info(f"Camp {camp_id} not found for counter delta {modifier}; skipping")
            return CounterOutcome.CAMP_NOT_FOUND
        return CounterOutcome.APPLIED

    async def increment(self, camp_id: str) -> CounterOutcome:
        return await self._apply_delta(camp_id, "participant_count+")

    async def decrement(self, camp_id: str) -> CounterOutcome:
        """Subtract one participant from the camp.

        A missing camp is not an error: participants hold only a weak
        reference and the camp may already be gone.
        """
        return await self._apply_delta(camp_id, "participant_count-")

    async def list_popular(self, limit: int = DEFAULT_POPULAR_LIMIT) -> list[CampRecord]:
        """Return at most `limit` camps ordered by participant_count descending."""
        if limit < 1:
            raise ValidationError("limit must be at least 1")

        collection = self.store.collection(CAMPS)
        result = await self.store.run(
            "Camp",
            "popular",
            collection.get_list,
            1,
            limit,
            {"sort": POPULAR_SORT},
        )
        return [CampRecord.from_record(item) for item in result.items[:limit]]
