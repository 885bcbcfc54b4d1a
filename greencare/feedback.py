"""Feedback book - participant reviews of camps."""

from __future__ import annotations

import logging
from typing import Any

from .camps import CampCatalog
from .models import FeedbackRecord
from .store import FEEDBACK, StoreHandle

logger = logging.getLogger(__name__)


class FeedbackBook:
    def __init__(self, store: StoreHandle, camps: CampCatalog) -> None:
        self.store = store
        self.camps = camps

    async def submit(self, fields: dict[str, Any]) -> FeedbackRecord:
        """Store feedback for an existing camp.

        Raises:
            NotFoundError: if the referenced camp does not exist
        """
        await self.camps.get(fields["camp_id"])

        collection = self.store.collection(FEEDBACK)
        record = await self.store.run("Feedback", fields["camp_id"], collection.create, fields)
        logger.info(f"Feedback {record.id} submitted for camp {fields['camp_id']} (rating={fields.get('rating')})")
        return FeedbackRecord.from_record(record)

    async def list_all(self) -> list[FeedbackRecord]:
        collection = self.store.collection(FEEDBACK)
        records = await self.store.run("Feedback", "*", collection.get_full_list, query_params={"sort": "-created"})
        return [FeedbackRecord.from_record(r) for r in records]
