"""Camp catalog - CRUD over the camps collection."""

from __future__ import annotations

import logging
from typing import Any

from .errors import NotFoundError, ValidationError
from .models import CampRecord
from .schema import field_names, pack_details
from .store import CAMPS, StoreHandle

logger = logging.getLogger(__name__)

CAMP_COLUMNS = field_names(CAMPS)


class CampCatalog:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    async def create(self, fields: dict[str, Any]) -> CampRecord:
        data = pack_details(CAMPS, {"participant_count": 0, **fields})
        collection = self.store.collection(CAMPS)
        record = await self.store.run("Camp", "new", collection.create, data)
        logger.info(f"Created camp {record.id} ({data.get('camp_name', '')})")
        return CampRecord.from_record(record)

    async def list_all(self) -> list[CampRecord]:
        collection = self.store.collection(CAMPS)
        records = await self.store.run("Camp", "*", collection.get_full_list, query_params={"sort": "-created"})
        return [CampRecord.from_record(r) for r in records]

    async def get(self, camp_id: str) -> CampRecord:
        collection = self.store.collection(CAMPS)
        record = await self.store.run("Camp", camp_id, collection.get_one, camp_id)
        return CampRecord.from_record(record)

    async def find(self, camp_id: str) -> CampRecord | None:
        """Resolve a camp reference that is allowed to dangle."""
        try:
            return await self.get(camp_id)
        except NotFoundError:
            return None

    async def update(self, camp_id: str, fields: dict[str, Any]) -> CampRecord:
        if not fields:
            raise ValidationError("No fields to update")

        existing = None
        if any(key not in CAMP_COLUMNS for key in fields):
            existing = (await self.get(camp_id)).model_extra
        data = pack_details(CAMPS, fields, existing)

        collection = self.store.collection(CAMPS)
        record = await self.store.run("Camp", camp_id, collection.update, camp_id, data)
        logger.info(f"Updated camp {camp_id}: {sorted(fields)}")
        return CampRecord.from_record(record)

    async def delete(self, camp_id: str) -> None:
        # Participants keep their camp_id; their references dangle from here on
        collection = self.store.collection(CAMPS)
        await self.store.run("Camp", camp_id, collection.delete, camp_id)
        logger.info(f"Deleted camp {camp_id}")
