"""User directory - profile records keyed by email."""

from __future__ import annotations

import logging
from typing import Any

from .errors import NotFoundError, StoreError
from .models import UserRecord
from .store import USERS, StoreHandle, quote

logger = logging.getLogger(__name__)


class UserDirectory:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    async def find_by_email(self, email: str) -> UserRecord | None:
        collection = self.store.collection(USERS)
        result = await self.store.run(
            "User",
            email,
            collection.get_list,
            1,
            1,
            {"filter": f"email = {quote(email)}"},
        )
        if not result.items:
            return None
        return UserRecord.from_record(result.items[0])

    async def get_by_email(self, email: str) -> UserRecord:
        user = await self.find_by_email(email)
        if user is None:
            raise NotFoundError("User", email)
        return user

    async def register(self, fields: dict[str, Any]) -> tuple[UserRecord, bool]:
        """Insert a user unless one with the same email already exists.

        Returns:
            Tuple of (user record, created flag)
        """
        email = fields["email"]
        existing = await self.find_by_email(email)
        if existing is not None:
            logger.info(f"User {email} already registered")
            return existing, False

        collection = self.store.collection(USERS)
        try:
            record = await self.store.run("User", email, collection.create, fields)
        except StoreError as e:
            # A concurrent registration won the unique email index
            winner = await self.find_by_email(email) if e.status == 400 else None
            if winner is None:
                raise
            logger.info(f"User {email} registered concurrently; returning existing record")
            return winner, False
        logger.info(f"Registered user {email}")
        return UserRecord.from_record(record), True
