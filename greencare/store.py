"""
Store handle - explicit ownership of the PocketBase client.

A StoreHandle is created once at startup, acquired (authenticated as a
superuser), passed to every component that needs the store, and released on
shutdown. There is no module-level client.

PocketBase's Python SDK is synchronous, so every call goes through
`asyncio.to_thread`. `ClientResponseError` is translated here so that
components only ever see GreenCare errors:
- status 404 -> NotFoundError
- anything else -> StoreError
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

# Note: ClientResponseError import may show as attr-defined error due to
# pocketbase library not exporting it explicitly, but it works at runtime
from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from pocketbase import PocketBase

from .errors import NotFoundError, StoreError

if TYPE_CHECKING:
    from pocketbase.services.record_service import RecordService

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Collection names
CAMPS = "camps"
PARTICIPANTS = "participants"
USERS = "users_profile"
FEEDBACK = "feedback"


def quote(value: str) -> str:
    """Quote a string literal for a PocketBase filter expression."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class StoreHandle:
    """Owns one PocketBase client and its authentication lifecycle."""

    def __init__(self, client: PocketBase, admin_email: str = "", admin_password: str = "") -> None:
        self._client = client
        self._admin_email = admin_email
        self._admin_password = admin_password
        self._acquired = False

    @classmethod
    def connect(cls, url: str, admin_email: str, admin_password: str) -> StoreHandle:
        """Build a handle around a fresh client for `url` (not yet acquired)."""
        return cls(PocketBase(url), admin_email, admin_password)

    @property
    def acquired(self) -> bool:
        return self._acquired

    async def acquire(self, authenticate: bool = True) -> None:
        """Make the handle usable, authenticating as superuser unless told not to."""
        if authenticate:
            try:
                await asyncio.to_thread(
                    self._client.collection("_superusers").auth_with_password,
                    self._admin_email,
                    self._admin_password,
                )
            except ClientResponseError as e:
                logger.error(f"Failed to authenticate with PocketBase: status={e.status}")
                raise StoreError("Failed to authenticate with PocketBase", status=e.status) from e
            logger.info("Successfully authenticated with PocketBase")
        else:
            logger.warning("Store acquired without PocketBase authentication")
        self._acquired = True

    async def release(self) -> None:
        """Drop credentials; the handle must be re-acquired before further use."""
        self._client.auth_store.clear()
        self._acquired = False
        logger.info("Store handle released")

    def collection(self, name: str) -> RecordService:
        if not self._acquired:
            raise StoreError("Store handle used before it was acquired")
        return self._client.collection(name)

    async def run(self, entity: str, identifier: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a blocking SDK call in a worker thread and translate its errors.

        Args:
            entity: Entity name used in NotFoundError messages (e.g., "Camp")
            identifier: Identifier used in error messages
            func: Bound SDK method, e.g. `store.collection(CAMPS).get_one`
        """
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except ClientResponseError as e:
            if e.status == 404:
                raise NotFoundError(entity, identifier) from e
            logger.error(
                f"PocketBase error on {entity} '{identifier}': status={e.status}, data={getattr(e, 'data', None)}"
            )
            raise StoreError(f"Store operation on {entity} '{identifier}' failed", status=e.status) from e
