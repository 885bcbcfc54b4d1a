"""
Shared dependencies for the GreenCare API.

The store handle is created and acquired by the application lifespan and
kept on `app.state.store`. Every component is built per request from that
handle, so tests can swap the store (or any component) through
`app.dependency_overrides`.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from greencare.camps import CampCatalog
from greencare.counter import CampCapacityCounter
from greencare.errors import StoreError
from greencare.feedback import FeedbackBook
from greencare.ledger import RegistrationLedger
from greencare.payments import PaymentIntentBridge
from greencare.store import StoreHandle
from greencare.users import UserDirectory

from .settings import Settings, get_settings


def get_store(request: Request) -> StoreHandle:
    """FastAPI dependency returning the store handle owned by the app lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreError("Store handle is not available")
    return store


StoreDep = Annotated[StoreHandle, Depends(get_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_camp_catalog(store: StoreDep) -> CampCatalog:
    return CampCatalog(store)


def get_counter(store: StoreDep) -> CampCapacityCounter:
    return CampCapacityCounter(store)


def get_ledger(
    store: StoreDep,
    settings: SettingsDep,
    counter: Annotated[CampCapacityCounter, Depends(get_counter)],
    camps: Annotated[CampCatalog, Depends(get_camp_catalog)],
) -> RegistrationLedger:
    return RegistrationLedger(store, counter, camps, increment_on_register=settings.increment_on_register)


def get_payment_bridge(
    settings: SettingsDep,
    camps: Annotated[CampCatalog, Depends(get_camp_catalog)],
) -> PaymentIntentBridge:
    return PaymentIntentBridge(camps, api_key=settings.stripe_secret_key, currency=settings.payment_currency)


def get_user_directory(store: StoreDep) -> UserDirectory:
    return UserDirectory(store)


def get_feedback_book(
    store: StoreDep,
    camps: Annotated[CampCatalog, Depends(get_camp_catalog)],
) -> FeedbackBook:
    return FeedbackBook(store, camps)


__all__ = [
    "get_store",
    "get_camp_catalog",
    "get_counter",
    "get_ledger",
    "get_payment_bridge",
    "get_user_directory",
    "get_feedback_book",
]
