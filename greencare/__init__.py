"""
GreenCare - Core business logic for camp registration management.

This package contains:
- ledger: Participant registration lifecycle (register, update, cancel)
- counter: Denormalized participant counts on camps, popularity ranking
- payments: Stripe payment intent bridge
- camps, users, feedback: CRUD over the remaining collections
- store: Explicit PocketBase store handle
"""

from greencare.camps import CampCatalog
from greencare.counter import CampCapacityCounter
from greencare.errors import GreenCareError, NotFoundError, ProcessorError, StoreError, ValidationError
from greencare.feedback import FeedbackBook
from greencare.ledger import RegistrationLedger
from greencare.payments import PaymentIntentBridge
from greencare.store import StoreHandle
from greencare.users import UserDirectory

__all__ = [
    "CampCapacityCounter",
    "CampCatalog",
    "FeedbackBook",
    "GreenCareError",
    "NotFoundError",
    "PaymentIntentBridge",
    "ProcessorError",
    "RegistrationLedger",
    "StoreError",
    "StoreHandle",
    "UserDirectory",
    "ValidationError",
]
