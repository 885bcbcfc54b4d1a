"""Error taxonomy shared by the GreenCare components.

The HTTP layer maps each class to a status code; nothing below knows about HTTP.
"""

from __future__ import annotations


class GreenCareError(Exception):
    """Base class for all domain errors."""


class NotFoundError(GreenCareError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, identifier: str) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} '{identifier}' not found")


class ValidationError(GreenCareError):
    """Input was malformed or violates a lifecycle rule."""


class StoreError(GreenCareError):
    """The document store rejected or failed an operation."""

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class ProcessorError(GreenCareError):
    """The payment processor call failed."""
