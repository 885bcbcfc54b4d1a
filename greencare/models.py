from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .schema import DETAILS_FIELD

# Fees stay exact in Python and are emitted as JSON numbers
Fee = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Attributes the PocketBase SDK sets on every record that are not document fields
RECORD_META_FIELDS = frozenset({"collection_id", "collection_name", "expand", "updated"})


def record_fields(record: Any) -> dict[str, Any]:
    """Flatten a PocketBase record into a plain dict of its document fields."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in RECORD_META_FIELDS and not key.startswith("_")
    }


class PaymentStatus(Enum):
    UNPAID = "Unpaid"
    PAID = "Paid"


class ConfirmationStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


class CounterOutcome(Enum):
    APPLIED = "applied"
    CAMP_NOT_FOUND = "camp_not_found"  # Dangling camp reference, treated as success
    FAILED = "failed"  # Store rejected the delta; counter left as-is


class StoreModel(BaseModel):
    """Base for records read from the store; JSON uses camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str
    created: datetime | None = None

    @field_validator("created", mode="before")
    @classmethod
    def parse_created(cls, v: Any) -> Any:
        # The SDK leaves unparseable timestamps as raw strings, including ""
        return v or None

    @classmethod
    def from_record(cls, record: Any) -> Self:
        fields = record_fields(record)
        details = fields.pop(DETAILS_FIELD, None)
        if isinstance(details, dict):
            # Collection fields win over a same-named key in details
            fields = {**details, **fields}
        return cls.model_validate(fields)

    @model_serializer(mode="wrap")
    def camel_case_extras(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        if info.by_alias and self.model_extra:
            for key in self.model_extra:
                if "_" in key and key in data:
                    data[to_camel(key)] = data.pop(key)
        return data


class CampRecord(StoreModel):
    camp_name: str = ""
    camp_fees: Fee = Decimal("0")
    participant_count: int = 0
    location: str | None = None
    date_time: str | None = None
    healthcare_professional: str | None = None
    description: str | None = None
    image: str | None = None

    @field_validator("camp_fees", mode="before")
    @classmethod
    def parse_fees(cls, v: Any) -> Any:
        # PocketBase returns numbers as floats; go through str to avoid binary artifacts
        if v is None or v == "":
            return Decimal("0")
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_validator("participant_count", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> Any:
        if v is None or v == "":
            return 0
        return int(v)


class ParticipantRecord(StoreModel):
    camp_id: str
    participant_email: str
    participant_name: str | None = None
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    confirmation_status: ConfirmationStatus = ConfirmationStatus.PENDING

    @field_validator("payment_status", "confirmation_status", mode="before")
    @classmethod
    def default_unset_status(cls, v: Any, info: ValidationInfo) -> Any:
        # PocketBase reports an unset select field as ""
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v


class UserRecord(StoreModel):
    uid: str | None = None
    name: str | None = None
    email: str
    profile_picture: str | None = None


class FeedbackRecord(StoreModel):
    camp_id: str
    participant_email: str | None = None
    participant_name: str | None = None
    rating: int
    comment: str = ""


class StatusUpdate(BaseModel):
    """Partial status transition for a participant record.

    Cancellation is not a status update: it deletes the record and adjusts the
    camp counter, so it has its own operation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    payment_status: PaymentStatus | None = None
    confirmation_status: ConfirmationStatus | None = None

    @field_validator("confirmation_status")
    @classmethod
    def reject_cancelled(cls, v: ConfirmationStatus | None) -> ConfirmationStatus | None:
        if v is ConfirmationStatus.CANCELLED:
            raise ValueError("confirmationStatus cannot be set to Cancelled; cancel the registration instead")
        return v

    @model_validator(mode="after")
    def require_one_field(self) -> StatusUpdate:
        if self.payment_status is None and self.confirmation_status is None:
            raise ValueError("at least one of paymentStatus or confirmationStatus is required")
        return self

    def to_store_fields(self) -> dict[str, str]:
        return self.model_dump(mode="json", exclude_none=True)


class CancellationResult(BaseModel):
    participant_id: str
    camp_id: str
    counter_outcome: CounterOutcome = Field(default=CounterOutcome.APPLIED)
