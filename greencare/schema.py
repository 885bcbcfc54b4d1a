"""
PocketBase collection layout for GreenCare.

The provisioning script creates collections from `COLLECTION_FIELDS`, and the
components use it to decide which keys PocketBase will keep. PocketBase drops
body keys that are not collection fields, so descriptive fields a client adds
on top of the fixed ones are written into the `details` json field of camps
and participants and merged back into the record on read.
"""

from __future__ import annotations

from typing import Any

from .store import CAMPS, FEEDBACK, PARTICIPANTS, USERS

DETAILS_FIELD = "details"

# Set by PocketBase itself on every record
SYSTEM_FIELDS = frozenset({"id", "created", "updated"})


def text(name: str, required: bool = False) -> dict[str, Any]:
    return {"name": name, "type": "text", "required": required}


COLLECTION_FIELDS: dict[str, list[dict[str, Any]]] = {
    CAMPS: [
        text("camp_name", required=True),
        {"name": "camp_fees", "type": "number", "min": 0},
        {"name": "participant_count", "type": "number", "min": 0, "onlyInt": True},
        text("location"),
        text("date_time"),
        text("healthcare_professional"),
        text("description"),
        text("image"),
        {"name": DETAILS_FIELD, "type": "json", "maxSize": 0},
    ],
    PARTICIPANTS: [
        text("camp_id", required=True),
        {"name": "participant_email", "type": "email", "required": True},
        text("participant_name"),
        {
            "name": "payment_status",
            "type": "select",
            "maxSelect": 1,
            "required": True,
            "values": ["Unpaid", "Paid"],
        },
        {
            "name": "confirmation_status",
            "type": "select",
            "maxSelect": 1,
            "required": True,
            "values": ["Pending", "Confirmed", "Cancelled"],
        },
        text("age"),
        text("phone_number"),
        text("gender"),
        text("emergency_contact"),
        {"name": DETAILS_FIELD, "type": "json", "maxSize": 0},
    ],
    USERS: [
        text("uid"),
        text("name"),
        {"name": "email", "type": "email", "required": True},
        text("profile_picture"),
    ],
    FEEDBACK: [
        text("camp_id", required=True),
        text("participant_email"),
        text("participant_name"),
        {"name": "rating", "type": "number", "min": 1, "max": 5, "onlyInt": True, "required": True},
        text("comment"),
    ],
}

# Fields backed by a unique index
UNIQUE_FIELDS: dict[str, tuple[str, ...]] = {
    USERS: ("email",),
}


def field_names(collection: str) -> frozenset[str]:
    """Names of the fields PocketBase stores for `collection`, system fields included."""
    return frozenset(f["name"] for f in COLLECTION_FIELDS[collection]) | SYSTEM_FIELDS


def pack_details(collection: str, fields: dict[str, Any], existing: dict[str, Any] | None = None) -> dict[str, Any]:
    """Move keys the collection has no field for into its `details` json field.

    Args:
        collection: Collection name; must define a `details` field
        fields: Snake_case body about to be written
        existing: Details already stored on the record, merged under the new ones

    Returns:
        Body containing only collection fields
    """
    known = field_names(collection)
    body = {key: value for key, value in fields.items() if key in known and key != DETAILS_FIELD}
    details = {key: value for key, value in fields.items() if key not in known}
    if details:
        body[DETAILS_FIELD] = {**(existing or {}), **details}
    return body
