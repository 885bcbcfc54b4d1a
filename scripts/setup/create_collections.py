#!/usr/bin/env python3
"""
Provision the GreenCare collections in PocketBase.

Creates camps, participants, users_profile and feedback if they do not exist.
`camps.participant_count` is an integer field with `min: 0`, so the store
itself rejects a decrement that would take a camp below zero. Camps and
participants carry a `details` json field for client-supplied extras.

Reads POCKETBASE_URL / POCKETBASE_ADMIN_EMAIL / POCKETBASE_ADMIN_PASSWORD
from the environment or a .env file.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Any

import requests
from dotenv import load_dotenv

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

# Note: ClientResponseError import may show as attr-defined error due to
# pocketbase library not exporting it explicitly, but it works at runtime
from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from greencare.schema import COLLECTION_FIELDS, UNIQUE_FIELDS
from greencare.store import PARTICIPANTS
from pocketbase import PocketBase
from scripts.utils.auth import authenticate_pocketbase

AUTH_REQUIRED = "@request.auth.id != ''"

TIMESTAMP_FIELDS: list[dict[str, Any]] = [
    {"name": "created", "type": "autodate", "onCreate": True, "onUpdate": False},
    {"name": "updated", "type": "autodate", "onCreate": True, "onUpdate": True},
]


INDEXES: dict[str, list[str]] = {
    name: [f"CREATE UNIQUE INDEX idx_{name}_{field} ON {name} ({field})" for field in fields]
    for name, fields in UNIQUE_FIELDS.items()
}
INDEXES[PARTICIPANTS] = [f"CREATE INDEX idx_{PARTICIPANTS}_email ON {PARTICIPANTS} (participant_email)"]


def wait_for_pocketbase(url: str, max_attempts: int = 30) -> bool:
    """Wait for PocketBase to be ready."""
    print(f"Waiting for PocketBase at {url} to be ready...")

    for attempt in range(max_attempts):
        try:
            response = requests.get(f"{url}/api/health", timeout=2)
            if response.status_code == 200:
                print("✅ PocketBase is ready")
                return True
        except requests.exceptions.RequestException:
            pass

        time.sleep(1)
        if attempt % 5 == 0:
            print(f"  Still waiting... ({attempt}/{max_attempts})")

    print("❌ PocketBase failed to start")
    return False


def collection_exists(pb: PocketBase, name: str) -> bool:
    try:
        pb.collections.get_one(name)
        return True
    except ClientResponseError as e:
        if e.status == 404:
            return False
        raise


def create_collection(pb: PocketBase, name: str, fields: list[dict[str, Any]]) -> bool:
    """Create one base collection; an existing collection is left untouched."""
    if collection_exists(pb, name):
        print(f"ℹ️  {name} already exists, skipping")
        return True

    body = {
        "name": name,
        "type": "base",
        "fields": fields + TIMESTAMP_FIELDS,
        "indexes": INDEXES.get(name, []),
        "listRule": "",
        "viewRule": "",
        "createRule": AUTH_REQUIRED,
        "updateRule": AUTH_REQUIRED,
        "deleteRule": AUTH_REQUIRED,
    }
    try:
        pb.collections.create(body)
    except ClientResponseError as e:
        print(f"✗ Failed to create {name}: {e}")
        if hasattr(e, "data"):
            print(f"  Details: {e.data}")
        return False

    print(f"✓ Created {name} ({len(fields)} fields)")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the GreenCare PocketBase collections")
    parser.add_argument("--no-wait", action="store_true", help="Do not wait for the PocketBase health check")
    args = parser.parse_args()

    load_dotenv()
    pb_url = os.getenv("POCKETBASE_URL", "http://127.0.0.1:8090").rstrip("/")

    if not args.no_wait and not wait_for_pocketbase(pb_url):
        return 1

    try:
        pb = authenticate_pocketbase(pb_url)
        print("✓ Authenticated with PocketBase as admin")
    except ClientResponseError:
        return 1

    created = sum(create_collection(pb, name, fields) for name, fields in COLLECTION_FIELDS.items())
    print(f"\n✓ {created}/{len(COLLECTION_FIELDS)} collections ready")
    return 0 if created == len(COLLECTION_FIELDS) else 1


if __name__ == "__main__":
    sys.exit(main())
