"""
Camps Router - Camp CRUD and the popularity listing.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from greencare.camps import CampCatalog
from greencare.counter import CampCapacityCounter
from greencare.models import CampRecord

from ..dependencies import get_camp_catalog, get_counter
from ..schemas import CampCreate, CampUpdate, MessageResponse
from ..settings import Settings, get_settings

router = APIRouter(tags=["camps"])

CatalogDep = Annotated[CampCatalog, Depends(get_camp_catalog)]


@router.post("/camps", response_model=CampRecord, status_code=status.HTTP_201_CREATED)
async def create_camp(request: CampCreate, camps: CatalogDep) -> CampRecord:
    return await camps.create(request.store_fields())


@router.get("/camps", response_model=list[CampRecord])
async def list_camps(camps: CatalogDep) -> list[CampRecord]:
    return await camps.list_all()


@router.get("/camps/{camp_id}", response_model=CampRecord)
async def get_camp(camp_id: str, camps: CatalogDep) -> CampRecord:
    return await camps.get(camp_id)


@router.patch("/camps/{camp_id}", response_model=CampRecord)
async def update_camp(camp_id: str, request: CampUpdate, camps: CatalogDep) -> CampRecord:
    """Overwrite the given camp fields; participantCount may be reseeded here."""
    return await camps.update(camp_id, request.store_fields())


@router.delete("/camps/{camp_id}", response_model=MessageResponse)
async def delete_camp(camp_id: str, camps: CatalogDep) -> MessageResponse:
    """Delete a camp. Registrations that reference it are left in place."""
    await camps.delete(camp_id)
    return MessageResponse(message=f"Camp '{camp_id}' deleted successfully")


@router.get("/popular", response_model=list[CampRecord])
async def popular_camps(
    counter: Annotated[CampCapacityCounter, Depends(get_counter)],
    settings: Annotated[Settings, Depends(get_settings)],
    limit: Annotated[int | None, Query(ge=1, le=50)] = None,
) -> list[CampRecord]:
    """Camps with the most participants first."""
    return await counter.list_popular(limit or settings.popular_camps_limit)
