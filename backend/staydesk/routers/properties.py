"""Properties router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db
from staydesk.repositories import PropertyRepository, ensure_references
from staydesk.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=List[PropertyResponse])
async def list_properties(
    include_inactive: bool = Query(False, alias="includeInactive"),
    owner_id: Optional[int] = Query(None, alias="ownerId"),
    db: AsyncSession = Depends(get_db),
):
    """List active properties (all of them with includeInactive)."""
    props = await PropertyRepository(db).list_visible(include_inactive, owner_id)
    return [PropertyResponse.model_validate(p) for p in props]


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(property_id: int, db: AsyncSession = Depends(get_db)):
    prop = await PropertyRepository(db).get_or_404(property_id)
    return PropertyResponse.model_validate(prop)


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(data: PropertyCreate, db: AsyncSession = Depends(get_db)):
    values = data.model_dump()
    await ensure_references(db, values)
    prop = await PropertyRepository(db).create(values)
    return PropertyResponse.model_validate(prop)


@router.put("/{property_id}", response_model=PropertyResponse)
@router.patch("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: int,
    data: PropertyUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partial update; only supplied fields change."""
    values = data.model_dump(exclude_unset=True)
    await ensure_references(db, values)
    prop = await PropertyRepository(db).update(property_id, values)
    return PropertyResponse.model_validate(prop)
