"""OTA integrations router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db
from staydesk.models.enums import OtaPlatform
from staydesk.repositories import OtaIntegrationRepository, ensure_references
from staydesk.schemas.integration import (
    OtaIntegrationCreate,
    OtaIntegrationResponse,
    OtaIntegrationUpdate,
)
from staydesk.services.integrations import OtaSyncService

router = APIRouter(prefix="/integrations/ota", tags=["integrations"])


@router.get("", response_model=List[OtaIntegrationResponse])
async def list_integrations(
    property_id: Optional[int] = Query(None, alias="propertyId"),
    platform: Optional[OtaPlatform] = None,
    db: AsyncSession = Depends(get_db),
):
    integrations = await OtaIntegrationRepository(db).list(property_id=property_id, platform=platform)
    return [OtaIntegrationResponse.model_validate(i) for i in integrations]


@router.get("/{integration_id}", response_model=OtaIntegrationResponse)
async def get_integration(integration_id: int, db: AsyncSession = Depends(get_db)):
    integration = await OtaIntegrationRepository(db).get_or_404(integration_id)
    return OtaIntegrationResponse.model_validate(integration)


@router.post("", response_model=OtaIntegrationResponse, status_code=status.HTTP_201_CREATED)
async def create_integration(data: OtaIntegrationCreate, db: AsyncSession = Depends(get_db)):
    values = data.model_dump()
    await ensure_references(db, values)
    integration = await OtaIntegrationRepository(db).create(values)
    return OtaIntegrationResponse.model_validate(integration)


@router.put("/{integration_id}", response_model=OtaIntegrationResponse)
async def update_integration(
    integration_id: int,
    data: OtaIntegrationUpdate,
    db: AsyncSession = Depends(get_db),
):
    values = data.model_dump(exclude_unset=True)
    await ensure_references(db, values)
    integration = await OtaIntegrationRepository(db).update(integration_id, values)
    return OtaIntegrationResponse.model_validate(integration)


@router.post("/{integration_id}/sync", response_model=OtaIntegrationResponse)
async def sync_integration(integration_id: int, db: AsyncSession = Depends(get_db)):
    integration = await OtaSyncService(OtaIntegrationRepository(db)).sync(integration_id)
    return OtaIntegrationResponse.model_validate(integration)
