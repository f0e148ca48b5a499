"""Analytics router - stored daily/weekly/monthly rollups."""

from datetime import date, datetime, time
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db
from staydesk.repositories import AnalyticsRepository, ensure_references
from staydesk.schemas.analytics import AnalyticsCreate, AnalyticsResponse

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=List[AnalyticsResponse])
async def list_analytics(
    property_id: Optional[int] = Query(None, alias="propertyId"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    db: AsyncSession = Depends(get_db),
):
    """Rollups within the inclusive date range, newest first."""
    start = datetime.combine(start_date, time.min) if start_date else None
    end = datetime.combine(end_date, time.max) if end_date else None
    rows = await AnalyticsRepository(db).query(property_id, start, end)
    return [AnalyticsResponse.model_validate(r) for r in rows]


@router.post("", response_model=AnalyticsResponse, status_code=status.HTTP_201_CREATED)
async def create_analytics(data: AnalyticsCreate, db: AsyncSession = Depends(get_db)):
    values = data.model_dump()
    await ensure_references(db, values)
    row = await AnalyticsRepository(db).create(values)
    return AnalyticsResponse.model_validate(row)
