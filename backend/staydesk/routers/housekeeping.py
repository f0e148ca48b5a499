"""Housekeeping tasks router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db, utcnow
from staydesk.models.enums import TaskStatus
from staydesk.repositories import HousekeepingRepository, ensure_references
from staydesk.schemas.housekeeping import (
    HousekeepingTaskCreate,
    HousekeepingTaskResponse,
    HousekeepingTaskUpdate,
)
from staydesk.services.housekeeping import apply_completion

router = APIRouter(prefix="/housekeeping", tags=["housekeeping"])


@router.get("", response_model=List[HousekeepingTaskResponse])
async def list_tasks(
    property_id: Optional[int] = Query(None, alias="propertyId"),
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    assigned_to: Optional[int] = Query(None, alias="assignedTo"),
    db: AsyncSession = Depends(get_db),
):
    tasks = await HousekeepingRepository(db).list(
        property_id=property_id, status=status_filter, assigned_to=assigned_to
    )
    return [HousekeepingTaskResponse.model_validate(t) for t in tasks]


@router.get("/pending", response_model=List[HousekeepingTaskResponse])
async def list_pending_tasks(db: AsyncSession = Depends(get_db)):
    tasks = await HousekeepingRepository(db).pending()
    return [HousekeepingTaskResponse.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=HousekeepingTaskResponse)
async def get_task(task_id: int, db: AsyncSession = Depends(get_db)):
    task = await HousekeepingRepository(db).get_or_404(task_id)
    return HousekeepingTaskResponse.model_validate(task)


@router.post("", response_model=HousekeepingTaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(data: HousekeepingTaskCreate, db: AsyncSession = Depends(get_db)):
    values = data.model_dump()
    if data.status == TaskStatus.COMPLETED:
        values["completed_at"] = utcnow()
    await ensure_references(db, values)
    task = await HousekeepingRepository(db).create(values)
    return HousekeepingTaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=HousekeepingTaskResponse)
@router.patch("/{task_id}", response_model=HousekeepingTaskResponse)
async def update_task(
    task_id: int,
    data: HousekeepingTaskUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partial update. Completing a task stamps completedAt."""
    repo = HousekeepingRepository(db)
    task = await repo.get_or_404(task_id)
    values = apply_completion(task, data.model_dump(exclude_unset=True), utcnow())
    await ensure_references(db, values)
    task = await repo.update(task_id, values)
    return HousekeepingTaskResponse.model_validate(task)
