"""Housekeeping task schemas."""

from typing import Optional

from pydantic import ValidationInfo, field_validator

from staydesk.schemas.base import BaseSchema, IDMixin, TimestampMixin, UtcDateTime, reject_null
from staydesk.models.enums import TaskStatus, TaskType


class HousekeepingTaskCreate(BaseSchema):
    """Schedule a cleaning, maintenance or inspection task."""

    property_id: int
    booking_id: Optional[int] = None
    assigned_to: Optional[int] = None
    task_type: TaskType
    status: TaskStatus = TaskStatus.PENDING
    due_date: Optional[UtcDateTime] = None
    notes: Optional[str] = None


class HousekeepingTaskUpdate(BaseSchema):
    property_id: Optional[int] = None
    booking_id: Optional[int] = None
    assigned_to: Optional[int] = None
    task_type: Optional[TaskType] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[UtcDateTime] = None
    notes: Optional[str] = None
    completed_at: Optional[UtcDateTime] = None

    @field_validator("task_type", "status", mode="after")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class HousekeepingTaskResponse(BaseSchema, IDMixin, TimestampMixin):
    property_id: Optional[int] = None
    booking_id: Optional[int] = None
    assigned_to: Optional[int] = None
    task_type: TaskType
    status: TaskStatus
    due_date: Optional[UtcDateTime] = None
    notes: Optional[str] = None
    completed_at: Optional[UtcDateTime] = None
