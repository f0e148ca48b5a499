"""Housekeeping task status handling."""

from datetime import datetime
from typing import Any

from staydesk.models.enums import TaskStatus
from staydesk.models.housekeeping import HousekeepingTask


def apply_completion(task: HousekeepingTask, values: dict[str, Any], now: datetime) -> dict[str, Any]:
    """Stamp or clear ``completed_at`` when a patch changes the task status."""
    status = values.get("status")
    if status is None or status == task.status:
        return values

    values = dict(values)
    if status == TaskStatus.COMPLETED:
        if values.get("completed_at") is None:
            values["completed_at"] = now
    else:
        values["completed_at"] = None
    return values
