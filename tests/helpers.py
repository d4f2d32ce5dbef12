import datetime
from typing import Optional

from ganttgrid.model.schedule_item import ItemId, ScheduleItem


def make_item(
    id: ItemId,
    planned_start: Optional[str] = None,
    planned_end: Optional[str] = None,
    actual_start: Optional[str] = None,
    actual_end: Optional[str] = None,
    label: Optional[str] = None,
    status: str = "pending",
    project: Optional[str] = None,
) -> ScheduleItem:
    def as_date(value: Optional[str]) -> Optional[datetime.date]:
        return datetime.date.fromisoformat(value) if value is not None else None

    return {
        "id": id,
        "label": label if label is not None else f"item {id}",
        "status": status,
        "project": project,
        "planned_start": as_date(planned_start),
        "planned_end": as_date(planned_end),
        "actual_start": as_date(actual_start),
        "actual_end": as_date(actual_end),
    }
