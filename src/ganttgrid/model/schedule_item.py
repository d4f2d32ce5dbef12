# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Any, Optional, TypedDict

from ganttgrid.model.status import normalize_status
from ganttgrid.time import calendar_date_from_value

logger = logging.getLogger(__name__)

ItemId = int | str


class ScheduleItem(TypedDict):
    id: ItemId
    label: str
    status: str
    project: Optional[str]
    planned_start: Optional[datetime.date]
    planned_end: Optional[datetime.date]
    actual_start: Optional[datetime.date]
    actual_end: Optional[datetime.date]


DATE_FIELDS = ("planned_start", "planned_end", "actual_start", "actual_end")

# Column names of the dashboard's tasks table
BACKEND_FIELD_NAMES = {
    "label": "titulo",
    "status": "estatus",
    "planned_start": "fecha_inicio",
    "planned_end": "fecha_fin",
    "actual_start": "fecha_inicio_real",
    "actual_end": "fecha_fin_real",
}


def normalize_item_id(raw_id: Any) -> ItemId:
    """Ids made only of digits are stored as integers; anything else as text."""
    if isinstance(raw_id, int):
        return raw_id
    text_id = str(raw_id).strip()
    if text_id.isdecimal():
        return int(text_id)
    return text_id


def is_dated(item: ScheduleItem) -> bool:
    return item["planned_start"] is not None and item["planned_end"] is not None


def has_actual_dates(item: ScheduleItem) -> bool:
    return item["actual_start"] is not None and item["actual_end"] is not None


def schedule_item_from_row(row: dict[str, Any]) -> ScheduleItem:
    """
    Build a ScheduleItem from a task row.

    Accepts either the dashboard backend's column names (titulo, estatus,
    fecha_inicio, ...) with an optional joined ``proyectos`` record, or rows
    that already use this package's field names. Dates that cannot be parsed
    are logged and treated as missing, which leaves the item undated instead
    of failing the whole batch.

    Raises:
        ValueError: If the row has no id
    """
    if row.get("id") is None or str(row["id"]).strip() == "":
        raise ValueError("Task row has no id")

    def field(name: str) -> Any:
        if name in row:
            return row[name]
        return row.get(BACKEND_FIELD_NAMES[name])

    label = field("label")
    project = row.get("project")
    if project is None and isinstance(row.get("proyectos"), dict):
        project = row["proyectos"].get("nombre")

    dates: dict[str, Optional[datetime.date]] = {}
    for date_field in DATE_FIELDS:
        raw_value = field(date_field)
        try:
            dates[date_field] = calendar_date_from_value(raw_value)
        except ValueError:
            logger.warning(
                "Ignoring unparseable %s %r on task %s", date_field, raw_value, row["id"]
            )
            dates[date_field] = None

    return {
        "id": normalize_item_id(row["id"]),
        "label": str(label) if label is not None else "",
        "status": normalize_status(field("status")),
        "project": project,
        "planned_start": dates["planned_start"],
        "planned_end": dates["planned_end"],
        "actual_start": dates["actual_start"],
        "actual_end": dates["actual_end"],
    }
