# SPDX-License-Identifier: MIT

"""Day-grid arithmetic for the Gantt timeline.

The grid is a row of fixed-width columns, one per calendar day of the visible
range. Offsets are expressed in whatever unit the host renders in (pixels for
a browser, character cells for a terminal); only ``day_width`` changes.
"""

import datetime
import logging
import math
from typing import Iterable, Optional

from ganttgrid.model.layout import (
    BarPlacement,
    DayColumn,
    TrackMode,
    VisibleRange,
)
from ganttgrid.model.schedule_item import ScheduleItem
from ganttgrid.time import days_between

logger = logging.getLogger(__name__)

DEFAULT_DAY_WIDTH = 44
DEFAULT_PADDING_DAYS = 7
DEFAULT_MIN_SPAN_DAYS = 60


def _item_dates(item: ScheduleItem, track_mode: TrackMode) -> list[datetime.date]:
    fields: tuple[str, ...] = ("planned_start", "planned_end")
    if track_mode == "dual":
        fields = fields + ("actual_start", "actual_end")
    return [item[field] for field in fields if item[field] is not None]  # type: ignore[literal-required]


def resolve_range(
    items: Iterable[ScheduleItem],
    today: datetime.date,
    track_mode: TrackMode = "dual",
    padding_days: int = DEFAULT_PADDING_DAYS,
    min_span_days: int = DEFAULT_MIN_SPAN_DAYS,
) -> VisibleRange:
    """
    Compute the contiguous day range covering every item date and today.

    The earliest and latest dates (today included) are padded on both sides,
    then the range is widened symmetrically when it spans fewer than
    ``min_span_days`` days. Single-track layouts only consider planned dates.

    Args:
        items: Items to cover
        today: The viewer's local calendar date
        track_mode: "single" or "dual"
        padding_days: Days added before the earliest and after the latest date
        min_span_days: Minimum value of ``end - start`` in days

    Returns:
        The visible range, with its inclusive day count
    """
    earliest = today
    latest = today
    for item in items:
        for value in _item_dates(item, track_mode):
            if value < earliest:
                earliest = value
            if value > latest:
                latest = value

    start = earliest - datetime.timedelta(days=padding_days)
    end = latest + datetime.timedelta(days=padding_days)

    span = days_between(start, end)
    if span < min_span_days:
        extra_days = math.ceil((min_span_days - span) / 2)
        start = start - datetime.timedelta(days=extra_days)
        end = end + datetime.timedelta(days=extra_days)

    logger.debug("Resolved visible range %s to %s", start, end)
    return {"start": start, "end": end, "day_count": days_between(start, end) + 1}


def day_index(value: datetime.date, visible_range: VisibleRange) -> int:
    """Column index of a date; negative or past the last column when outside."""
    return days_between(visible_range["start"], value)


def to_pixel_offset(index: int, day_width: int = DEFAULT_DAY_WIDTH) -> int:
    return index * day_width


def pixel_offset_to_date(
    offset: int, visible_range: VisibleRange, day_width: int = DEFAULT_DAY_WIDTH
) -> datetime.date:
    """Date of the column containing ``offset``."""
    return visible_range["start"] + datetime.timedelta(days=offset // day_width)


def day_columns(
    visible_range: VisibleRange,
    today: datetime.date,
    day_width: int = DEFAULT_DAY_WIDTH,
) -> list[DayColumn]:
    columns: list[DayColumn] = []
    for index in range(visible_range["day_count"]):
        value = visible_range["start"] + datetime.timedelta(days=index)
        columns.append(
            {
                "index": index,
                "date": value,
                "left": to_pixel_offset(index, day_width),
                "is_today": value == today,
                "is_weekend": value.weekday() >= 5,
            }
        )
    return columns


def place_bar(
    start: datetime.date,
    end: datetime.date,
    visible_range: VisibleRange,
    day_width: int = DEFAULT_DAY_WIDTH,
) -> Optional[BarPlacement]:
    """
    Place a bar covering ``start`` through ``end`` inclusive.

    Both ends are clamped to the visible columns. Returns None when nothing
    is left to draw: the interval lies entirely before or after the range, or
    ``end`` falls before ``start``.
    """
    last_index = visible_range["day_count"] - 1
    clamped_start = max(0, day_index(start, visible_range))
    clamped_end = min(last_index, day_index(end, visible_range))

    if clamped_end < clamped_start:
        return None

    return {
        "left": to_pixel_offset(clamped_start, day_width),
        "width": (clamped_end - clamped_start + 1) * day_width,
    }
