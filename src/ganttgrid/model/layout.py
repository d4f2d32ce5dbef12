# SPDX-License-Identifier: MIT

import datetime
from typing import Literal, Optional, TypedDict

from ganttgrid.model.schedule_item import ScheduleItem

TrackMode = Literal["single", "dual"]
UndatedOrder = Literal["input", "label"]

TRACK_MODES: tuple[TrackMode, ...] = ("single", "dual")
UNDATED_ORDERS: tuple[UndatedOrder, ...] = ("input", "label")


class VisibleRange(TypedDict):
    start: datetime.date
    end: datetime.date
    day_count: int


class DayColumn(TypedDict):
    index: int
    date: datetime.date
    left: int
    is_today: bool
    is_weekend: bool


class MonthSpan(TypedDict):
    year: int
    month: int
    label: str
    first_index: int
    span: int
    width: int


class BarPlacement(TypedDict):
    left: int
    width: int


class GanttRow(TypedDict):
    item: ScheduleItem
    dated: bool
    marker: str
    bar_color: str
    planned: Optional[BarPlacement]
    actual: Optional[BarPlacement]


class GanttLayout(TypedDict):
    track_mode: TrackMode
    day_width: int
    today: datetime.date
    range: VisibleRange
    columns: list[DayColumn]
    months: list[MonthSpan]
    rows: list[GanttRow]
    undated: list[GanttRow]
    today_offset: Optional[int]
    canvas_width: int
    month_label: str
