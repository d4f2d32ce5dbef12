# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Any, Optional

from ganttgrid.color import status_bar_color, status_marker
from ganttgrid.model.layout import (
    DayColumn,
    GanttLayout,
    GanttRow,
    MonthSpan,
    TrackMode,
    UndatedOrder,
    VisibleRange,
)
from ganttgrid.model.schedule_item import ScheduleItem, has_actual_dates, is_dated
from ganttgrid.service.timeline import (
    DEFAULT_DAY_WIDTH,
    DEFAULT_MIN_SPAN_DAYS,
    DEFAULT_PADDING_DAYS,
    day_columns,
    place_bar,
    resolve_range,
)
from ganttgrid.service.viewport import today_offset_px
from ganttgrid.time import date_to_iso_str, date_to_iso_str_optional

logger = logging.getLogger(__name__)


def partition_items(
    items: list[ScheduleItem], undated_order: UndatedOrder = "input"
) -> tuple[list[ScheduleItem], list[ScheduleItem]]:
    """
    Split items into those that can be plotted and those that can only be listed.

    An item is dated when it has both a planned start and a planned end.
    Dated items are sorted by planned start; the sort is stable, so items
    starting on the same day keep their input order. Undated items keep input
    order, or are sorted by label (case-insensitive) when ``undated_order`` is
    "label".
    """
    dated = [item for item in items if is_dated(item)]
    undated = [item for item in items if not is_dated(item)]

    dated.sort(key=lambda item: item["planned_start"] or datetime.date.min)
    if undated_order == "label":
        undated.sort(key=lambda item: item["label"].casefold())

    return dated, undated


def _build_row(
    item: ScheduleItem,
    visible_range: VisibleRange,
    track_mode: TrackMode,
    day_width: int,
) -> GanttRow:
    planned = None
    actual = None
    dated = is_dated(item)

    if dated:
        assert item["planned_start"] is not None and item["planned_end"] is not None
        planned = place_bar(
            item["planned_start"], item["planned_end"], visible_range, day_width
        )
        if track_mode == "dual" and has_actual_dates(item):
            assert item["actual_start"] is not None and item["actual_end"] is not None
            actual = place_bar(
                item["actual_start"], item["actual_end"], visible_range, day_width
            )

    return {
        "item": item,
        "dated": dated,
        "marker": status_marker(item["status"]),
        "bar_color": status_bar_color(item["status"]),
        "planned": planned,
        "actual": actual,
    }


def month_spans(columns: list[DayColumn], day_width: int = DEFAULT_DAY_WIDTH) -> list[MonthSpan]:
    """Group consecutive day columns by calendar month for the header row."""
    spans: list[MonthSpan] = []
    for column in columns:
        value = column["date"]
        if spans and spans[-1]["year"] == value.year and spans[-1]["month"] == value.month:
            spans[-1]["span"] += 1
            spans[-1]["width"] += day_width
            continue
        spans.append(
            {
                "year": value.year,
                "month": value.month,
                "label": value.strftime("%B %Y"),
                "first_index": column["index"],
                "span": 1,
                "width": day_width,
            }
        )
    return spans


def month_label(visible_range: VisibleRange) -> str:
    start = visible_range["start"]
    end = visible_range["end"]
    if (start.year, start.month) == (end.year, end.month):
        return start.strftime("%B %Y")
    return f"{start.strftime('%b')} – {end.strftime('%b %Y')}"


def build_layout(
    items: list[ScheduleItem],
    today: datetime.date,
    track_mode: TrackMode = "dual",
    day_width: int = DEFAULT_DAY_WIDTH,
    padding_days: int = DEFAULT_PADDING_DAYS,
    min_span_days: int = DEFAULT_MIN_SPAN_DAYS,
    undated_order: UndatedOrder = "input",
) -> GanttLayout:
    """
    Lay out a Gantt chart for a batch of items.

    Items are only read. The whole layout is recomputed from the inputs on
    every call, so identical inputs always give identical layouts.

    Args:
        items: Items to lay out
        today: The viewer's local calendar date
        track_mode: "single" draws planned bars only, "dual" adds actual bars
        day_width: Width of one day column in the host's units
        padding_days: Days of margin around the covered dates
        min_span_days: Minimum span of the visible range in days
        undated_order: Ordering policy for items without planned dates

    Returns:
        The complete layout
    """
    visible_range = resolve_range(
        items,
        today,
        track_mode=track_mode,
        padding_days=padding_days,
        min_span_days=min_span_days,
    )
    columns = day_columns(visible_range, today, day_width)
    dated, undated = partition_items(items, undated_order)

    rows = [_build_row(item, visible_range, track_mode, day_width) for item in dated]
    undated_rows = [
        _build_row(item, visible_range, track_mode, day_width) for item in undated
    ]
    logger.debug(
        "Laid out %d dated and %d undated items over %d days",
        len(rows),
        len(undated_rows),
        visible_range["day_count"],
    )

    return {
        "track_mode": track_mode,
        "day_width": day_width,
        "today": today,
        "range": visible_range,
        "columns": columns,
        "months": month_spans(columns, day_width),
        "rows": rows,
        "undated": undated_rows,
        "today_offset": today_offset_px(visible_range, today, day_width),
        "canvas_width": visible_range["day_count"] * day_width,
        "month_label": month_label(visible_range),
    }


def _item_to_dict(item: ScheduleItem) -> dict[str, Any]:
    return {
        "id": item["id"],
        "label": item["label"],
        "status": item["status"],
        "project": item["project"],
        "planned_start": date_to_iso_str_optional(item["planned_start"]),
        "planned_end": date_to_iso_str_optional(item["planned_end"]),
        "actual_start": date_to_iso_str_optional(item["actual_start"]),
        "actual_end": date_to_iso_str_optional(item["actual_end"]),
    }


def _row_to_dict(row: GanttRow) -> dict[str, Any]:
    return {
        "item": _item_to_dict(row["item"]),
        "dated": row["dated"],
        "marker": row["marker"],
        "bar_color": row["bar_color"],
        "planned": row["planned"],
        "actual": row["actual"],
    }


def layout_to_dict(layout: GanttLayout) -> dict[str, Any]:
    """Convert a layout into JSON-compatible values with ISO date strings."""
    visible_range = layout["range"]
    today_offset: Optional[int] = layout["today_offset"]
    return {
        "track_mode": layout["track_mode"],
        "day_width": layout["day_width"],
        "today": date_to_iso_str(layout["today"]),
        "range": {
            "start": date_to_iso_str(visible_range["start"]),
            "end": date_to_iso_str(visible_range["end"]),
            "day_count": visible_range["day_count"],
        },
        "columns": [
            {
                "index": column["index"],
                "date": date_to_iso_str(column["date"]),
                "left": column["left"],
                "is_today": column["is_today"],
                "is_weekend": column["is_weekend"],
            }
            for column in layout["columns"]
        ],
        "months": [dict(month) for month in layout["months"]],
        "rows": [_row_to_dict(row) for row in layout["rows"]],
        "undated": [_row_to_dict(row) for row in layout["undated"]],
        "today_offset": today_offset,
        "canvas_width": layout["canvas_width"],
        "month_label": layout["month_label"],
    }
