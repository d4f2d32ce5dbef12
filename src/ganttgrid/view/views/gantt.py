# SPDX-License-Identifier: MIT

from typing import Callable, Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from ganttgrid.color import (
    ACTUAL_BAR_COLOR,
    PLANNED_BAR_COLOR,
    STATUS_MARKER_SYMBOL,
    TODAY_COLOR,
    WEEKEND_BACKGROUND,
)
from ganttgrid.model.layout import BarPlacement, DayColumn, GanttLayout, GanttRow
from ganttgrid.model.schedule_item import ItemId, ScheduleItem, has_actual_dates
from ganttgrid.service.viewport import Viewport
from ganttgrid.time import date_to_iso_str
from ganttgrid.view.views.header import header

DAY_LETTERS = ["M", "T", "W", "T", "F", "S", "S"]

BAR_CHAR = "█"
TODAY_CHAR = "│"


def gantt_view(
    console: Console,
    layout: GanttLayout,
    viewport: Viewport,
    left_column_width: int = 32,
    selected_id: Optional[ItemId] = None,
    on_edit_item: Optional[Callable[[ScheduleItem], None]] = None,
) -> None:
    """
    Display a laid out Gantt chart in the terminal.

    Only the slice of the chart inside the viewport's window is printed. In
    dual-track layouts each dated item gets a planned line and an actual line.

    Args:
        console: Console to print to
        layout: Layout computed with the terminal's day width
        viewport: Scroll state; its day width must match the layout's
        left_column_width: Width of the item name column
        selected_id: Item to hand to ``on_edit_item`` after rendering
        on_edit_item: Callback invoked with the selected item
    """
    header(console, "gantt", layout["month_label"])

    visible_range = layout["range"]
    track_label = "planned + actual" if layout["track_mode"] == "dual" else "planned"
    console.print(
        f"\n[bold]{date_to_iso_str(visible_range['start'])} to "
        f"{date_to_iso_str(visible_range['end'])}[/bold] ({track_label})\n"
    )

    if not layout["rows"] and not layout["undated"]:
        console.print("[dim]No items to display[/dim]\n")
        return

    window = viewport.visible_window(layout["canvas_width"])

    chart_elements: list[Text] = []
    chart_elements.append(_build_month_row(layout, window, left_column_width))
    chart_elements.append(_build_day_row(layout, window, left_column_width))
    chart_elements.append(_build_weekday_row(layout, window, left_column_width))
    chart_elements.append(
        Text("─" * (left_column_width + window[1] - window[0]), style="dim")
    )

    for row in layout["rows"]:
        chart_elements.extend(_build_item_rows(row, layout, window, left_column_width))

    if layout["undated"]:
        chart_elements.append(
            Text("Undated".ljust(left_column_width), style="bold dim")
        )
        for row in layout["undated"]:
            line = _left_column(row, left_column_width, dim=True)
            line.append("no start/end dates", style="italic dim")
            chart_elements.append(line)

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))

    if selected_id is not None and on_edit_item is not None:
        for row in layout["rows"] + layout["undated"]:
            if row["item"]["id"] == selected_id:
                on_edit_item(row["item"])
                break


def _left_column(row: GanttRow, left_column_width: int, dim: bool = False) -> Text:
    item = row["item"]
    text = Text()
    text.append(f"{str(item['id']):>4} ")
    text.append(STATUS_MARKER_SYMBOL, style=row["marker"])
    text.append(" ")

    label = item["label"] or "[no label]"
    available = left_column_width - 8
    if len(label) > available:
        label = label[: available - 3] + "..."
    else:
        label = label.ljust(available)
    text.append(label, style="dim" if dim else "white")
    text.append(" ")
    return text


def _build_item_rows(
    row: GanttRow,
    layout: GanttLayout,
    window: tuple[int, int],
    left_column_width: int,
) -> list[Text]:
    if layout["track_mode"] == "single":
        line = _left_column(row, left_column_width)
        line.append_text(_build_track(row["planned"], row["bar_color"], layout, window))
        return [line]

    planned_line = _left_column(row, left_column_width)
    planned_line.append_text(
        _build_track(row["planned"], PLANNED_BAR_COLOR, layout, window)
    )

    actual_line = Text(" " * left_column_width)
    if has_actual_dates(row["item"]):
        actual_line.append_text(
            _build_track(row["actual"], ACTUAL_BAR_COLOR, layout, window)
        )
    else:
        actual_line.append("no actual dates", style="italic dim")
    return [planned_line, actual_line]


def _build_track(
    bar: Optional[BarPlacement],
    color: str,
    layout: GanttLayout,
    window: tuple[int, int],
) -> Text:
    """Build one track line: the bar, the today marker and weekend shading."""
    day_width = layout["day_width"]
    columns = layout["columns"]
    today_offset = layout["today_offset"]

    track = Text()
    for x in range(window[0], window[1]):
        column = columns[x // day_width]
        background = f" on {WEEKEND_BACKGROUND}" if column["is_weekend"] else ""
        if bar is not None and bar["left"] <= x < bar["left"] + bar["width"]:
            track.append(BAR_CHAR, style=color)
        elif x == today_offset:
            track.append(TODAY_CHAR, style=TODAY_COLOR + background)
        elif background:
            track.append(" ", style=background.strip())
        else:
            track.append(" ")
    return track


def _build_month_row(
    layout: GanttLayout, window: tuple[int, int], left_column_width: int
) -> Text:
    cells = [" "] * layout["canvas_width"]
    for month in layout["months"]:
        left = month["first_index"] * layout["day_width"]
        label = month["label"][: month["width"]].ljust(month["width"])
        cells[left : left + month["width"]] = list(label)

    row = Text(" " * left_column_width)
    row.append("".join(cells[window[0] : window[1]]), style="bold")
    return row


def _build_day_row(
    layout: GanttLayout, window: tuple[int, int], left_column_width: int
) -> Text:
    row = Text("Item".ljust(left_column_width), style="dim")
    day_width = layout["day_width"]
    for column in layout["columns"]:
        label = str(column["date"].day).rjust(day_width)[-day_width:]
        _append_clipped(row, label, column["left"], window, _column_style(column))
    return row


def _build_weekday_row(
    layout: GanttLayout, window: tuple[int, int], left_column_width: int
) -> Text:
    row = Text(" " * left_column_width)
    day_width = layout["day_width"]
    for column in layout["columns"]:
        letter = DAY_LETTERS[column["date"].weekday()]
        label = letter.rjust(day_width)[-day_width:]
        style = f"bold {TODAY_COLOR}" if column["is_today"] else "dim"
        if column["is_weekend"] and not column["is_today"]:
            style += f" on {WEEKEND_BACKGROUND}"
        _append_clipped(row, label, column["left"], window, style)
    return row


def _column_style(column: DayColumn) -> str:
    if column["is_today"]:
        return f"bold black on {TODAY_COLOR}"
    if column["is_weekend"]:
        return f"cyan on {WEEKEND_BACKGROUND}"
    return "bold cyan"


def _append_clipped(
    row: Text, label: str, left: int, window: tuple[int, int], style: str
) -> None:
    """Append the part of a column label that falls inside the window."""
    start = max(left, window[0])
    end = min(left + len(label), window[1])
    if start >= end:
        return
    row.append(label[start - left : end - left], style=style)
