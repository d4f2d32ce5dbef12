# SPDX-License-Identifier: MIT

import datetime
import json
import logging
from pathlib import Path
from typing import Annotated, Optional, cast

import typer
from rich.console import Console
from rich.markup import escape

from ganttgrid import configuration
from ganttgrid.model.layout import GanttLayout, TrackMode, UndatedOrder
from ganttgrid.model.schedule_item import ScheduleItem
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.repository.schedule_item import SCHEDULE_ITEM_REPO
from ganttgrid.service.gantt import build_layout, layout_to_dict
from ganttgrid.service.progress import summarize
from ganttgrid.service.viewport import Viewport
from ganttgrid.terminal.parse import (
    parse_date,
    parse_item_id,
    parse_track_mode,
    parse_undated_order,
)
from ganttgrid.time import today_local
from ganttgrid.view.views.gantt import gantt_view
from ganttgrid.view.views.item import item_view
from ganttgrid.view.views.summary import summary_view

logger = logging.getLogger(__name__)


def _load_items(project: Optional[str]) -> list[ScheduleItem]:
    items = SCHEDULE_ITEM_REPO.get_all_items()
    if project is not None:
        items = [item for item in items if item["project"] == project]
    return items


def _build_layout(
    items: list[ScheduleItem],
    today: datetime.date,
    track_mode: Optional[str],
    day_width: int,
    undated_order: Optional[str],
) -> GanttLayout:
    config = CONFIGURATION_REPO.get_config()
    return build_layout(
        items,
        today,
        track_mode=cast(TrackMode, track_mode or config["track_mode"]),
        day_width=day_width,
        padding_days=config["padding_days"],
        min_span_days=config["min_span_days"],
        undated_order=cast(UndatedOrder, undated_order or config["undated_order"]),
    )


def gantt(
    track_mode: Annotated[
        Optional[str],
        typer.Option(
            "--track-mode",
            "-m",
            parser=parse_track_mode,
            help="single (planned only) or dual (planned and actual)",
        ),
    ] = None,
    weeks: Annotated[
        int,
        typer.Option(
            "--weeks",
            "-w",
            help="Page the view by this many weeks from today (negative pages back)",
        ),
    ] = 0,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", help="Only show items of this project"),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", "-dw", min=1, help="Character cells per day"),
    ] = None,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width",
            "-lw",
            min=configuration.MIN_LEFT_COLUMN_WIDTH,
            help="Width of the item column",
        ),
    ] = None,
    undated_order: Annotated[
        Optional[str],
        typer.Option(
            "--undated-order",
            parser=parse_undated_order,
            help="Order of undated items: input or label",
        ),
    ] = None,
    today: Annotated[
        Optional[datetime.date],
        typer.Option(
            "--today",
            parser=parse_date,
            help="Date to treat as today (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
    open_id: Annotated[
        Optional[str],
        typer.Option("--open", "-o", help="Show the details of this item below the chart"),
    ] = None,
) -> None:
    """Display the items on a Gantt timeline centred on today."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    resolved_day_width = day_width or config["terminal_day_width"]
    left_column_width = left_width or config["left_column_width"]
    resolved_today = today or today_local()

    layout = _build_layout(
        _load_items(project),
        resolved_today,
        track_mode,
        resolved_day_width,
        undated_order,
    )

    viewport = Viewport(
        viewport_width=max(resolved_day_width, console.width - left_column_width),
        day_width=resolved_day_width,
    )
    viewport.auto_center(layout["today_offset"])
    if weeks != 0:
        viewport.scroll_by_weeks(weeks)

    def on_edit_item(item: ScheduleItem) -> None:
        item_view(console, item)

    gantt_view(
        console,
        layout,
        viewport,
        left_column_width=left_column_width,
        selected_id=parse_item_id(open_id) if open_id is not None else None,
        on_edit_item=on_edit_item,
    )


def layout(
    track_mode: Annotated[
        Optional[str],
        typer.Option(
            "--track-mode",
            "-m",
            parser=parse_track_mode,
            help="single (planned only) or dual (planned and actual)",
        ),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", help="Only lay out items of this project"),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", "-dw", min=1, help="Pixels per day"),
    ] = None,
    undated_order: Annotated[
        Optional[str],
        typer.Option(
            "--undated-order",
            parser=parse_undated_order,
            help="Order of undated items: input or label",
        ),
    ] = None,
    today: Annotated[
        Optional[datetime.date],
        typer.Option(
            "--today",
            parser=parse_date,
            help="Date to treat as today (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the layout to this file"),
    ] = None,
) -> None:
    """Print the computed timeline layout as JSON for other front ends."""
    config = CONFIGURATION_REPO.get_config()

    computed_layout = _build_layout(
        _load_items(project),
        today or today_local(),
        track_mode,
        day_width or config["day_width"],
        undated_order,
    )
    serialized = json.dumps(layout_to_dict(computed_layout), indent=2, ensure_ascii=False)

    if output is None:
        typer.echo(serialized)
        return

    output.write_text(serialized + "\n", encoding="utf-8")
    logger.info("Wrote layout to %s", output)
    Console().print(f"[green]Layout written to {escape(str(output))}[/green]")


def summary(
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", help="Only summarize items of this project"),
    ] = None,
    today: Annotated[
        Optional[datetime.date],
        typer.Option(
            "--today",
            parser=parse_date,
            help="Date to treat as today (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
) -> None:
    """Show progress and schedule deviation."""
    summary_view(Console(), summarize(_load_items(project), today or today_local()))
