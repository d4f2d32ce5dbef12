# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ganttgrid.color import STATUS_MARKER_SYMBOL, status_marker
from ganttgrid.model.schedule_item import ScheduleItem
from ganttgrid.time import date_to_display_str_optional
from ganttgrid.view.views.header import header

DEFAULT_COLUMNS = [
    "id",
    "status",
    "label",
    "project",
    "planned_start",
    "planned_end",
    "actual_start",
    "actual_end",
]


def items_view(
    console: Console,
    items: list[ScheduleItem],
    columns: list[str] = DEFAULT_COLUMNS,
) -> None:
    header(console, "items")

    items_table = Table(box=box.SIMPLE)
    for column in columns:
        items_table.add_column(column)

    for item in items:
        row = []
        for column in columns:
            if column == "status":
                color = status_marker(item["status"])
                row.append(f"[{color}]{STATUS_MARKER_SYMBOL}[/{color}] {escape(item['status'])}")
            elif column in ("planned_start", "planned_end", "actual_start", "actual_end"):
                row.append(date_to_display_str_optional(item[column]) or "")  # type: ignore[literal-required]
            else:
                value = item.get(column)
                row.append("" if value is None else escape(str(value)))
        items_table.add_row(*row)

    console.print(items_table)


def item_view(console: Console, item: ScheduleItem) -> None:
    """Show one item with the command that edits it."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for column in DEFAULT_COLUMNS:
        if column in ("planned_start", "planned_end", "actual_start", "actual_end"):
            value = date_to_display_str_optional(item[column]) or ""  # type: ignore[literal-required]
        else:
            raw_value = item.get(column)
            value = "" if raw_value is None else escape(str(raw_value))
        table.add_row(column, value)

    console.print(table)
    console.print(f"[dim]Edit with: ganttgrid item edit {escape(str(item['id']))} ...[/dim]\n")
