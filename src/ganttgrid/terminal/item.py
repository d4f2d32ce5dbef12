# SPDX-License-Identifier: MIT

import datetime
import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from ganttgrid.model.schedule_item import ScheduleItem, schedule_item_from_row
from ganttgrid.repository.schedule_item import SCHEDULE_ITEM_REPO
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.parse import parse_date, parse_item_id, parse_status
from ganttgrid.view.views.item import item_view, items_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _fail(message: str) -> None:
    Console(stderr=True).print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.command("list, ls")
def list_items(
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", help="Filter items by project"),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", parser=parse_status, help="Filter items by status"),
    ] = None,
) -> None:
    items = SCHEDULE_ITEM_REPO.get_all_items()
    if project is not None:
        items = [item for item in items if item["project"] == project]
    if status is not None:
        items = [item for item in items if item["status"] == status]
    items_view(Console(), items)


@app.command("add, a")
def add(
    label: Annotated[str, typer.Argument(help="Item name")],
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", parser=parse_status, help="Status code"),
    ] = None,
    project: Annotated[
        Optional[str], typer.Option("--project", "-p", help="Parent project name")
    ] = None,
    planned_start: Annotated[
        Optional[datetime.date],
        typer.Option("--start", parser=parse_date, help=f"Planned start ({DATE_HELP})"),
    ] = None,
    planned_end: Annotated[
        Optional[datetime.date],
        typer.Option("--end", parser=parse_date, help=f"Planned end ({DATE_HELP})"),
    ] = None,
    actual_start: Annotated[
        Optional[datetime.date],
        typer.Option("--actual-start", parser=parse_date, help=f"Actual start ({DATE_HELP})"),
    ] = None,
    actual_end: Annotated[
        Optional[datetime.date],
        typer.Option("--actual-end", parser=parse_date, help=f"Actual end ({DATE_HELP})"),
    ] = None,
) -> None:
    """Add an item to the local store."""
    id = SCHEDULE_ITEM_REPO.save_new_item(
        label=label,
        status=status or "pending",
        project=project,
        planned_start=planned_start,
        planned_end=planned_end,
        actual_start=actual_start,
        actual_end=actual_end,
    )
    Console().print(f"Added item [bold]{escape(str(id))}[/bold]")


@app.command("edit, e")
def edit(
    id: Annotated[str, typer.Argument(help="Item id")],
    label: Annotated[Optional[str], typer.Option("--label", "-l", help="Item name")] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", parser=parse_status, help="Status code"),
    ] = None,
    project: Annotated[
        Optional[str], typer.Option("--project", "-p", help="Parent project name")
    ] = None,
    planned_start: Annotated[
        Optional[datetime.date],
        typer.Option("--start", parser=parse_date, help=f"Planned start ({DATE_HELP})"),
    ] = None,
    planned_end: Annotated[
        Optional[datetime.date],
        typer.Option("--end", parser=parse_date, help=f"Planned end ({DATE_HELP})"),
    ] = None,
    actual_start: Annotated[
        Optional[datetime.date],
        typer.Option("--actual-start", parser=parse_date, help=f"Actual start ({DATE_HELP})"),
    ] = None,
    actual_end: Annotated[
        Optional[datetime.date],
        typer.Option("--actual-end", parser=parse_date, help=f"Actual end ({DATE_HELP})"),
    ] = None,
    remove_project: Annotated[
        bool, typer.Option("--remove-project", help="Clear the project")
    ] = False,
    remove_planned: Annotated[
        bool, typer.Option("--remove-planned", help="Clear both planned dates")
    ] = False,
    remove_actual: Annotated[
        bool, typer.Option("--remove-actual", help="Clear both actual dates")
    ] = False,
) -> None:
    """Change fields of an item."""
    try:
        SCHEDULE_ITEM_REPO.modify_item(
            parse_item_id(id),
            label=label,
            status=status,
            project=project,
            planned_start=planned_start,
            planned_end=planned_end,
            actual_start=actual_start,
            actual_end=actual_end,
            remove_project=remove_project,
            remove_planned_start=remove_planned,
            remove_planned_end=remove_planned,
            remove_actual_start=remove_actual,
            remove_actual_end=remove_actual,
        )
    except ValueError as e:
        _fail(str(e))
    item_view(Console(), SCHEDULE_ITEM_REPO.get_item(parse_item_id(id)))


@app.command("delete, d")
def delete(id: Annotated[str, typer.Argument(help="Item id")]) -> None:
    """Remove an item from the local store."""
    try:
        SCHEDULE_ITEM_REPO.delete_item(parse_item_id(id))
    except ValueError as e:
        _fail(str(e))
    Console().print(f"Deleted item [bold]{escape(id)}[/bold]")


def _read_rows(path: Path) -> list[dict[str, Any]]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise typer.BadParameter(f"Cannot read {path}: {e}")

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = load(text, Loader=Loader)
    except (json.JSONDecodeError, YAMLError) as e:
        raise typer.BadParameter(f"Cannot parse {path}: {e}")

    # Accept a bare list or an export wrapped as {"items": [...]} / {"data": [...]}
    if isinstance(data, dict):
        data = data.get("items", data.get("data"))
    if not isinstance(data, list):
        raise typer.BadParameter(f"{path} does not contain a list of task rows")
    return data


@app.command("import, im")
def import_items(
    path: Annotated[Path, typer.Argument(help="JSON or YAML file of task rows")],
) -> None:
    """Import task rows exported from the dashboard backend."""
    items: list[ScheduleItem] = []
    skipped = 0
    for row in _read_rows(path):
        if not isinstance(row, dict):
            skipped += 1
            continue
        try:
            items.append(schedule_item_from_row(row))
        except ValueError as e:
            logger.warning("Skipping row: %s", e)
            skipped += 1

    added, replaced = SCHEDULE_ITEM_REPO.import_items(items)
    Console().print(
        f"Imported [bold]{added}[/bold] new and [bold]{replaced}[/bold] updated items"
        + (f", skipped {skipped}" if skipped else "")
    )
