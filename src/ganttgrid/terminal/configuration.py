# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ganttgrid import configuration
from ganttgrid.log import configure_logging
from ganttgrid.model.layout import TrackMode, UndatedOrder
from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.terminal.custom_typer import AliasedTyperGroup
from ganttgrid.terminal.parse import (
    parse_log_level,
    parse_track_mode,
    parse_undated_order,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("data_path", escape(str(configuration.DATA_PATH)))
    table.add_row("day_width", str(config["day_width"]))
    table.add_row("terminal_day_width", str(config["terminal_day_width"]))
    table.add_row("padding_days", str(config["padding_days"]))
    table.add_row("min_span_days", str(config["min_span_days"]))
    table.add_row("track_mode", config["track_mode"])
    table.add_row("undated_order", config["undated_order"])
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set_config(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Print the view header"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding items.yaml"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", help="Pixels per day in exported layouts"),
    ] = None,
    terminal_day_width: Annotated[
        Optional[int],
        typer.Option("--terminal-day-width", help="Character cells per day"),
    ] = None,
    padding_days: Annotated[
        Optional[int],
        typer.Option("--padding-days", help="Days of margin around item dates"),
    ] = None,
    min_span_days: Annotated[
        Optional[int],
        typer.Option("--min-span-days", help="Minimum days shown"),
    ] = None,
    track_mode: Annotated[
        Optional[str],
        typer.Option("--track-mode", parser=parse_track_mode, help="single or dual"),
    ] = None,
    undated_order: Annotated[
        Optional[str],
        typer.Option("--undated-order", parser=parse_undated_order, help="input or label"),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            min=configuration.MIN_LEFT_COLUMN_WIDTH,
            help="Width of the item column",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", parser=parse_log_level, help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            data_path=data_path,
            remove_data_path=remove_data_path,
            day_width=day_width,
            terminal_day_width=terminal_day_width,
            padding_days=padding_days,
            min_span_days=min_span_days,
            track_mode=cast(Optional[TrackMode], track_mode),
            undated_order=cast(Optional[UndatedOrder], undated_order),
            left_column_width=left_column_width,
            log_level=log_level,
        )
    except ValueError as e:
        Console(stderr=True).print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if log_level is not None:
        configure_logging(log_level)
    view()
