# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from ganttgrid.log import configure_logging
from ganttgrid.terminal import configuration, item
from ganttgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from ganttgrid.terminal.parse import parse_log_level
from ganttgrid.terminal.view import gantt, layout, summary
from ganttgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="ganttgrid - Project schedules on a day grid",
    no_args_is_help=True,
)
app.command(name="gantt, g")(gantt)
app.command(name="layout, ly")(layout)
app.command(name="summary, s")(summary)
app.add_typer(item.app, name="item, i", help="Manage the local copy of task rows")
app.add_typer(configuration.app, name="config, c", help="View and change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            parser=parse_log_level,
            help="Override the configured log level for this run",
        ),
    ] = None,
) -> None:
    """
    ganttgrid - Project schedules on a day grid

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if log_level is not None:
        configure_logging(log_level)


def run() -> None:
    app()
