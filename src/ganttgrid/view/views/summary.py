# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from ganttgrid.service.progress import ScheduleSummary
from ganttgrid.view.views.header import header


def summary_view(console: Console, summary: ScheduleSummary) -> None:
    header(console, "summary")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    table.add_row(
        "Progress",
        f"{summary['progress_percentage']:.0f}% "
        f"[dim]({summary['completed']} of {summary['total']} items)[/dim]",
    )

    deviation = summary["deviation_days"]
    if deviation > 0:
        deviation_text = f"[red]+{deviation} days[/red] [dim]accumulated delay[/dim]"
    elif deviation < 0:
        deviation_text = f"[green]{deviation} days[/green] [dim]accumulated lead[/dim]"
    else:
        deviation_text = "0 days [dim]on schedule[/dim]"
    table.add_row("Deviation", deviation_text)

    delayed = summary["delayed"]
    delayed_style = "red" if delayed > 0 else "white"
    table.add_row(
        "Delayed",
        f"[{delayed_style}]{delayed}[/{delayed_style}] "
        "[dim]unfinished past planned end[/dim]",
    )

    console.print()
    console.print(table)
    console.print()
