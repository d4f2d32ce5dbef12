# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from ganttgrid.view.state import get_show_header


def header(console: Console, view_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        view_name: The name of the view being shown
        sub_header: Optional line shown under the view name
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]ganttgrid[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[sandy_brown]{view_name}[/sandy_brown]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[plum1]{sub_header}[/plum1]", (0, 1)))
