# SPDX-License-Identifier: MIT

import logging

logger = logging.getLogger(__name__)

# Neutral colour for statuses outside the known set
DEFAULT_STATUS_COLOR = "grey50"

STATUS_MARKER_COLORS: dict[str, str] = {
    "pending": "yellow",
    "in-progress": "blue",
    "in-review": "dark_orange",
    "done": "green",
    "cancelled": "grey50",
}

# Single-track bars are coloured by status
STATUS_BAR_COLORS: dict[str, str] = {
    "pending": "yellow3",
    "in-progress": "dodger_blue2",
    "in-review": "medium_purple",
    "done": "green3",
    "cancelled": "grey42",
}

# Dual-track bars are coloured by track
PLANNED_BAR_COLOR = "dodger_blue2"
ACTUAL_BAR_COLOR = "spring_green3"

TODAY_COLOR = "dark_orange"
WEEKEND_BACKGROUND = "grey23"

STATUS_MARKER_SYMBOL = "●"


def status_marker(status: str) -> str:
    """Return the marker colour for a status code."""
    color = STATUS_MARKER_COLORS.get(status)
    if color is None:
        logger.debug("No marker colour for status %r, using default", status)
        return DEFAULT_STATUS_COLOR
    return color


def status_bar_color(status: str) -> str:
    return STATUS_BAR_COLORS.get(status, DEFAULT_STATUS_COLOR)
