# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional

import typer

from ganttgrid.log import LOG_LEVELS
from ganttgrid.model.layout import TRACK_MODES, UNDATED_ORDERS
from ganttgrid.model.schedule_item import ItemId, normalize_item_id
from ganttgrid.model.status import STATUS_CODES, normalize_status
from ganttgrid.time import parse_calendar_date, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[datetime.date]:
    """
    Parse a calendar date argument.

    Accepts YYYY-MM-DD (a trailing time portion is ignored), today/t,
    yesterday/y, tomorrow/o, or a day offset from today like 1 or -1.
    """
    if date_param is None:
        return None

    value = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}", value):
        try:
            return parse_calendar_date(value)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date {value!r}: {e}")

    if re.match(r"^-?\d+$", value):
        return today_local() + datetime.timedelta(days=int(value))

    if value == "today" or value == "t":
        return today_local()
    if value == "yesterday" or value == "y":
        return today_local() - datetime.timedelta(days=1)
    if value == "tomorrow" or value == "o":
        return today_local() + datetime.timedelta(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_item_id(id_param: str) -> ItemId:
    if id_param.strip() == "":
        raise typer.BadParameter("Item id must not be empty")
    return normalize_item_id(id_param)


def parse_status(status_param: Optional[str]) -> Optional[str]:
    if status_param is None:
        return None
    status = normalize_status(status_param)
    if status not in STATUS_CODES:
        raise typer.BadParameter(
            f"Status must be one of {', '.join(STATUS_CODES)}, got {status_param!r}"
        )
    return status


def parse_track_mode(track_mode_param: Optional[str]) -> Optional[str]:
    if track_mode_param is None:
        return None
    if track_mode_param not in TRACK_MODES:
        raise typer.BadParameter(
            f"Track mode must be one of {', '.join(TRACK_MODES)}, got {track_mode_param!r}"
        )
    return track_mode_param


def parse_undated_order(order_param: Optional[str]) -> Optional[str]:
    if order_param is None:
        return None
    if order_param not in UNDATED_ORDERS:
        raise typer.BadParameter(
            f"Undated order must be one of {', '.join(UNDATED_ORDERS)}, got {order_param!r}"
        )
    return order_param


def parse_log_level(level_param: Optional[str]) -> Optional[str]:
    if level_param is None:
        return None
    level = level_param.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(LOG_LEVELS)}, got {level_param!r}"
        )
    return level
