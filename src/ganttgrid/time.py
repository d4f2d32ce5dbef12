# SPDX-License-Identifier: MIT

"""Calendar-date helpers.

Every place where a date crosses the string boundary goes through
``parse_calendar_date``. The backend interchanges dates as ISO-8601 date or
date-time strings; only the date portion is read, and it is taken as a local
calendar date as written. No UTC conversion is ever applied, so
``"2025-01-10T23:30:00-06:00"`` is January 10th no matter where the viewer is.
"""

import datetime
import re
from typing import Any, Optional

from dateutil import tz
from dateutil.parser import isoparse


def today_local() -> datetime.date:
    return datetime.datetime.now(tz.tzlocal()).date()


def parse_calendar_date(iso_string: str) -> datetime.date:
    """Parse the date portion of an ISO-8601 date or date-time string.

    Raises:
        ValueError: If the string has no parseable ``YYYY-MM-DD`` portion
    """
    date_portion = iso_string.strip().split("T")[0].split(" ")[0]
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}", date_portion):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {iso_string!r}")
    return isoparse(date_portion).date()


def parse_calendar_date_optional(iso_string: Optional[str]) -> Optional[datetime.date]:
    if iso_string is None:
        return None
    return parse_calendar_date(iso_string)


def calendar_date_from_value(value: Any) -> Optional[datetime.date]:
    """Coerce a stored value into a calendar date.

    YAML and JSON loaders hand back strings, ``datetime.date`` or
    ``datetime.datetime`` values depending on quoting. Date-times keep their
    own calendar fields and are not converted between zones.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return parse_calendar_date(str(value))


def date_to_iso_str(value: datetime.date) -> str:
    return value.isoformat()


def date_to_iso_str_optional(value: Optional[datetime.date]) -> Optional[str]:
    if value is None:
        return None
    return date_to_iso_str(value)


def date_to_display_str(value: datetime.date) -> str:
    return value.strftime("%Y-%m-%d %a")


def date_to_display_str_optional(value: Optional[datetime.date]) -> Optional[str]:
    if value is None:
        return None
    return date_to_display_str(value)


def days_between(start: datetime.date, end: datetime.date) -> int:
    """Signed number of calendar days from ``start`` to ``end``."""
    return (end - start).days
