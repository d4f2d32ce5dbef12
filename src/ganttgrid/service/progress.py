# SPDX-License-Identifier: MIT

import datetime
from typing import TypedDict

from ganttgrid.model.schedule_item import ScheduleItem
from ganttgrid.time import days_between


class ScheduleSummary(TypedDict):
    total: int
    completed: int
    progress_percentage: float
    deviation_days: int
    delayed: int


def summarize(items: list[ScheduleItem], today: datetime.date) -> ScheduleSummary:
    """
    Summarize schedule progress and slippage.

    Deviation is accumulated over items with a planned end. Finished items
    (those with an actual end) contribute actual end minus planned end, which
    is negative when they finished early. Unfinished items past their planned
    end contribute the days elapsed since it and count as delayed.
    """
    total = len(items)
    completed = len([item for item in items if item["status"] == "done"])

    deviation_days = 0
    delayed = 0
    for item in items:
        planned_end = item["planned_end"]
        if planned_end is None:
            continue
        actual_end = item["actual_end"]
        if actual_end is not None:
            deviation_days += days_between(planned_end, actual_end)
        elif today > planned_end:
            deviation_days += days_between(planned_end, today)
            delayed += 1

    return {
        "total": total,
        "completed": completed,
        "progress_percentage": (completed / total) * 100 if total > 0 else 0.0,
        "deviation_days": deviation_days,
        "delayed": delayed,
    }
