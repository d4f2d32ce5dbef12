# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

from ganttgrid.model.layout import VisibleRange
from ganttgrid.service.timeline import DEFAULT_DAY_WIDTH, day_index, to_pixel_offset

logger = logging.getLogger(__name__)


def today_offset_px(
    visible_range: VisibleRange,
    today: datetime.date,
    day_width: int = DEFAULT_DAY_WIDTH,
) -> Optional[int]:
    """Offset of the centre of today's column, or None if today is not shown."""
    index = day_index(today, visible_range)
    if index < 0 or index >= visible_range["day_count"]:
        return None
    return to_pixel_offset(index, day_width) + day_width // 2


class Viewport:
    """
    Horizontal scroll state of a rendered timeline.

    The host applies ``scroll_left`` to its scroll container. A viewport
    centres on today once, the first time ``auto_center`` is called after the
    grid is laid out; later renders leave the user's position alone. Create a
    new Viewport when the view is mounted again.
    """

    def __init__(self, viewport_width: int, day_width: int = DEFAULT_DAY_WIDTH) -> None:
        self.viewport_width = viewport_width
        self.day_width = day_width
        self.scroll_left = 0
        self.auto_centered = False

    def scroll_to_today(self, today_offset: Optional[int]) -> int:
        if today_offset is not None:
            self.scroll_left = max(0, today_offset - self.viewport_width // 2)
        return self.scroll_left

    def scroll_by_weeks(self, weeks: int) -> int:
        self.scroll_left += weeks * 7 * self.day_width
        return self.scroll_left

    def auto_center(self, today_offset: Optional[int]) -> bool:
        """Centre on today if this viewport has not done so yet.

        Returns:
            True if the scroll position changed
        """
        if self.auto_centered:
            return False
        self.auto_centered = True
        self.scroll_to_today(today_offset)
        logger.debug("Auto-centred viewport at offset %d", self.scroll_left)
        return today_offset is not None

    def visible_window(self, canvas_width: int) -> tuple[int, int]:
        """The ``[left, right)`` slice of the canvas currently in view."""
        max_left = max(0, canvas_width - self.viewport_width)
        left = min(max(0, self.scroll_left), max_left)
        return left, min(canvas_width, left + self.viewport_width)
