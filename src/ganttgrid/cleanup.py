# SPDX-License-Identifier: MIT

import atexit

from ganttgrid.repository.configuration import CONFIGURATION_REPO
from ganttgrid.repository.schedule_item import SCHEDULE_ITEM_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    SCHEDULE_ITEM_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
