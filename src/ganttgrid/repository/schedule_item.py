# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttgrid import configuration, time
from ganttgrid.model.schedule_item import (
    DATE_FIELDS,
    ItemId,
    ScheduleItem,
    schedule_item_from_row,
)

logger = logging.getLogger(__name__)


class ScheduleItemRepository:
    """
    Local copy of the task rows the timeline is drawn from.

    Rows are kept in a single YAML file with dates stored as ISO strings.
    """

    def __init__(self) -> None:
        self._items: Optional[list[ScheduleItem]] = None
        self.is_dirty = False

    @property
    def items(self) -> list[ScheduleItem]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        self._items = []
        if not configuration.DATA_ITEMS_PATH.is_file():
            return
        raw_data = load(configuration.DATA_ITEMS_PATH.read_text(), Loader=Loader)
        if raw_data is None:
            return
        for raw_item in raw_data.get("items") or []:
            self._items.append(schedule_item_from_row(raw_item))
        logger.debug(
            "Loaded %d items from %s", len(self._items), configuration.DATA_ITEMS_PATH
        )

    def __save_data(self) -> None:
        serializable_items = [
            self.__convert_item_for_serialization(deepcopy(item)) for item in self.items
        ]
        configuration.DATA_ITEMS_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_ITEMS_PATH.write_text(
            dump({"items": serializable_items}, Dumper=Dumper, allow_unicode=True)
        )

    def flush(self) -> bool:
        if self._items is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_item_for_serialization(self, item: ScheduleItem) -> dict[str, Any]:
        serializable_item = cast(dict[str, Any], item)
        for field in DATE_FIELDS:
            serializable_item[field] = time.date_to_iso_str_optional(
                serializable_item[field]
            )
        return serializable_item

    def __find(self, id: ItemId) -> ScheduleItem:
        matches = [item for item in self.items if item["id"] == id]
        if len(matches) == 0:
            raise ValueError(f"No item with id {id}")
        return matches[0]

    def __next_id(self) -> int:
        int_ids = [item["id"] for item in self.items if isinstance(item["id"], int)]
        return max(int_ids, default=0) + 1

    def save_new_item(
        self,
        label: str,
        status: str,
        project: Optional[str] = None,
        planned_start: Optional[datetime.date] = None,
        planned_end: Optional[datetime.date] = None,
        actual_start: Optional[datetime.date] = None,
        actual_end: Optional[datetime.date] = None,
    ) -> ItemId:
        self.is_dirty = True

        item: ScheduleItem = {
            "id": self.__next_id(),
            "label": label,
            "status": status,
            "project": project,
            "planned_start": planned_start,
            "planned_end": planned_end,
            "actual_start": actual_start,
            "actual_end": actual_end,
        }
        self.items.append(item)
        return item["id"]

    def import_items(self, items: list[ScheduleItem]) -> tuple[int, int]:
        """
        Insert or replace items by id.

        Returns:
            Number of items added and number replaced
        """
        self.is_dirty = True

        added = 0
        replaced = 0
        positions = {item["id"]: index for index, item in enumerate(self.items)}
        for item in items:
            position = positions.get(item["id"])
            if position is None:
                positions[item["id"]] = len(self.items)
                self.items.append(deepcopy(item))
                added += 1
            else:
                self.items[position] = deepcopy(item)
                replaced += 1
        return added, replaced

    def modify_item(
        self,
        id: ItemId,
        label: Optional[str] = None,
        status: Optional[str] = None,
        project: Optional[str] = None,
        planned_start: Optional[datetime.date] = None,
        planned_end: Optional[datetime.date] = None,
        actual_start: Optional[datetime.date] = None,
        actual_end: Optional[datetime.date] = None,
        remove_project: bool = False,
        remove_planned_start: bool = False,
        remove_planned_end: bool = False,
        remove_actual_start: bool = False,
        remove_actual_end: bool = False,
    ) -> None:
        item = self.__find(id)
        self.is_dirty = True

        if label is not None:
            item["label"] = label
        if status is not None:
            item["status"] = status
        if project is not None:
            item["project"] = project
        if planned_start is not None:
            item["planned_start"] = planned_start
        if planned_end is not None:
            item["planned_end"] = planned_end
        if actual_start is not None:
            item["actual_start"] = actual_start
        if actual_end is not None:
            item["actual_end"] = actual_end

        if remove_project:
            item["project"] = None
        if remove_planned_start:
            item["planned_start"] = None
        if remove_planned_end:
            item["planned_end"] = None
        if remove_actual_start:
            item["actual_start"] = None
        if remove_actual_end:
            item["actual_end"] = None

    def delete_item(self, id: ItemId) -> None:
        item = self.__find(id)
        self.is_dirty = True
        self.items.remove(item)

    def get_all_items(self) -> list[ScheduleItem]:
        return deepcopy(self.items)

    def get_item(self, id: ItemId) -> ScheduleItem:
        return deepcopy(self.__find(id))


SCHEDULE_ITEM_REPO = ScheduleItemRepository()
