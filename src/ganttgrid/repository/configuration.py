# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttgrid import configuration
from ganttgrid.model.layout import TrackMode, UndatedOrder


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: fill in settings added after the file was written
        defaults = configuration.default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        day_width: Optional[int] = None,
        terminal_day_width: Optional[int] = None,
        padding_days: Optional[int] = None,
        min_span_days: Optional[int] = None,
        track_mode: Optional[TrackMode] = None,
        undated_order: Optional[UndatedOrder] = None,
        left_column_width: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if day_width is not None and day_width <= 0:
            raise ValueError("day_width must be positive")
        if terminal_day_width is not None and terminal_day_width <= 0:
            raise ValueError("terminal_day_width must be positive")
        if padding_days is not None and padding_days < 0:
            raise ValueError("padding_days must not be negative")
        if min_span_days is not None and min_span_days < 0:
            raise ValueError("min_span_days must not be negative")
        if (
            left_column_width is not None
            and left_column_width < configuration.MIN_LEFT_COLUMN_WIDTH
        ):
            raise ValueError(
                f"left_column_width must be at least {configuration.MIN_LEFT_COLUMN_WIDTH}"
            )

        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if day_width is not None:
            self.config["day_width"] = day_width
        if terminal_day_width is not None:
            self.config["terminal_day_width"] = terminal_day_width
        if padding_days is not None:
            self.config["padding_days"] = padding_days
        if min_span_days is not None:
            self.config["min_span_days"] = min_span_days
        if track_mode is not None:
            self.config["track_mode"] = track_mode
        if undated_order is not None:
            self.config["undated_order"] = undated_order
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
