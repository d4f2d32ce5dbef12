# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from ganttgrid.model.layout import TrackMode, UndatedOrder

APP_NAME = "ganttgrid"

# Room for the id, the status marker and a few label characters
MIN_LEFT_COLUMN_WIDTH = 12

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ITEMS_PATH: Path = DATA_PATH / "items.yaml"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    day_width: int
    terminal_day_width: int
    padding_days: int
    min_span_days: int
    track_mode: TrackMode
    undated_order: UndatedOrder
    left_column_width: int
    log_level: str


def default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "day_width": 44,
        "terminal_day_width": 3,
        "padding_days": 7,
        "min_span_days": 60,
        "track_mode": "dual",
        "undated_order": "input",
        "left_column_width": 32,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ITEMS_PATH

    DATA_PATH = data_path
    DATA_ITEMS_PATH = DATA_PATH / "items.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
