# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, TypedDict

import platformdirs

APP_NAME = "yeargrid"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    match_description: bool
    timed_event_min_hours: float
    show_timed_events: bool
    month_scroll_enabled: bool
    month_scroll_density: int
    categories: Optional[list[dict[str, Any]]]
    category_priority: Optional[list[str]]
    hidden_patterns: list[str]
    hidden_calendars: list[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "match_description": False,
        "timed_event_min_hours": 3,
        "show_timed_events": True,
        "month_scroll_enabled": False,
        "month_scroll_density": 60,
        "categories": None,
        "category_priority": None,
        "hidden_patterns": [],
        "hidden_calendars": [],
    }


def set_config_path(config_path: Path) -> None:
    """Point the application at another config file (used by --config)."""
    global CONFIG_PATH, APP_CONFIG_PATH

    APP_CONFIG_PATH = config_path
    CONFIG_PATH = config_path.parent
