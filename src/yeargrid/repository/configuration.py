# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import Dumper, SafeLoader as Loader  # type: ignore[assignment]

from yeargrid import configuration
from yeargrid.model.category import CategoryRule
from yeargrid.service.categorize import get_default_rules, normalize_rules, order_rules
from yeargrid.service.filter import normalize_calendar_ids


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
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(
                f"configuration file {configuration.APP_CONFIG_PATH} must hold a mapping"
            )

        # Migration: fill in any settings added since the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in loaded:
                loaded[key] = value
                self.is_dirty = True

        if loaded["categories"] is not None and not isinstance(
            loaded["categories"], list
        ):
            raise ValueError("'categories' must be a list of category rules")
        if loaded["hidden_patterns"] is None:
            loaded["hidden_patterns"] = []
        hidden_calendars = normalize_calendar_ids(loaded["hidden_calendars"])
        if hidden_calendars != loaded["hidden_calendars"]:
            loaded["hidden_calendars"] = hidden_calendars
            self.is_dirty = True

        self._config = loaded  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Forget the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_category_rules(self) -> list[CategoryRule]:
        """Category rules ordered for matching: configured ones, or the defaults."""
        raw_rules = self.config["categories"]
        if raw_rules is None:
            rules = get_default_rules()
        else:
            rules = normalize_rules(raw_rules)
        return order_rules(rules, self.config["category_priority"])

    def update_config(
        self,
        show_header: Optional[bool] = None,
        match_description: Optional[bool] = None,
        timed_event_min_hours: Optional[float] = None,
        show_timed_events: Optional[bool] = None,
        month_scroll_enabled: Optional[bool] = None,
        month_scroll_density: Optional[int] = None,
        category_priority: Optional[list[str]] = None,
        remove_category_priority: bool = False,
        hidden_patterns: Optional[list[str]] = None,
        remove_hidden_patterns: bool = False,
        hide_calendars: Optional[list[str]] = None,
        show_calendars: Optional[list[str]] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if match_description is not None:
            self.config["match_description"] = match_description
        if timed_event_min_hours is not None:
            self.config["timed_event_min_hours"] = max(
                0, min(24, timed_event_min_hours)
            )
        if show_timed_events is not None:
            self.config["show_timed_events"] = show_timed_events
        if month_scroll_enabled is not None:
            self.config["month_scroll_enabled"] = month_scroll_enabled
        if month_scroll_density is not None:
            self.config["month_scroll_density"] = max(0, min(100, month_scroll_density))
        if category_priority is not None:
            self.config["category_priority"] = category_priority
        if remove_category_priority:
            self.config["category_priority"] = None
        if hidden_patterns is not None:
            self.config["hidden_patterns"] = hidden_patterns
        if remove_hidden_patterns:
            self.config["hidden_patterns"] = []
        if hide_calendars is not None:
            self.config["hidden_calendars"] = normalize_calendar_ids(
                [*self.config["hidden_calendars"], *hide_calendars]
            )
        if show_calendars is not None:
            shown = normalize_calendar_ids(show_calendars)
            self.config["hidden_calendars"] = [
                calendar_id
                for calendar_id in self.config["hidden_calendars"]
                if calendar_id not in shown
            ]


CONFIGURATION_REPO = ConfigurationRepository()
