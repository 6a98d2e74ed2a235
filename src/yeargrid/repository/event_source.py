# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, TypedDict, cast

from yaml import load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from yeargrid.model.event import RawEvent


class CalendarSource(TypedDict):
    id: Optional[str]
    name: Optional[str]
    color: Optional[str]
    items: list[RawEvent]


class EventSourceRepository:
    """
    Read-only access to a file of provider events (YAML or JSON).

    Accepted shapes: a bare list of events, a mapping with an 'items' list,
    or a mapping with a 'calendars' list whose entries carry id, name, color
    and their own 'items'.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._calendars: Optional[list[CalendarSource]] = None

    @property
    def calendars(self) -> list[CalendarSource]:
        if self._calendars is None:
            self.__load_data()
        if self._calendars is None:
            raise ValueError()
        return self._calendars

    def __load_data(self) -> None:
        document = load(self.path.read_text(), Loader=Loader)

        if isinstance(document, list):
            self._calendars = [self.__calendar_source(None, {"items": document})]
        elif isinstance(document, dict) and "calendars" in document:
            calendars = document["calendars"]
            if not isinstance(calendars, list):
                raise ValueError(f"{self.path}: 'calendars' must be a list")
            self._calendars = [
                self.__calendar_source(index, calendar)
                for index, calendar in enumerate(calendars)
            ]
        elif isinstance(document, dict) and "items" in document:
            self._calendars = [self.__calendar_source(None, document)]
        elif document is None:
            self._calendars = []
        else:
            raise ValueError(
                f"{self.path}: expected a list of events, 'items' or 'calendars'"
            )

    def __calendar_source(self, index: Optional[int], calendar: Any) -> CalendarSource:
        if not isinstance(calendar, dict):
            raise ValueError(f"{self.path}: calendar #{index} must be a mapping")
        items = calendar.get("items") or []
        if not isinstance(items, list):
            raise ValueError(f"{self.path}: 'items' must be a list")
        calendar_id = calendar.get("id")
        return {
            "id": str(calendar_id) if calendar_id is not None else None,
            "name": calendar.get("name"),
            "color": calendar.get("color"),
            # Individual records are validated by the normalizer, which drops bad ones
            "items": cast(list[RawEvent], [item for item in items if isinstance(item, dict)]),
        }

    def get_calendar_ids(self) -> set[str]:
        return {
            calendar["id"] for calendar in self.calendars if calendar["id"] is not None
        }
