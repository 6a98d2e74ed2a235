# SPDX-License-Identifier: MIT

import logging
from typing import Optional, TypedDict

from yeargrid.configuration import Configuration
from yeargrid.model.category import CategoryRule
from yeargrid.model.event import CalendarEvent
from yeargrid.model.layout import EventBar
from yeargrid.repository.event_source import CalendarSource
from yeargrid.service.categorize import category_priority
from yeargrid.service.day_buckets import (
    DayMap,
    build_all_day_map,
    build_single_day_map,
    build_timed_event_map,
)
from yeargrid.service.event_bars import calculate_event_bars
from yeargrid.service.filter import (
    filter_events,
    filter_short_timed_events,
    filters_from_patterns,
)
from yeargrid.service.normalize import normalize_events

logger = logging.getLogger(__name__)


class YearLayout(TypedDict):
    year: int
    rules: list[CategoryRule]
    category_priority: dict[str, int]
    events: list[CalendarEvent]
    bars: list[EventBar]
    single_day_map: DayMap
    all_day_map: DayMap
    timed_event_map: DayMap


def normalize_calendars(
    calendars: list[CalendarSource],
    rules: list[CategoryRule],
    match_description: bool = False,
    hidden_calendar_ids: Optional[list[str]] = None,
) -> list[CalendarEvent]:
    """Normalize every visible calendar; calendars listed in hidden_calendar_ids are skipped."""
    hidden = set(hidden_calendar_ids or [])
    events: list[CalendarEvent] = []
    for calendar in calendars:
        if calendar["id"] is not None and calendar["id"] in hidden:
            logger.debug("skipping hidden calendar %s", calendar["id"])
            continue
        events.extend(
            normalize_events(
                calendar["items"],
                rules,
                calendar_id=calendar["id"],
                calendar_name=calendar["name"],
                calendar_color=calendar["color"],
                match_description=match_description,
            )
        )
    return events


def build_year_layout(
    calendars: list[CalendarSource],
    rules: list[CategoryRule],
    config: Configuration,
    year: int,
) -> YearLayout:
    """
    Run the full classification and layout pass for one visible year.

    Hidden calendars and hidden-title filters apply everywhere. Short or
    (when disabled) all single-day timed events are kept out of the grid
    but still listed in the timed map used by the day summary.
    """
    events = normalize_calendars(
        calendars,
        rules,
        config["match_description"],
        config["hidden_calendars"],
    )
    events = filter_events(events, filters_from_patterns(config["hidden_patterns"]))

    if config["show_timed_events"]:
        grid_events = filter_short_timed_events(events, config["timed_event_min_hours"])
    else:
        grid_events = [event for event in events if not event["single_day_timed"]]
    logger.debug("%d events, %d shown in the grid", len(events), len(grid_events))

    priority = category_priority(rules)
    return {
        "year": year,
        "rules": rules,
        "category_priority": priority,
        "events": events,
        "bars": calculate_event_bars(grid_events, year),
        "single_day_map": build_single_day_map(grid_events, year, priority),
        "all_day_map": build_all_day_map(events, year, priority),
        "timed_event_map": build_timed_event_map(events, year),
    }
