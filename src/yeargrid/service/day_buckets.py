# SPDX-License-Identifier: MIT

import sys
from typing import Callable

from yeargrid.model.event import CalendarEvent
from yeargrid.service.event_bars import get_event_range
from yeargrid.time import date_to_key, iter_dates

DayMap = dict[str, list[CalendarEvent]]


def _priority_sort_key(
    category_priority: dict[str, int],
) -> Callable[[CalendarEvent], tuple[int, int, str, str]]:
    def sort_key(event: CalendarEvent) -> tuple[int, int, str, str]:
        return (
            category_priority.get(event["category"], sys.maxsize),
            -event["duration_days"],
            event["start_date"],
            event["title"],
        )

    return sort_key


def _bucket_by_date(events: list[CalendarEvent], year: int) -> DayMap:
    day_map: DayMap = {}
    for event in events:
        event_range = get_event_range(event)
        if event_range is None:
            continue
        start, end = event_range
        for date in iter_dates(start, end):
            if date.year == year:
                day_map.setdefault(date_to_key(date), []).append(event)
    return day_map


def build_single_day_map(
    events: list[CalendarEvent], year: int, category_priority: dict[str, int]
) -> DayMap:
    """
    Group one-day events (all-day or timed) by date key for dot and stack rendering.

    Within a date, events are ordered by category priority, then longer
    first, then start date, then title.
    """
    single_day_events = [event for event in events if event["duration_days"] <= 1]
    single_day_events.sort(key=_priority_sort_key(category_priority))
    return _bucket_by_date(single_day_events, year)


def build_all_day_map(
    events: list[CalendarEvent], year: int, category_priority: dict[str, int]
) -> DayMap:
    """
    Group every event touching a date, multi-day spans included, for the day summary.

    Single-day timed events are left out; see build_timed_event_map.
    """
    day_events = [event for event in events if not event["single_day_timed"]]
    day_events.sort(key=_priority_sort_key(category_priority))
    return _bucket_by_date(day_events, year)


def build_timed_event_map(events: list[CalendarEvent], year: int) -> DayMap:
    """Single-day timed events by date, in time order."""
    timed_events = [event for event in events if event["single_day_timed"]]
    timed_events.sort(
        key=lambda event: (event["start_time_minutes"] or 0, event["title"])
    )
    return _bucket_by_date(timed_events, year)
