# SPDX-License-Identifier: MIT

import uuid

from yeargrid.model.event import CalendarEvent
from yeargrid.model.filter import EventFilter

MAX_TIMED_EVENT_MIN_HOURS = 24


def filters_from_patterns(patterns: list[str]) -> list[EventFilter]:
    """Build filters from plain patterns, skipping blanks and case-insensitive repeats."""
    filters: list[EventFilter] = []
    seen: set[str] = set()
    for pattern in patterns:
        trimmed = str(pattern).strip()
        if not trimmed or trimmed.casefold() in seen:
            continue
        seen.add(trimmed.casefold())
        filters.append({"id": str(uuid.uuid4()), "pattern": trimmed})
    return filters


def normalize_calendar_ids(calendar_ids: object) -> list[str]:
    """Keep string ids only, trimmed, without blanks or repeats, in first-seen order."""
    if not isinstance(calendar_ids, list):
        return []
    cleaned: list[str] = []
    for calendar_id in calendar_ids:
        if not isinstance(calendar_id, str):
            continue
        trimmed = calendar_id.strip()
        if trimmed and trimmed not in cleaned:
            cleaned.append(trimmed)
    return cleaned


def is_event_filtered(title: str, filters: list[EventFilter]) -> bool:
    folded_title = title.casefold()
    for event_filter in filters:
        pattern = event_filter["pattern"].strip()
        if pattern and pattern.casefold() in folded_title:
            return True
    return False


def filter_events(
    events: list[CalendarEvent], filters: list[EventFilter]
) -> list[CalendarEvent]:
    return [event for event in events if not is_event_filtered(event["title"], filters)]


def filter_short_timed_events(
    events: list[CalendarEvent], min_hours: float
) -> list[CalendarEvent]:
    """
    Hide single-day timed events shorter than min_hours from the year view.

    min_hours is clamped to 0..24; 0 keeps every event.
    """
    min_minutes = max(0, min(MAX_TIMED_EVENT_MIN_HOURS, min_hours)) * 60
    if min_minutes == 0:
        return list(events)

    kept: list[CalendarEvent] = []
    for event in events:
        if event["single_day_timed"]:
            start_minutes = event["start_time_minutes"] or 0
            end_minutes = event["end_time_minutes"] or start_minutes
            if end_minutes - start_minutes < min_minutes:
                continue
        kept.append(event)
    return kept
