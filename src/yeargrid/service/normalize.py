# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from yeargrid.model.category import CategoryRule
from yeargrid.model.event import CalendarEvent, RawEvent
from yeargrid.service.categorize import classify
from yeargrid.time import (
    date_from_str,
    date_to_key,
    datetime_from_str,
    datetime_to_time_str,
    day_span,
    minutes_from_midnight,
    shift_date_key,
)

logger = logging.getLogger(__name__)

UNTITLED_EVENT = "Untitled event"
CALENDAR_ID_SEPARATOR = ":"


def _duration_days(start_date: str, end_date: str, all_day: bool) -> Optional[int]:
    """
    Number of days an event covers.

    All-day spans are measured against the provider's exclusive end date,
    timed spans against the inclusive calendar day of the end instant.
    """
    span = day_span(start_date, end_date)
    if span is None or span < 0:
        return None
    if all_day:
        return max(1, span)
    return max(1, span + 1)


def _strip_optional(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def normalize_event(
    raw_event: RawEvent,
    rules: Optional[list[CategoryRule]] = None,
    calendar_id: Optional[str] = None,
    calendar_name: Optional[str] = None,
    calendar_color: Optional[str] = None,
    match_description: bool = False,
) -> Optional[CalendarEvent]:
    """
    Convert a provider event to a CalendarEvent.

    Returns None for cancelled events and for events whose dates are missing
    or malformed; a bad record never raises.
    """
    if not isinstance(raw_event, dict) or raw_event.get("status") == "cancelled":
        return None

    raw_id = raw_event.get("id")
    start = raw_event.get("start") or {}
    end = raw_event.get("end") or {}
    if not isinstance(start, dict) or not isinstance(end, dict):
        logger.debug("dropping event %s: start or end is not a mapping", raw_id)
        return None
    all_day = bool(start.get("date")) and not start.get("dateTime")

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    start_time_minutes: Optional[int] = None
    end_time_minutes: Optional[int] = None

    if all_day:
        if not end.get("date"):
            logger.debug("dropping all-day event %s: missing end date", raw_id)
            return None
        start_day = date_from_str(start.get("date"))
        if start_day is None:
            logger.debug("dropping all-day event %s: bad start %r", raw_id, start["date"])
            return None
        exclusive_end_day = date_from_str(end.get("date"))
        if exclusive_end_day is None:
            logger.debug("dropping all-day event %s: bad end %r", raw_id, end["date"])
            return None
        start_date = date_to_key(start_day)
        exclusive_end_date = date_to_key(exclusive_end_day)
        end_date = shift_date_key(exclusive_end_date, -1)
        duration_days = _duration_days(start_date, exclusive_end_date, True)
        if end_date is None or duration_days is None:
            logger.debug("dropping all-day event %s: ends before it starts", raw_id)
            return None
        # A one-day event written with end == start still displays on its start day
        if end_date < start_date:
            end_date = start_date
    else:
        tz = start.get("timeZone") or end.get("timeZone")
        start_datetime = datetime_from_str(start.get("dateTime"), tz)
        end_datetime = datetime_from_str(end.get("dateTime"), tz)
        if start_datetime is None or end_datetime is None:
            logger.debug("dropping timed event %s: missing or bad date-time", raw_id)
            return None
        start_date = date_to_key(start_datetime.date())
        end_date = date_to_key(end_datetime.date())
        duration_days = _duration_days(start_date, end_date, False)
        if duration_days is None:
            logger.debug("dropping timed event %s: ends before it starts", raw_id)
            return None
        start_time = datetime_to_time_str(start_datetime)
        end_time = datetime_to_time_str(end_datetime)
        start_time_minutes = minutes_from_midnight(start_datetime)
        end_time_minutes = minutes_from_midnight(end_datetime)

    multi_day = duration_days > 1
    single_day_timed = not all_day and not multi_day

    title = _strip_optional(raw_event.get("summary")) or UNTITLED_EVENT
    description = _strip_optional(raw_event.get("description"))
    match = classify(
        title,
        rules,
        description=description,
        match_description=match_description,
    )

    event_id = str(raw_id)
    if calendar_id:
        event_id = f"{calendar_id}{CALENDAR_ID_SEPARATOR}{raw_id}"

    return {
        "id": event_id,
        "title": title,
        "description": description,
        "location": _strip_optional(raw_event.get("location")),
        "start_date": start_date,
        "end_date": end_date,
        "all_day": all_day,
        "multi_day": multi_day,
        "single_day_timed": single_day_timed,
        "duration_days": duration_days,
        "link": raw_event.get("htmlLink") or "",
        "category": match["category"],
        "color": match["color"],
        "calendar_id": calendar_id or None,
        "calendar_name": calendar_name,
        "calendar_color": calendar_color,
        "start_time": start_time,
        "end_time": end_time,
        "start_time_minutes": start_time_minutes,
        "end_time_minutes": end_time_minutes,
    }


def normalize_events(
    raw_events: list[RawEvent],
    rules: Optional[list[CategoryRule]] = None,
    calendar_id: Optional[str] = None,
    calendar_name: Optional[str] = None,
    calendar_color: Optional[str] = None,
    match_description: bool = False,
) -> list[CalendarEvent]:
    events: list[CalendarEvent] = []
    for raw_event in raw_events:
        event = normalize_event(
            raw_event,
            rules,
            calendar_id=calendar_id,
            calendar_name=calendar_name,
            calendar_color=calendar_color,
            match_description=match_description,
        )
        if event is not None:
            events.append(event)
    dropped = len(raw_events) - len(events)
    if dropped:
        logger.debug("dropped %d of %d events", dropped, len(raw_events))
    return events


def resolve_calendar_id(
    event: CalendarEvent, known_calendar_ids: set[str]
) -> Optional[str]:
    """Recover the source calendar of an event, falling back to its namespaced id."""
    if event["calendar_id"]:
        return event["calendar_id"]
    separator_index = event["id"].find(CALENDAR_ID_SEPARATOR)
    if separator_index <= 0:
        return None
    candidate = event["id"][:separator_index]
    if candidate not in known_calendar_ids:
        return None
    return candidate
