# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict

EventStatus = Literal["confirmed", "tentative", "cancelled"]


class RawEventTime(TypedDict):
    date: NotRequired[Optional[str]]
    dateTime: NotRequired[Optional[str]]
    timeZone: NotRequired[Optional[str]]


class RawEvent(TypedDict):
    """An event as delivered by the calendar provider."""

    id: str
    summary: NotRequired[Optional[str]]
    description: NotRequired[Optional[str]]
    location: NotRequired[Optional[str]]
    start: RawEventTime
    end: RawEventTime
    status: NotRequired[EventStatus]
    htmlLink: NotRequired[Optional[str]]


class CalendarEvent(TypedDict):
    id: str
    title: str
    description: Optional[str]
    location: Optional[str]
    start_date: str
    end_date: str
    all_day: bool
    multi_day: bool
    single_day_timed: bool
    duration_days: int
    link: str
    category: str
    color: str
    calendar_id: Optional[str]
    calendar_name: Optional[str]
    calendar_color: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    start_time_minutes: Optional[int]
    end_time_minutes: Optional[int]
