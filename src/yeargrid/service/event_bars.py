# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from yeargrid.model.event import CalendarEvent
from yeargrid.model.layout import EventBar
from yeargrid.time import date_from_str

logger = logging.getLogger(__name__)


def get_event_range(
    event: CalendarEvent,
) -> Optional[tuple[pendulum.Date, pendulum.Date]]:
    """Return the inclusive (start, end) dates of an event, or None if they are unusable."""
    start = date_from_str(event["start_date"])
    end = date_from_str(event["end_date"])
    if start is None or end is None or end < start:
        return None
    return start, end


def _split_by_month(
    event: CalendarEvent, start: pendulum.Date, end: pendulum.Date
) -> list[EventBar]:
    bars: list[EventBar] = []
    current = start
    while current <= end:
        month_end = current.end_of("month")
        bars.append(
            {
                "event": event,
                "month": current.month - 1,
                "start_day": current.day,
                "end_day": end.day if end < month_end else month_end.day,
                "row": 0,
            }
        )
        current = month_end.add(days=1)
    return bars


def _assign_rows(month_bars: list[EventBar]) -> int:
    """
    Greedy interval colouring for one month.

    Bars are visited by start day, longer bars first on ties, and each takes
    the lowest row whose last bar ended before it starts. Returns the number
    of rows used.
    """
    # sorted() is stable, so equal bars keep the original event order
    ordered = sorted(
        month_bars,
        key=lambda bar: (bar["start_day"], -(bar["end_day"] - bar["start_day"])),
    )
    row_end_days: list[int] = []
    for bar in ordered:
        row = next(
            (
                index
                for index, end_day in enumerate(row_end_days)
                if end_day < bar["start_day"]
            ),
            len(row_end_days),
        )
        if row == len(row_end_days):
            row_end_days.append(bar["end_day"])
        else:
            row_end_days[row] = bar["end_day"]
        bar["row"] = row
    return len(row_end_days)


def calculate_event_bars(events: list[CalendarEvent], year: int) -> list[EventBar]:
    """
    Lay out multi-day events as month-local bars for one year.

    Each event is clipped to the year and split at month boundaries, giving
    one bar per month it touches. Rows are then packed per month so that no
    two bars in the same month and row overlap. Row count is unbounded.
    """
    year_start = pendulum.date(year, 1, 1)
    year_end = pendulum.date(year, 12, 31)

    bars: list[EventBar] = []
    for event in events:
        if event["duration_days"] <= 1:
            continue
        event_range = get_event_range(event)
        if event_range is None:
            continue
        start, end = event_range
        if start > year_end or end < year_start:
            continue
        bars.extend(_split_by_month(event, max(start, year_start), min(end, year_end)))

    by_month: dict[int, list[EventBar]] = {}
    for bar in bars:
        by_month.setdefault(bar["month"], []).append(bar)
    for month, month_bars in by_month.items():
        row_count = _assign_rows(month_bars)
        logger.debug("month %d: %d bars in %d rows", month, len(month_bars), row_count)

    return bars


def count_rows(bars: list[EventBar]) -> dict[int, int]:
    """Number of rows used per month index."""
    rows: dict[int, int] = {}
    for bar in bars:
        rows[bar["month"]] = max(rows.get(bar["month"], 0), bar["row"] + 1)
    return rows
