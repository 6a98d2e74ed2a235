# SPDX-License-Identifier: MIT

from yeargrid.model.event import CalendarEvent
from yeargrid.model.layout import PositionedEvent

HOUR_HEIGHT_PX = 40
START_HOUR = 6
END_HOUR = 22
MIN_EVENT_MINUTES = 15
DEFAULT_EVENT_MINUTES = 60


def _end_minutes(event: CalendarEvent) -> int:
    start_minutes = event["start_time_minutes"] or 0
    if event["end_time_minutes"] is None:
        return start_minutes + DEFAULT_EVENT_MINUTES
    return event["end_time_minutes"]


def position_timed_events(events: list[CalendarEvent]) -> list[PositionedEvent]:
    """
    Lay out one day's timed events in a vertical hour column.

    Events that overlap, directly or through a chain of overlaps, share a
    group and sit side by side, one column each.
    """
    timed_events = [
        event
        for event in events
        if event["start_time_minutes"] is not None
        and event["end_time_minutes"] is not None
    ]
    timed_events.sort(
        key=lambda event: (
            event["start_time_minutes"],
            -(_end_minutes(event) - (event["start_time_minutes"] or 0)),
        )
    )

    groups: list[list[CalendarEvent]] = []
    group_end = 0
    for event in timed_events:
        start_minutes = event["start_time_minutes"] or 0
        if groups and start_minutes < group_end:
            groups[-1].append(event)
            group_end = max(group_end, _end_minutes(event))
        else:
            groups.append([event])
            group_end = _end_minutes(event)

    positioned: list[PositionedEvent] = []
    for group in groups:
        total_columns = len(group)
        column_width = 100 / total_columns
        for column, event in enumerate(group):
            start_minutes = event["start_time_minutes"] or 0
            duration = max(MIN_EVENT_MINUTES, _end_minutes(event) - start_minutes)
            positioned.append(
                {
                    "event": event,
                    "top": (start_minutes - START_HOUR * 60) / 60 * HOUR_HEIGHT_PX,
                    "height": duration / 60 * HOUR_HEIGHT_PX,
                    "left": column * column_width,
                    "width": column_width,
                    "column": column,
                    "total_columns": total_columns,
                }
            )
    return positioned
