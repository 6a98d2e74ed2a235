# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from yeargrid.color import DEFAULT_CALENDAR_COLOR
from yeargrid.model.event import CalendarEvent
from yeargrid.model.layout import StackLayout
from yeargrid.service.categorize import get_category_rule
from yeargrid.service.day_column import END_HOUR, START_HOUR, position_timed_events
from yeargrid.service.year_layout import YearLayout
from yeargrid.time import date_key_to_display, time_str_to_display
from yeargrid.view.views.header import header
from yeargrid.view.views.year import render_stack


def _span(event: CalendarEvent) -> str:
    if event["start_date"] == event["end_date"]:
        return date_key_to_display(event["start_date"])
    return (
        f"{date_key_to_display(event['start_date'])} - "
        f"{date_key_to_display(event['end_date'])}"
    )


def _time_range(event: CalendarEvent) -> str:
    if event["all_day"] or event["start_time"] is None:
        return "all day"
    start = time_str_to_display(event["start_time"])
    if event["end_time"] is None or event["end_time"] == event["start_time"]:
        return start
    return f"{start} - {time_str_to_display(event['end_time'])}"


def day_view(layout: YearLayout, date_key: str, stack: StackLayout) -> None:
    """
    Display a day summary: all-day and multi-day events touching the date,
    the stacked titles of its single-day events, and the timed column.
    """
    header("day", date_key_to_display(date_key))

    console = Console()

    all_day_events = layout["all_day_map"].get(date_key, [])
    if all_day_events:
        table = Table(box=box.SIMPLE, title="events", title_justify="left")
        for column in ["category", "title", "span", "calendar"]:
            table.add_column(column)
        for event in all_day_events:
            rule = get_category_rule(event["category"], layout["rules"])
            calendar = Text()
            if event["calendar_name"] or event["calendar_id"]:
                calendar.append(
                    "● ", style=event["calendar_color"] or DEFAULT_CALENDAR_COLOR
                )
                calendar.append(event["calendar_name"] or event["calendar_id"] or "")
            table.add_row(
                Text(rule["label"], style=event["color"]),
                event["title"],
                _span(event),
                calendar,
            )
        console.print(table)
    else:
        console.print(" [dim]no all-day events[/dim]")

    single_day_events = layout["single_day_map"].get(date_key, [])
    if single_day_events:
        console.print()
        console.print(
            f" [bold]stack[/bold] [dim]{stack['max_lines_total']} lines, "
            f"{stack['chars_per_line']} chars per line[/dim]"
        )
        stack_table = Table(box=box.SIMPLE)
        stack_table.add_column("title")
        stack_table.add_column("needed", justify="right")
        stack_table.add_column("allocated", justify="right")
        for index, event in enumerate(single_day_events):
            allocated = (
                str(stack["line_allocations"][index]) if stack["show_titles"] else "-"
            )
            stack_table.add_row(
                Text(event["title"], style=event["color"]),
                str(stack["estimated_lines"][index]),
                allocated,
            )
        console.print(stack_table)
        console.print(render_stack(single_day_events, stack))

    timed_events = layout["timed_event_map"].get(date_key, [])
    if timed_events:
        console.print()
        console.print(
            f" [bold]timed[/bold] [dim]{START_HOUR}:00 - {END_HOUR}:00[/dim]"
        )
        timed_table = Table(box=box.SIMPLE)
        for column in ["time", "title", "column", "top", "height"]:
            timed_table.add_column(column)
        for positioned in position_timed_events(timed_events):
            event = positioned["event"]
            timed_table.add_row(
                _time_range(event),
                Text(event["title"], style=event["color"]),
                f"{positioned['column'] + 1}/{positioned['total_columns']}",
                f"{positioned['top']:g}px",
                f"{positioned['height']:g}px",
            )
        console.print(timed_table)
