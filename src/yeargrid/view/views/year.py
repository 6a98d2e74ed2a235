# SPDX-License-Identifier: MIT

import textwrap

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from yeargrid.color import EMPTY_CELL_COLOR, MONTH_LABEL_COLOR, WEEKEND_COLOR
from yeargrid.model.event import CalendarEvent
from yeargrid.model.layout import EventBar, StackLayout
from yeargrid.service.categorize import with_uncategorized
from yeargrid.service.day_buckets import DayMap
from yeargrid.service.event_bars import count_rows
from yeargrid.service.stack import (
    DAY_COLUMN_COUNT,
    get_density_scale,
    layout_day_stack,
    month_row_height,
)
from yeargrid.service.year_layout import YearLayout
from yeargrid.time import date_key_from_parts, days_in_month
from yeargrid.view.views.header import header

MONTH_LABELS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]
LABEL_WIDTH = 5


def year_view(
    layout: YearLayout,
    scroll: bool = False,
    density: float = 60,
    row_width: float = 1200,
) -> None:
    """
    Display the year as twelve month rows of 31 day cells.

    Each packed bar row of a month gets its own line, followed by a line of
    dots colored by the highest-priority single-day event of each day. In
    scroll mode the stacked titles of every busy day are listed under the
    month, clamped to the lines the stack allocator grants them.
    """
    year = layout["year"]
    header("year", str(year))

    console = Console()
    console.print(_day_number_line())

    bars_by_month: dict[int, list[EventBar]] = {}
    for bar in layout["bars"]:
        bars_by_month.setdefault(bar["month"], []).append(bar)
    rows_by_month = count_rows(layout["bars"])

    density_scale = get_density_scale(density)
    for month in range(12):
        for line in _month_lines(
            year,
            month,
            bars_by_month.get(month, []),
            rows_by_month.get(month, 0),
            layout["single_day_map"],
        ):
            console.print(line, no_wrap=True, overflow="crop")
        if scroll:
            _print_month_stacks(
                console,
                year,
                month,
                layout["single_day_map"],
                month_row_height(density_scale),
                row_width,
                density_scale,
            )

    console.print()
    console.print(_legend(layout))


def _day_number_line() -> Text:
    line = Text(" " * LABEL_WIDTH)
    for day in range(1, DAY_COLUMN_COUNT + 1):
        line.append(f"{day:<2}" if day % 5 == 0 or day == 1 else "  ", style="dim")
    return line


def _label(text: str) -> Text:
    return Text(f"{text:<{LABEL_WIDTH}}", style=MONTH_LABEL_COLOR)


def _bar_cell(day: int, bar: EventBar) -> str:
    if bar["start_day"] == bar["end_day"]:
        return "╺╸"
    if day == bar["start_day"]:
        return "╺━"
    if day == bar["end_day"]:
        return "━╸"
    return "━━"


def _month_lines(
    year: int,
    month: int,
    month_bars: list[EventBar],
    row_count: int,
    single_day_map: DayMap,
) -> list[Text]:
    month_days = days_in_month(year, month)
    lines: list[Text] = []

    for row in range(row_count):
        line = _label(MONTH_LABELS[month] if row == 0 else "")
        row_bars = [bar for bar in month_bars if bar["row"] == row]
        for day in range(1, DAY_COLUMN_COUNT + 1):
            bar = next(
                (b for b in row_bars if b["start_day"] <= day <= b["end_day"]), None
            )
            if bar is None:
                line.append("  ")
            else:
                line.append(_bar_cell(day, bar), style=bar["event"]["color"])
        lines.append(line)

    dots = _label(MONTH_LABELS[month] if row_count == 0 else "")
    for day in range(1, DAY_COLUMN_COUNT + 1):
        if day > month_days:
            dots.append("  ")
            continue
        day_events = single_day_map.get(date_key_from_parts(year, month + 1, day), [])
        if day_events:
            dots.append("●", style=day_events[0]["color"])
            dots.append("+" if len(day_events) > 1 else " ", style="dim")
        elif pendulum.date(year, month + 1, day).isoweekday() >= 6:
            dots.append("· ", style=WEEKEND_COLOR)
        else:
            dots.append("· ", style=EMPTY_CELL_COLOR)
    lines.append(dots)

    return lines


def clamp_title(title: str, lines: int, chars_per_line: int) -> list[str]:
    """Wrap a title to chars_per_line and keep at most lines of it, marking the cut."""
    wrapped = textwrap.wrap(title, chars_per_line, break_long_words=True) or [""]
    if len(wrapped) <= lines:
        return wrapped
    kept = wrapped[:lines]
    kept[-1] = kept[-1][: max(0, chars_per_line - 1)] + "…"
    return kept


def render_stack(events: list[CalendarEvent], stack: StackLayout) -> Text:
    text = Text()
    for index, event in enumerate(events):
        if index > 0:
            text.append("\n")
        if not stack["show_titles"]:
            text.append("▬▬▬", style=event["color"])
            continue
        lines = clamp_title(
            event["title"], stack["line_allocations"][index], stack["chars_per_line"]
        )
        text.append("\n".join(lines), style=event["color"])
    return text


def _print_month_stacks(
    console: Console,
    year: int,
    month: int,
    single_day_map: DayMap,
    available_height: float,
    row_width: float,
    density_scale: float,
) -> None:
    table = Table(box=box.MINIMAL, show_header=False, padding=(0, 1))
    table.add_column("day", style="dim", justify="right")
    table.add_column("stack")

    for day in range(1, days_in_month(year, month) + 1):
        day_events = single_day_map.get(date_key_from_parts(year, month + 1, day))
        if not day_events:
            continue
        stack = layout_day_stack(
            [event["title"] for event in day_events],
            available_height,
            row_width,
            density_scale,
        )
        table.add_row(str(day), render_stack(day_events, stack))

    if table.row_count:
        console.print(table)


def _legend(layout: YearLayout) -> Text:
    used = {event["category"] for event in layout["events"]}
    legend = Text(" " * LABEL_WIDTH)
    for rule in with_uncategorized(layout["rules"]):
        if rule["id"] not in used:
            continue
        legend.append("■ ", style=rule["color"])
        legend.append(f"{rule['label']}  ")
    return legend
