# SPDX-License-Identifier: MIT

from typing import TypedDict

from yeargrid.model.event import CalendarEvent


class EventBar(TypedDict):
    event: CalendarEvent
    month: int
    start_day: int
    end_day: int
    row: int


class StackLayout(TypedDict):
    font_size: float
    line_height: float
    gap: float
    max_lines_total: int
    chars_per_line: int
    estimated_lines: list[int]
    line_allocations: list[int]
    show_titles: bool


class PositionedEvent(TypedDict):
    event: CalendarEvent
    top: float
    height: float
    left: float
    width: float
    column: int
    total_columns: int


class TooltipPhase:
    PROVISIONAL = "provisional"
    MEASURED = "measured"


class Point(TypedDict):
    x: float
    y: float


class Size(TypedDict):
    width: float
    height: float


class TooltipPlacement(TypedDict):
    left: float
    top: float
    phase: str
