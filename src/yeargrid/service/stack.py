# SPDX-License-Identifier: MIT

import math

from yeargrid.model.layout import StackLayout

DAY_COLUMN_COUNT = 31
GRID_GAP_PX = 1
MONTH_ROW_MIN_HEIGHT_PX = 44
MONTH_ROW_HEIGHT_RANGE_PX = 256

STACK_FONT_BASE = 8
STACK_FONT_RANGE = 3
STACK_LINE_HEIGHT_BASE = 1.05
STACK_LINE_HEIGHT_RANGE = 0.2
STACK_PADDING_PX = 8
STACK_GAP_DENSE_THRESHOLD = 3
STACK_GAP_DENSE_PX = 2
STACK_GAP_SPARSE_PX = 4
STACK_TITLE_DENSITY_THRESHOLD = 0.3
STACK_MIN_CHARS_PER_LINE = 6
STACK_CHAR_WIDTH_RATIO = 0.55
STACK_FALLBACK_CHARS_PER_LINE = 12


def get_density_scale(density: float) -> float:
    """Map a 0-100 density setting to a 0-1 scale, clamping out-of-range input."""
    return max(0.0, min(1.0, density / 100))


def month_row_height(density_scale: float) -> float:
    """Minimum pixel height of a month row in scrollable mode."""
    return MONTH_ROW_MIN_HEIGHT_PX + density_scale * MONTH_ROW_HEIGHT_RANGE_PX


def allocate_stack_lines(needed_lines: list[int], max_lines_total: int) -> list[int]:
    """
    Decide how many text lines each stacked title may use in one day cell.

    Every event gets at least one line. When the budget cannot cover every
    title in full, the lines beyond the first are shared in proportion to
    each event's extra need (floored), and the leftovers go one at a time to
    the events with the largest extra need, ties in input order, until the
    budget is spent or nobody can use another line.
    """
    event_count = len(needed_lines)
    if event_count == 0:
        return []
    if max_lines_total <= event_count:
        return [1] * event_count

    needed = [max(1, lines) for lines in needed_lines]
    if sum(needed) <= max_lines_total:
        return needed

    extra_needed = [lines - 1 for lines in needed]
    total_extra_needed = sum(extra_needed)
    available_extra = max_lines_total - event_count

    allocations = [
        1 + (extra * available_extra) // total_extra_needed for extra in extra_needed
    ]
    remaining = max_lines_total - sum(allocations)

    # sorted() is stable, so equal extra needs keep input order
    order = sorted(
        (index for index, extra in enumerate(extra_needed) if extra > 0),
        key=lambda index: -extra_needed[index],
    )
    while remaining > 0:
        handed_out = False
        for index in order:
            if remaining == 0:
                break
            if allocations[index] < needed[index]:
                allocations[index] += 1
                remaining -= 1
                handed_out = True
        if not handed_out:
            break

    return allocations


def estimate_chars_per_line(row_width: float, font_size: float) -> int:
    """Characters that fit on one line of a day cell, from the width of the month row."""
    if row_width <= 0:
        return STACK_FALLBACK_CHARS_PER_LINE
    grid_content_width = max(0.0, row_width - GRID_GAP_PX * (DAY_COLUMN_COUNT - 1))
    cell_width = grid_content_width / DAY_COLUMN_COUNT
    if cell_width <= 0:
        return STACK_FALLBACK_CHARS_PER_LINE
    return max(
        STACK_MIN_CHARS_PER_LINE,
        math.floor(cell_width / (font_size * STACK_CHAR_WIDTH_RATIO)),
    )


def layout_day_stack(
    titles: list[str],
    available_height: float,
    row_width: float,
    density_scale: float,
) -> StackLayout:
    """
    Work out the stacked-title layout of a single day cell.

    Titles are only shown when the density is high enough and every event
    fits at least one line; otherwise the stack degrades to colored bars and
    line_allocations is empty.
    """
    event_count = len(titles)
    font_size = STACK_FONT_BASE + density_scale * STACK_FONT_RANGE
    line_height = STACK_LINE_HEIGHT_BASE + density_scale * STACK_LINE_HEIGHT_RANGE
    line_height_px = font_size * line_height
    gap = (
        STACK_GAP_DENSE_PX
        if event_count > STACK_GAP_DENSE_THRESHOLD
        else STACK_GAP_SPARSE_PX
    )
    total_gap = gap * max(0, event_count - 1)
    stack_available = max(0.0, available_height - STACK_PADDING_PX - total_gap)
    max_lines_total = (
        math.floor(stack_available / line_height_px) if line_height_px > 0 else 0
    )

    chars_per_line = estimate_chars_per_line(row_width, font_size)
    estimated_lines = [
        max(1, math.ceil(len(title) / chars_per_line)) for title in titles
    ]
    show_titles = (
        density_scale >= STACK_TITLE_DENSITY_THRESHOLD
        and max_lines_total >= event_count
    )

    return {
        "font_size": font_size,
        "line_height": line_height,
        "gap": gap,
        "max_lines_total": max_lines_total,
        "chars_per_line": chars_per_line,
        "estimated_lines": estimated_lines,
        "line_allocations": (
            allocate_stack_lines(estimated_lines, max_lines_total)
            if show_titles
            else []
        ),
        "show_titles": show_titles,
    }
