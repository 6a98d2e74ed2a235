import pytest

from yeargrid.service.stack import (
    STACK_FALLBACK_CHARS_PER_LINE,
    STACK_MIN_CHARS_PER_LINE,
    allocate_stack_lines,
    estimate_chars_per_line,
    get_density_scale,
    layout_day_stack,
    month_row_height,
)


def test_room_pressure_forces_one_line_each():
    assert allocate_stack_lines([3, 3, 3], 3) == [1, 1, 1]


def test_budget_below_event_count_still_gives_one_line_each():
    assert allocate_stack_lines([4, 2], 1) == [1, 1]


def test_empty_input():
    assert allocate_stack_lines([], 10) == []


def test_everything_fits():
    assert allocate_stack_lines([2, 1, 3], 10) == [2, 1, 3]


def test_proportional_share_then_leftovers_by_need():
    assert allocate_stack_lines([5, 2, 1], 5) == [3, 1, 1]


def test_leftover_ties_go_in_input_order():
    assert allocate_stack_lines([3, 3, 3], 4) == [2, 1, 1]


@pytest.mark.parametrize(
    "needed, max_lines_total",
    [
        ([5, 2, 1], 5),
        ([4, 4, 4, 4], 7),
        ([10, 1, 3, 7], 12),
        ([2, 9], 6),
        ([3, 3, 3], 8),
    ],
)
def test_allocation_bounds(needed, max_lines_total):
    allocations = allocate_stack_lines(needed, max_lines_total)

    assert sum(allocations) <= max_lines_total
    for allocated, lines in zip(allocations, needed):
        assert 1 <= allocated <= lines


def test_density_scale_is_clamped():
    assert get_density_scale(60) == pytest.approx(0.6)
    assert get_density_scale(-10) == 0
    assert get_density_scale(250) == 1


def test_month_row_height():
    assert month_row_height(0) == 44
    assert month_row_height(1) == 300


def test_chars_per_line():
    assert estimate_chars_per_line(0, 10) == STACK_FALLBACK_CHARS_PER_LINE
    assert estimate_chars_per_line(100, 10) == STACK_MIN_CHARS_PER_LINE
    # (1240 - 30) / 31 = 39.03px per cell at a 5.5px glyph
    assert estimate_chars_per_line(1240, 10) == 7


def test_layout_shows_titles_when_dense_enough():
    stack = layout_day_stack(
        ["Dentist", "A very long title for a single day cell"], 200, 1240, 0.6
    )

    assert stack["show_titles"] is True
    assert stack["gap"] == 4
    assert len(stack["line_allocations"]) == 2
    assert sum(stack["line_allocations"]) <= stack["max_lines_total"]
    assert stack["estimated_lines"][1] > stack["estimated_lines"][0]


def test_layout_hides_titles_at_low_density():
    stack = layout_day_stack(["Dentist"], 200, 1240, 0.2)

    assert stack["show_titles"] is False
    assert stack["line_allocations"] == []


def test_layout_hides_titles_without_room_for_each_event():
    stack = layout_day_stack(["a", "b", "c", "d", "e"], 40, 1240, 1.0)

    assert stack["gap"] == 2
    assert stack["max_lines_total"] < 5
    assert stack["show_titles"] is False
