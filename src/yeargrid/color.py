# SPDX-License-Identifier: MIT

import re

UNCATEGORIZED_COLOR = "#9CA3AF"
DEFAULT_CALENDAR_COLOR = "#E4E4E7"

# Color constants for the terminal views
MONTH_LABEL_COLOR = "sandy_brown"
WEEKEND_COLOR = "bright_black"
EMPTY_CELL_COLOR = "grey23"

_HEX_COLOR_P = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_valid_color(color: object) -> bool:
    """Return True for '#RRGGBB' hex colors, the only format categories accept."""
    return isinstance(color, str) and _HEX_COLOR_P.match(color) is not None
