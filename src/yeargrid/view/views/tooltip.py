# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from yeargrid.model.layout import Point, Size, TooltipPhase, TooltipPlacement
from yeargrid.view.views.header import header


def tooltip_view(
    origin: Point, tooltip_size: Size, viewport: Size, placement: TooltipPlacement
) -> None:
    header("tooltip", placement["phase"])

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")
    table.add_row("origin", f"{origin['x']:g}, {origin['y']:g}")
    table.add_row("tooltip", f"{tooltip_size['width']:g} x {tooltip_size['height']:g}")
    table.add_row("viewport", f"{viewport['width']:g} x {viewport['height']:g}")
    table.add_row("left", f"{placement['left']:g}")
    table.add_row("top", f"{placement['top']:g}")
    table.add_row(
        "visible",
        "✓" if placement["phase"] == TooltipPhase.MEASURED else "✗ (not measured)",
    )

    console = Console()
    console.print(table)
