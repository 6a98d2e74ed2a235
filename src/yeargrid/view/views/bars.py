# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from yeargrid.model.layout import EventBar
from yeargrid.service.event_bars import count_rows
from yeargrid.time import date_key_to_display
from yeargrid.view.views.header import header
from yeargrid.view.views.year import MONTH_LABELS


def bars_view(year: int, bars: list[EventBar], use_color: bool = True) -> None:
    header("bars", str(year))

    bars_table = Table(box=box.SIMPLE)
    for column in ["month", "row", "days", "title", "event span"]:
        bars_table.add_column(column)

    for bar in sorted(bars, key=lambda bar: (bar["month"], bar["row"], bar["start_day"])):
        event = bar["event"]
        title = Text(event["title"], style=event["color"] if use_color else "")
        bars_table.add_row(
            MONTH_LABELS[bar["month"]],
            str(bar["row"]),
            f"{bar['start_day']}-{bar['end_day']}",
            title,
            f"{date_key_to_display(event['start_date'])} - {date_key_to_display(event['end_date'])}",
        )

    console = Console()
    console.print(bars_table)
    rows = count_rows(bars)
    if rows:
        console.print(
            f"[dim]{len(bars)} bars, at most {max(rows.values())} rows in a month[/dim]"
        )
