# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from yeargrid import configuration
from yeargrid.repository.configuration import CONFIGURATION_REPO
from yeargrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("match_description", _enabled(config["match_description"]))
    table.add_row("show_timed_events", _enabled(config["show_timed_events"]))
    table.add_row("timed_event_min_hours", f"{config['timed_event_min_hours']:g}")
    table.add_row("month_scroll_enabled", _enabled(config["month_scroll_enabled"]))
    table.add_row("month_scroll_density", str(config["month_scroll_density"]))
    table.add_row(
        "categories",
        "defaults"
        if config["categories"] is None
        else f"{len(config['categories'])} configured",
    )
    table.add_row(
        "category_priority",
        ", ".join(config["category_priority"])
        if config["category_priority"]
        else "alphabetical",
    )
    table.add_row(
        "hidden_patterns",
        ", ".join(config["hidden_patterns"]) if config["hidden_patterns"] else "None",
    )
    table.add_row(
        "hidden_calendars",
        ", ".join(config["hidden_calendars"]) if config["hidden_calendars"] else "None",
    )

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show view headers"),
    ] = None,
    match_description: Annotated[
        Optional[bool],
        typer.Option(
            "--match-description/--no-match-description",
            help="Fall back to event descriptions when a title matches no category",
        ),
    ] = None,
    show_timed_events: Annotated[
        Optional[bool],
        typer.Option(
            "--show-timed-events/--no-show-timed-events",
            help="Show single-day timed events in the year grid",
        ),
    ] = None,
    timed_event_min_hours: Annotated[
        Optional[float],
        typer.Option(
            "--timed-event-min-hours",
            help="Hide timed events shorter than this many hours (0-24, 0 shows all)",
        ),
    ] = None,
    month_scroll_enabled: Annotated[
        Optional[bool],
        typer.Option(
            "--month-scroll/--no-month-scroll",
            help="Show stacked titles under each month by default",
        ),
    ] = None,
    month_scroll_density: Annotated[
        Optional[int],
        typer.Option("--month-scroll-density", help="Stack density, 0-100"),
    ] = None,
    category_priority: Annotated[
        Optional[list[str]],
        typer.Option(
            "--category-priority",
            help="Category id in priority order (repeatable)",
        ),
    ] = None,
    remove_category_priority: Annotated[
        bool,
        typer.Option(
            "--remove-category-priority",
            help="Order categories alphabetically again",
        ),
    ] = False,
    hidden_patterns: Annotated[
        Optional[list[str]],
        typer.Option(
            "--hide",
            help="Hide events whose title contains this text (repeatable)",
        ),
    ] = None,
    remove_hidden_patterns: Annotated[
        bool, typer.Option("--remove-hidden", help="Remove all hidden patterns")
    ] = False,
    hide_calendars: Annotated[
        Optional[list[str]],
        typer.Option(
            "--hide-calendar",
            help="Leave out every event of this calendar id (repeatable)",
        ),
    ] = None,
    show_calendars: Annotated[
        Optional[list[str]],
        typer.Option(
            "--show-calendar",
            help="Show a hidden calendar id again (repeatable)",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        match_description=match_description,
        timed_event_min_hours=timed_event_min_hours,
        show_timed_events=show_timed_events,
        month_scroll_enabled=month_scroll_enabled,
        month_scroll_density=month_scroll_density,
        category_priority=category_priority,
        remove_category_priority=remove_category_priority,
        hidden_patterns=hidden_patterns,
        remove_hidden_patterns=remove_hidden_patterns,
        hide_calendars=hide_calendars,
        show_calendars=show_calendars,
    )
    view()
