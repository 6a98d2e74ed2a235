# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from yaml import YAMLError

from yeargrid import configuration as app_configuration
from yeargrid.initialize import initialize
from yeargrid.model.layout import Point
from yeargrid.repository.configuration import CONFIGURATION_REPO
from yeargrid.repository.event_source import EventSourceRepository
from yeargrid.service.categorize import classify as classify_title
from yeargrid.service.stack import (
    get_density_scale,
    layout_day_stack,
    month_row_height,
)
from yeargrid.service.tooltip import TooltipLayout
from yeargrid.service.year_layout import YearLayout, build_year_layout
from yeargrid.terminal import configuration
from yeargrid.terminal.custom_typer import OrderedAliasedTyperGroup
from yeargrid.terminal.parse import parse_date_key, parse_size, resolve_year
from yeargrid.view import state as view_state
from yeargrid.view.views.bars import bars_view
from yeargrid.view.views.category import categories_view, classification_view
from yeargrid.view.views.day import day_view
from yeargrid.view.views.tooltip import tooltip_view
from yeargrid.view.views.year import year_view

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="yeargrid - a year of calendar events on one screen",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")

console = Console()

EventsFile = Annotated[
    Path,
    typer.Argument(help="YAML or JSON file of provider events", dir_okay=False),
]
YearOption = Annotated[
    Optional[int],
    typer.Option("--year", "-y", help="year to lay out (defaults to this year)"),
]


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )


@app.callback()
def main_callback(
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="use this config file instead of the default"),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output in views"),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log layout decisions")
    ] = False,
) -> None:
    """
    yeargrid - a year of calendar events on one screen

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if config_path is not None:
        app_configuration.set_config_path(config_path)
        CONFIGURATION_REPO.reset()
    try:
        initialize()
    except (OSError, YAMLError, ValueError) as e:
        console.print(f"[red]Could not load configuration: {e}[/red]")
        raise typer.Exit(1)
    if no_header:
        view_state.set_show_header(False)


def _load_year_layout(events_file: Path, year: int) -> YearLayout:
    repository = EventSourceRepository(events_file)
    try:
        calendars = repository.calendars
    except (OSError, YAMLError, ValueError) as e:
        console.print(f"[red]Could not read events from {events_file}: {e}[/red]")
        raise typer.Exit(1)
    return build_year_layout(
        calendars,
        CONFIGURATION_REPO.get_category_rules(),
        CONFIGURATION_REPO.get_config(),
        year,
    )


@app.command("year, y", no_args_is_help=True)
def year(
    events_file: EventsFile,
    year: YearOption = None,
    scroll: Annotated[
        Optional[bool],
        typer.Option(
            "--scroll/--no-scroll",
            help="list stacked day titles under each month",
        ),
    ] = None,
    density: Annotated[
        Optional[int],
        typer.Option("--density", help="stack density 0-100"),
    ] = None,
    width: Annotated[
        float, typer.Option("--width", help="month row width in pixels")
    ] = 1200,
) -> None:
    """Show the year grid: multi-day bars and single-day dots per month."""
    config = CONFIGURATION_REPO.get_config()
    layout = _load_year_layout(events_file, resolve_year(year))
    year_view(
        layout,
        scroll=config["month_scroll_enabled"] if scroll is None else scroll,
        density=config["month_scroll_density"] if density is None else density,
        row_width=width,
    )


@app.command("bars, b", no_args_is_help=True)
def bars(
    events_file: EventsFile,
    year: YearOption = None,
    no_color: Annotated[bool, typer.Option("--no-color", "-nc")] = False,
) -> None:
    """List the packed multi-day bars of a year."""
    resolved_year = resolve_year(year)
    layout = _load_year_layout(events_file, resolved_year)
    bars_view(resolved_year, layout["bars"], use_color=not no_color)


@app.command("day, d", no_args_is_help=True)
def day(
    events_file: EventsFile,
    date: Annotated[str, typer.Argument(help="YYYY-MM-DD, today, yesterday or tomorrow")],
    height: Annotated[
        Optional[float],
        typer.Option("--height", help="day cell height in pixels"),
    ] = None,
    width: Annotated[
        float, typer.Option("--width", help="month row width in pixels")
    ] = 1200,
    density: Annotated[
        Optional[int], typer.Option("--density", help="stack density 0-100")
    ] = None,
) -> None:
    """Summarize one day: events touching it, its title stack and timed column."""
    date_key = parse_date_key(date)
    config = CONFIGURATION_REPO.get_config()
    layout = _load_year_layout(events_file, int(date_key[:4]))

    density_scale = get_density_scale(
        config["month_scroll_density"] if density is None else density
    )
    if height is None:
        height = month_row_height(density_scale)
    stack = layout_day_stack(
        [event["title"] for event in layout["single_day_map"].get(date_key, [])],
        height,
        width,
        density_scale,
    )
    day_view(layout, date_key, stack)


@app.command("classify, cl", no_args_is_help=True)
def classify(
    title: Annotated[str, typer.Argument(help="event title")],
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
) -> None:
    """Show which category a title falls into."""
    config = CONFIGURATION_REPO.get_config()
    rules = CONFIGURATION_REPO.get_category_rules()
    match = classify_title(
        title.strip(),
        rules,
        description=description,
        match_description=config["match_description"],
    )
    classification_view(title, match, rules)


@app.command("categories, ca")
def categories() -> None:
    """Show categories in match and render priority order."""
    categories_view(CONFIGURATION_REPO.get_category_rules())


@app.command("tooltip, tt", no_args_is_help=True)
def tooltip(
    x: Annotated[float, typer.Argument(help="pointer x in viewport pixels")],
    y: Annotated[float, typer.Argument(help="pointer y in viewport pixels")],
    size: Annotated[
        str, typer.Option("--size", "-s", help="tooltip size, WIDTHxHEIGHT")
    ] = "320x180",
    viewport: Annotated[
        str, typer.Option("--viewport", "-vp", help="viewport size, WIDTHxHEIGHT")
    ] = "1280x800",
) -> None:
    """Compute where an event tooltip opened at (x, y) is placed."""
    tooltip_size = parse_size(size)
    viewport_size = parse_size(viewport)
    if tooltip_size is None or viewport_size is None:
        raise typer.BadParameter("size and viewport are required")

    origin: Point = {"x": x, "y": y}
    layout = TooltipLayout(origin, viewport_size)
    placement = layout.measure(tooltip_size)
    tooltip_view(origin, tooltip_size, viewport_size, placement)


def run() -> None:
    app()
