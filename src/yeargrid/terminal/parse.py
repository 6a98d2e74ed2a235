# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from yeargrid.model.layout import Size
from yeargrid.time import date_from_str, date_to_key


def parse_date_key(date_param: str) -> str:
    """Accept YYYY-MM-DD, today, yesterday or tomorrow and return a date key."""
    if date_param in ("today", "t"):
        return date_to_key(pendulum.today("local").date())
    if date_param in ("yesterday", "y"):
        return date_to_key(pendulum.yesterday("local").date())
    if date_param in ("tomorrow", "o"):
        return date_to_key(pendulum.tomorrow("local").date())

    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_param):
        raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")
    date = date_from_str(date_param)
    if date is None:
        raise typer.BadParameter(f"Not a calendar date: {date_param}")
    return date_to_key(date)


def parse_size(size_param: Optional[str]) -> Optional[Size]:
    """Parse a 'WIDTHxHEIGHT' pixel size such as '320x180'."""
    if size_param is None:
        return None
    size_match = re.match(r"^(\d+(?:\.\d+)?)x(\d+(?:\.\d+)?)$", size_param.strip())
    if not size_match:
        raise typer.BadParameter("Incorrect size format, expected WIDTHxHEIGHT")
    return {"width": float(size_match.group(1)), "height": float(size_match.group(2))}


def resolve_year(year: Optional[int]) -> int:
    if year is None:
        return pendulum.now("local").year
    if year < 1 or year > 9999:
        raise typer.BadParameter(f"Year must be between 1 and 9999, got {year}")
    return year
