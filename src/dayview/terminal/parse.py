# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from dayview.time import datetime_from_str, start_of_day, to_date


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a displayed-day option.

    Valid inputs: YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a day
    offset from today such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return to_date(datetime_from_str(date))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").date()
    raise typer.BadParameter("Incorrect date format")


def parse_datetime(
    datetime_param: Optional[str | int],
) -> Optional[pendulum.DateTime]:
    """
    Parse a reference-time option.

    Valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm (today), now (n).
    """
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime '{datetime}': {e}")

    clock = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if clock:
        hour, minute = int(clock.group(1)), int(clock.group(2))
        if hour > 23 or minute > 59:
            raise typer.BadParameter(f"'{datetime}' is not a time of day")
        # on today's date
        return start_of_day(pendulum.today("local")).set(hour=hour, minute=minute)

    if datetime == "now" or datetime == "n":
        return pendulum.now("local")
    raise typer.BadParameter("Incorrect datetime format")
