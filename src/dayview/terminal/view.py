# SPDX-License-Identifier: MIT

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from dayview.model.event import Event
from dayview.repository.configuration import CONFIGURATION_REPO
from dayview.repository.event import EventRepository, EventSourceError
from dayview.service.calendar import build_day_layout, build_week_layout
from dayview.service.day import start_of_week
from dayview.terminal.parse import parse_date, parse_datetime
from dayview.terminal.validate import validate_granularity
from dayview.time import now_local, start_of_day
from dayview.view.view.views.day import day_view, serialize_day_layout
from dayview.view.view.views.week import week_view

DATE_HELP = (
    "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
)
NOW_HELP = "valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, now"


class OutputFormat(str, Enum):
    table = "table"
    yaml = "yaml"


def day(
    source: Annotated[
        Path, typer.Argument(help="YAML or iCalendar file holding the events")
    ],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    now: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--now",
            "-n",
            parser=parse_datetime,
            help=f"reference time for the current-time marker; {NOW_HELP}",
        ),
    ] = None,
    granularity: Annotated[
        int,
        typer.Option(
            "--granularity",
            "-g",
            callback=validate_granularity,
            help="minutes per timeline row",
        ),
    ] = 30,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f")
    ] = OutputFormat.table,
) -> None:
    """Lay out the events of one day."""
    config = CONFIGURATION_REPO.get_config()
    geometry = CONFIGURATION_REPO.get_geometry()

    reference_now = now if now is not None else now_local()
    displayed_day = date if date is not None else reference_now.date()

    day_start = start_of_day(displayed_day)
    events = _load_events(source, day_start, day_start.add(days=1))

    layout = build_day_layout(
        events,
        displayed_day,
        now=reference_now,
        geometry=geometry,
        padding_minutes=config["window_padding_minutes"],
        min_window_minutes=config["min_window_minutes"],
    )

    if output_format == OutputFormat.yaml:
        serialized = serialize_day_layout(
            layout,
            vertical_gap_px=config["event_vertical_gap_px"],
            horizontal_gap_px=config["event_horizontal_gap_px"],
            min_height_px=config["min_event_height_px"],
        )
        typer.echo(dump(serialized, Dumper=Dumper, sort_keys=False), nl=False)
        return

    day_view(
        source.name,
        layout,
        geometry,
        granularity=granularity,
        vertical_gap_px=config["event_vertical_gap_px"],
        horizontal_gap_px=config["event_horizontal_gap_px"],
        min_height_px=config["min_event_height_px"],
    )


def week(
    source: Annotated[
        Path, typer.Argument(help="YAML or iCalendar file holding the events")
    ],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help=f"any day of the week to show; {DATE_HELP}",
        ),
    ] = None,
    now: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--now", "-n", parser=parse_datetime, help=NOW_HELP),
    ] = None,
) -> None:
    """Summarize the layout of each day of a week."""
    config = CONFIGURATION_REPO.get_config()
    geometry = CONFIGURATION_REPO.get_geometry()

    reference_now = now if now is not None else now_local()
    week_start = start_of_week(date if date is not None else reference_now.date())

    range_start = start_of_day(week_start)
    events = _load_events(source, range_start, range_start.add(weeks=1))

    layouts = build_week_layout(
        events,
        week_start,
        now=reference_now,
        geometry=geometry,
        padding_minutes=config["window_padding_minutes"],
        min_window_minutes=config["min_window_minutes"],
    )
    week_view(source.name, layouts)


def _load_events(
    source: Path, start: pendulum.DateTime, end: pendulum.DateTime
) -> list[Event]:
    repository = EventRepository(source)
    try:
        return repository.get_events(start, end)
    except EventSourceError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(1)
