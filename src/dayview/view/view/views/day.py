# SPDX-License-Identifier: MIT

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dayview.geometry import TimeGeometry, snap_down
from dayview.model.event import Event
from dayview.model.laid_out_event import LaidOutEvent
from dayview.service.calendar import DayLayout
from dayview.service.day import day_with_date_label, month_year_label
from dayview.time import datetime_to_iso_str, minutes_to_clock_str
from dayview.view.box import Box, box_for
from dayview.view.view.views.header import header

LANE_WIDTH = 40


def day_view(
    source_name: str,
    layout: DayLayout,
    geometry: TimeGeometry,
    granularity: int = 30,
    vertical_gap_px: int = 4,
    horizontal_gap_px: int = 4,
    min_height_px: int = 12,
) -> None:
    """
    Display the laid out day as a lane timeline followed by its box geometry.

    Args:
        source_name: Name of the event source shown in the header
        layout: The computed layout of the day
        geometry: Minute to pixel mapping the layout was built with
        granularity: Minutes per timeline row
        vertical_gap_px: Gap subtracted from each box height
        horizontal_gap_px: Gap kept on each side of a box
        min_height_px: Smallest box height
    """
    header(source_name, f"{month_year_label(layout.day)} - day")

    console = Console()
    console.print(f"\n[bold]{day_with_date_label(layout.day)}[/bold]\n")

    if layout.all_day_events:
        for event in layout.all_day_events:
            line = Text()
            line.append("■ ", style=_event_color(event))
            line.append(_event_title(event), style=_event_color(event))
            console.print(line)
        console.print()

    _render_timeline(console, layout, geometry, granularity)

    if not layout.laid_out:
        console.print("[dim]no timed events[/dim]")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Time", no_wrap=True)
    table.add_column("Column", justify="right")
    table.add_column("Top", justify="right")
    table.add_column("Height", justify="right")
    table.add_column("Left", justify="right")
    table.add_column("Width", justify="right")

    rows = sorted(layout.laid_out, key=lambda e: (e.start_minute, e.column_index))
    for laid_out in rows:
        event_box = box_for(
            laid_out,
            vertical_gap_px=vertical_gap_px,
            horizontal_gap_px=horizontal_gap_px,
            min_height_px=min_height_px,
        )
        table.add_row(
            str(laid_out.event.id),
            Text(_event_title(laid_out.event), style=_event_color(laid_out.event)),
            f"{minutes_to_clock_str(laid_out.start_minute)}-"
            f"{minutes_to_clock_str(laid_out.end_minute)}",
            f"{laid_out.column_index + 1}/{laid_out.column_count}",
            f"{event_box.top_px:g}px",
            f"{event_box.height_px:g}px",
            f"{event_box.left_percent:.1f}%",
            f"{event_box.width_percent:.1f}%",
        )

    console.print(table)
    console.print(
        f"window {minutes_to_clock_str(layout.window.start)}-"
        f"{minutes_to_clock_str(layout.window.end)}, {layout.height_px:g}px tall",
        style="dim",
    )


def serialize_day_layout(
    layout: DayLayout,
    vertical_gap_px: int = 4,
    horizontal_gap_px: int = 4,
    min_height_px: int = 12,
) -> dict[str, Any]:
    """Plain data form of a day layout, ready for YAML output."""
    return {
        "day": layout.day.isoformat(),
        "window": {
            "start": layout.window.start,
            "end": layout.window.end,
            "height_px": layout.height_px,
        },
        "now_px": layout.now_px,
        "all_day": [_serialize_event(event) for event in layout.all_day_events],
        "events": [
            _serialize_laid_out_event(
                laid_out,
                box_for(
                    laid_out,
                    vertical_gap_px=vertical_gap_px,
                    horizontal_gap_px=horizontal_gap_px,
                    min_height_px=min_height_px,
                ),
            )
            for laid_out in layout.laid_out
        ],
    }


def _render_timeline(
    console: Console, layout: DayLayout, geometry: TimeGeometry, granularity: int
) -> None:
    now_minute: Optional[int] = None
    if layout.now_px is not None:
        now_minute = layout.window.start + round(
            layout.now_px / geometry.pixels_per_minute
        )

    slot_start = snap_down(layout.window.start, granularity)
    while slot_start < layout.window.end:
        slot_end = slot_start + granularity
        time_str = minutes_to_clock_str(slot_start)

        line = Text()
        if now_minute is not None and slot_start <= now_minute < slot_end:
            line.append(f"{time_str} ", style="bold black on bright_cyan")
        else:
            line.append(f"{time_str} ", style="dim")
        line.append("│ ", style="bright_black")

        cells: list[tuple[str, str]] = [(" ", "")] * LANE_WIDTH
        for laid_out in layout.laid_out:
            if laid_out.start_minute >= slot_end or laid_out.end_minute <= slot_start:
                continue
            _fill_lane(cells, laid_out, slot_start, slot_end)

        for char, style in cells:
            line.append(char, style=style)
        console.print(line)

    console.print()


def _fill_lane(
    cells: list[tuple[str, str]],
    laid_out: LaidOutEvent,
    slot_start: int,
    slot_end: int,
) -> None:
    left = laid_out.column_index * LANE_WIDTH // laid_out.column_count
    right = (laid_out.column_index + 1) * LANE_WIDTH // laid_out.column_count
    # leave one blank cell between neighbouring columns
    width = max(1, right - left - 1)
    color = _event_color(laid_out.event)

    if slot_start <= laid_out.start_minute < slot_end:
        title = _event_title(laid_out.event)
        if len(title) > width:
            title = title[: max(0, width - 1)] + "…" if width > 1 else title[:width]
        title = title.ljust(width)
        for offset, char in enumerate(title):
            cells[left + offset] = (char, f"bold black on {color}")
    else:
        for offset in range(width):
            cells[left + offset] = ("█", color)


def _event_title(event: Event) -> str:
    if isinstance(event.payload, dict):
        title = event.payload.get("title") or event.payload.get("name")
        if title:
            return str(title)
    return "[no title]" if event.id is None else str(event.id)


def _event_color(event: Event) -> str:
    if isinstance(event.payload, dict):
        color = event.payload.get("color")
        if color:
            return str(color)
    return "white"


def _serialize_event(event: Event) -> dict[str, Any]:
    return {
        "id": event.id,
        "title": _event_title(event),
        "start": datetime_to_iso_str(event.start),
        "end": datetime_to_iso_str(event.end) if event.end is not None else None,
    }


def _serialize_laid_out_event(laid_out: LaidOutEvent, event_box: Box) -> dict[str, Any]:
    return {
        **_serialize_event(laid_out.event),
        "start_minute": laid_out.start_minute,
        "end_minute": laid_out.end_minute,
        "top_px": laid_out.top_px,
        "height_px": laid_out.height_px,
        "column_index": laid_out.column_index,
        "column_count": laid_out.column_count,
        "box": event_box.css(),
    }
