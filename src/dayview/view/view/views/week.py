# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dayview.service.calendar import DayLayout
from dayview.service.day import day_with_date_label, month_year_label
from dayview.time import minutes_to_clock_str
from dayview.view.view.views.header import header


def week_view(source_name: str, layouts: list[DayLayout]) -> None:
    """
    Display a one-line summary per day of a week.

    Args:
        source_name: Name of the event source shown in the header
        layouts: Day layouts, one per day of the week
    """
    sub_header = f"{month_year_label(layouts[0].day)} - week" if layouts else "week"
    header(source_name, sub_header)

    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("Day", no_wrap=True)
    table.add_column("All-day", justify="right")
    table.add_column("Timed", justify="right")
    table.add_column("Window", no_wrap=True)
    table.add_column("Height", justify="right")
    table.add_column("Overlapping", justify="right")
    table.add_column("Widest", justify="right")

    for layout in layouts:
        day_label: Text | str = day_with_date_label(layout.day)
        if layout.now_px is not None:
            day_label = Text(str(day_label), style="bold black on bright_cyan")
        elif layout.day.weekday() >= 5:
            day_label = Text(str(day_label), style="bold white on orange4")

        if layout.laid_out:
            window = (
                f"{minutes_to_clock_str(layout.window.start)}-"
                f"{minutes_to_clock_str(layout.window.end)}"
            )
            height = f"{layout.height_px:g}px"
        else:
            window = "[dim]-[/dim]"
            height = "[dim]-[/dim]"

        table.add_row(
            day_label,
            str(len(layout.all_day_events)),
            str(len(layout.laid_out)),
            window,
            height,
            str(layout.overlapping_count),
            str(layout.widest_column_count),
        )

    console.print(table)
