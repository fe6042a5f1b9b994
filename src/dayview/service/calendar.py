# SPDX-License-Identifier: MIT

import datetime
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

import pendulum

from dayview.geometry import DEFAULT_GEOMETRY, TimeGeometry
from dayview.model.event import Event
from dayview.model.laid_out_event import LaidOutEvent
from dayview.model.window import Window
from dayview.service.day import (
    clip_to_day,
    events_for_day,
    split_all_day,
    week_days,
)
from dayview.service.layout import layout_events
from dayview.service.now import now_indicator_px
from dayview.service.window import (
    MIN_WINDOW_MINUTES,
    WINDOW_PADDING_MINUTES,
    compute_window,
)
from dayview.time import to_date


@dataclass(frozen=True)
class DayLayout:
    day: pendulum.Date
    all_day_events: list[Event]
    window: Window
    laid_out: list[LaidOutEvent]
    height_px: float
    hour_marks: list[tuple[int, float]]
    now_px: Optional[float]

    @property
    def widest_column_count(self) -> int:
        return max((event.column_count for event in self.laid_out), default=0)

    @property
    def overlapping_count(self) -> int:
        return sum(1 for event in self.laid_out if event.column_count > 1)


def build_day_layout(
    events: Sequence[Event],
    day: datetime.date,
    now: Optional[datetime.datetime] = None,
    geometry: TimeGeometry = DEFAULT_GEOMETRY,
    padding_minutes: int = WINDOW_PADDING_MINUTES,
    min_window_minutes: int = MIN_WINDOW_MINUTES,
) -> DayLayout:
    """
    Lay out one day of a calendar.

    Events that do not touch the day are dropped, events covering the whole day
    are set aside as all-day events and the rest are cut at midnight before the
    window is chosen and columns are assigned.

    Args:
        events: Events of any day
        day: The displayed day
        now: Reference time for the current-time marker, None for no marker
        geometry: Minute to pixel mapping
        padding_minutes: Window padding around the day's events
        min_window_minutes: Window length used for degenerate input

    Returns:
        The DayLayout of the day
    """
    date = to_date(day)
    all_day_events, timed_events = split_all_day(events_for_day(events, date), date)
    timed_events = [clip_to_day(event, date) for event in timed_events]

    window = compute_window(
        timed_events,
        padding_minutes=padding_minutes,
        min_window_minutes=min_window_minutes,
    )
    now_px = (
        now_indicator_px(now, date, window, geometry) if now is not None else None
    )
    return DayLayout(
        day=date,
        all_day_events=all_day_events,
        window=window,
        laid_out=layout_events(timed_events, window, geometry),
        height_px=geometry.window_height_px(window),
        hour_marks=geometry.hour_marks(window),
        now_px=now_px,
    )


def build_week_layout(
    events: Sequence[Event],
    week_start: datetime.date,
    now: Optional[datetime.datetime] = None,
    geometry: TimeGeometry = DEFAULT_GEOMETRY,
    padding_minutes: int = WINDOW_PADDING_MINUTES,
    min_window_minutes: int = MIN_WINDOW_MINUTES,
) -> list[DayLayout]:
    """Lay out the seven days starting at week_start, each with its own window."""
    return [
        build_day_layout(
            events,
            day,
            now=now,
            geometry=geometry,
            padding_minutes=padding_minutes,
            min_window_minutes=min_window_minutes,
        )
        for day in week_days(week_start)
    ]
