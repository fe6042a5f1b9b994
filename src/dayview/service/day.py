# SPDX-License-Identifier: MIT

import datetime
from collections.abc import Sequence
from dataclasses import replace

import pendulum

from dayview.model.event import Event
from dayview.time import start_of_day, to_date


def is_same_day(first: datetime.date, second: datetime.date) -> bool:
    return to_date(first) == to_date(second)


def is_same_month(first: datetime.date, second: datetime.date) -> bool:
    return first.year == second.year and first.month == second.month


def is_all_day_for_date(event: Event, day: datetime.date) -> bool:
    """
    Check whether an event covers the whole of the given day.

    The event must start at or before midnight and run until the last
    millisecond of the day or later. Events without an end never qualify.
    """
    if event.end is None:
        return False
    day_start = start_of_day(day)
    last_moment = day_start.add(days=1).subtract(microseconds=1000)
    return _naive(event.start) <= _naive(day_start) and _naive(event.end) >= _naive(
        last_moment
    )


def events_for_day(events: Sequence[Event], day: datetime.date) -> list[Event]:
    """
    Filter events to those that overlap the given day.

    An event without an end belongs to the day its start falls on.
    """
    day_start = _naive(start_of_day(day))
    next_day_start = day_start + datetime.timedelta(days=1)

    filtered_events = []
    for event in events:
        event_start = _naive(event.start)
        if event.end is None:
            if day_start <= event_start < next_day_start:
                filtered_events.append(event)
            continue

        event_end = _naive(event.end)
        if event_start < next_day_start and event_end > day_start:
            filtered_events.append(event)
        elif event_start == event_end and day_start <= event_start < next_day_start:
            filtered_events.append(event)
    return filtered_events


def clip_to_day(event: Event, day: datetime.date) -> Event:
    """
    Cut an event at the day boundaries.

    Returns the event itself when it already lies within the day, otherwise a
    copy whose start and end are moved to midnight.
    """
    date = to_date(day)
    day_start = _naive(start_of_day(date))
    next_day_start = day_start + datetime.timedelta(days=1)

    start = event.start
    end = event.end
    if _naive(start) < day_start:
        # keep the event's own tzinfo so wall-clock ordering is unchanged
        start = start.replace(
            year=date.year,
            month=date.month,
            day=date.day,
            hour=0,
            minute=0,
            second=0,
            microsecond=0,
        )
    if end is not None and _naive(end) > next_day_start:
        next_date = date.add(days=1)
        end = end.replace(
            year=next_date.year,
            month=next_date.month,
            day=next_date.day,
            hour=0,
            minute=0,
            second=0,
            microsecond=0,
        )

    if start is event.start and end is event.end:
        return event
    return replace(event, start=start, end=end)


def split_all_day(
    events: Sequence[Event], day: datetime.date
) -> tuple[list[Event], list[Event]]:
    """Separate events covering the whole day from timed ones, keeping order."""
    all_day_events = []
    timed_events = []
    for event in events:
        if is_all_day_for_date(event, day):
            all_day_events.append(event)
        else:
            timed_events.append(event)
    return all_day_events, timed_events


def next_day(day: datetime.date) -> pendulum.Date:
    return to_date(day).add(days=1)


def previous_day(day: datetime.date) -> pendulum.Date:
    return to_date(day).subtract(days=1)


def start_of_week(day: datetime.date) -> pendulum.Date:
    """Monday of the week containing the day."""
    date = to_date(day)
    return date.subtract(days=date.weekday())


def week_days(week_start: datetime.date) -> list[pendulum.Date]:
    start = to_date(week_start)
    return [start.add(days=offset) for offset in range(7)]


def next_week(week_start: datetime.date) -> pendulum.Date:
    return to_date(week_start).add(weeks=1)


def previous_week(week_start: datetime.date) -> pendulum.Date:
    return to_date(week_start).subtract(weeks=1)


def month_year_label(day: datetime.date) -> str:
    return to_date(day).format("MMMM YYYY")


def day_with_date_label(day: datetime.date) -> str:
    return to_date(day).format("dddd D")


def _naive(value: datetime.datetime) -> datetime.datetime:
    # Events carry local wall-clock times; compare them on their fields alone.
    return value.replace(tzinfo=None)
