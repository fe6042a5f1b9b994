# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

import icalevents.icalevents
import pendulum
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from dayview import time
from dayview.model.event import Event

logger = logging.getLogger(__name__)

ICS_SUFFIXES = (".ics", ".ical")


class EventSourceError(Exception):
    """Raised when an event source cannot be read."""

    pass


class EventRepository:
    """
    Read-only source of events backed by a YAML or iCalendar file.

    YAML files hold a list of event mappings, or a mapping with an `events`
    list. Each mapping needs a `start`; `end` and `id` are optional and every
    other key is kept as the event payload.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._events: Optional[list[Event]] = None

    @property
    def is_ics(self) -> bool:
        return self.path.suffix.lower() in ICS_SUFFIXES

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def get_events(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[Event]:
        """
        Events that may fall between start and end.

        The range narrows iCalendar reads only; YAML sources return every event
        and leave day filtering to the caller.
        """
        if self.is_ics:
            return self.__load_ics(start, end)
        return list(self.events)

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise EventSourceError(f"event source {self.path} does not exist")

        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise EventSourceError(f"could not parse {self.path}: {e}") from e

        if raw is None:
            records: list[Any] = []
        elif isinstance(raw, dict) and "events" in raw:
            records = raw["events"] or []
        elif isinstance(raw, list):
            records = raw
        else:
            raise EventSourceError(
                f"{self.path} must hold a list of events or an 'events' list"
            )

        self._events = [
            self.__convert_event_for_deserialization(index, record)
            for index, record in enumerate(records)
        ]
        logger.debug("loaded %d events from %s", len(self._events), self.path)

    def __convert_event_for_deserialization(self, index: int, record: Any) -> Event:
        if not isinstance(record, dict):
            raise EventSourceError(f"event #{index} in {self.path} is not a mapping")
        if record.get("start") is None:
            raise EventSourceError(f"event #{index} in {self.path} has no start")

        try:
            start = time.datetime_from_value(record["start"])
            end = time.datetime_from_value_optional(record.get("end"))
        except ValueError as e:
            raise EventSourceError(
                f"event #{index} in {self.path} has an invalid time: {e}"
            ) from e

        payload = {
            key: value
            for key, value in record.items()
            if key not in ("id", "start", "end")
        }
        return Event(
            start=start,
            end=end,
            id=record.get("id", index),
            payload=payload,
        )

    def __load_ics(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[Event]:
        if not self.path.is_file():
            raise EventSourceError(f"event source {self.path} does not exist")

        try:
            ical_events = icalevents.icalevents.events(
                file=self.path,
                start=start,
                end=end,
            )
        except ValueError as e:
            raise EventSourceError(f"could not parse {self.path}: {e}") from e

        events = []
        for ical_event in ical_events:
            # Skip events without a start time
            if ical_event.start is None:
                continue

            all_day = getattr(ical_event, "all_day", False)
            event_start = _ical_to_local(ical_event.start, all_day)
            event_end = (
                _ical_to_local(ical_event.end, all_day) if ical_event.end else None
            )
            events.append(
                Event(
                    start=event_start,
                    end=event_end,
                    id=ical_event.uid,
                    payload={
                        "title": ical_event.summary,
                        "description": ical_event.description,
                        "location": ical_event.location,
                    },
                )
            )

        events.sort(key=lambda event: event.start)
        logger.debug("loaded %d events from %s", len(events), self.path)
        return events


def _ical_to_local(value: Any, all_day: bool) -> pendulum.DateTime:
    # All-day events keep their calendar date whatever the local offset is
    if all_day or not hasattr(value, "hour"):
        return time.start_of_day(value)
    return pendulum.instance(value).in_tz("local")
