import tempfile
import textwrap
import unittest
from pathlib import Path

import pendulum

from dayview.repository.event import EventRepository, EventSourceError


class TestEventRepositoryContract(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, name: str, content: str) -> Path:
        path = self.tmp / name
        path.write_text(textwrap.dedent(content))
        return path

    def test_loads_list_of_events(self) -> None:
        path = self.write(
            "events.yaml",
            """
            - id: standup
              start: "2023-10-27T09:30:00"
              end: "2023-10-27T09:45:00"
              title: Standup
              color: green
            - start: 2023-10-27 13:00:00
              end: 2023-10-27 14:00:00
            - start: "2023-10-27T16:00"
            """,
        )
        events = EventRepository(path).events

        self.assertEqual(len(events), 3)
        standup, lunch, open_ended = events
        self.assertEqual(standup.id, "standup")
        self.assertEqual(standup.payload, {"title": "Standup", "color": "green"})
        self.assertEqual((standup.start.hour, standup.start.minute), (9, 30))
        self.assertEqual((standup.end.hour, standup.end.minute), (9, 45))
        self.assertIsInstance(standup.start, pendulum.DateTime)

        # ids default to the record index
        self.assertEqual(lunch.id, 1)
        self.assertEqual(lunch.payload, {})
        self.assertEqual(lunch.start.hour, 13)

        self.assertEqual(open_ended.id, 2)
        self.assertIsNone(open_ended.end)

    def test_loads_events_mapping_and_dates(self) -> None:
        path = self.write(
            "events.yaml",
            """
            events:
              - id: holiday
                start: 2023-10-27
                end: 2023-10-28
            """,
        )
        [holiday] = EventRepository(path).events
        self.assertEqual(holiday.start.date(), pendulum.Date(2023, 10, 27))
        self.assertEqual((holiday.start.hour, holiday.start.minute), (0, 0))
        self.assertEqual(holiday.end.date(), pendulum.Date(2023, 10, 28))

    def test_empty_file_has_no_events(self) -> None:
        self.assertEqual(EventRepository(self.write("empty.yaml", "")).events, [])
        self.assertEqual(
            EventRepository(self.write("none.yaml", "events:\n")).events, []
        )

    def test_yaml_source_ignores_range(self) -> None:
        path = self.write(
            "events.yaml",
            """
            - start: "2023-10-27T09:30:00"
            - start: "2024-01-01T09:30:00"
            """,
        )
        start = pendulum.datetime(2023, 10, 27, tz="local")
        events = EventRepository(path).get_events(start, start.add(days=1))
        self.assertEqual(len(events), 2)

    def test_missing_file(self) -> None:
        with self.assertRaises(EventSourceError):
            EventRepository(self.tmp / "missing.yaml").events

    def test_invalid_yaml(self) -> None:
        with self.assertRaises(EventSourceError):
            EventRepository(self.write("bad.yaml", "events: [")).events

    def test_unexpected_top_level(self) -> None:
        with self.assertRaises(EventSourceError):
            EventRepository(self.write("scalar.yaml", "42\n")).events

    def test_bad_records_name_their_index(self) -> None:
        cases = {
            "not-mapping.yaml": '- start: "2023-10-27T09:30:00"\n- just text\n',
            "no-start.yaml": '- start: "2023-10-27T09:30:00"\n- end: "2023-10-27T10:00:00"\n',
            "bad-time.yaml": '- start: "2023-10-27T09:30:00"\n- start: "not a time"\n',
        }
        for name, content in cases.items():
            with self.subTest(name=name):
                with self.assertRaises(EventSourceError) as raised:
                    EventRepository(self.write(name, content)).events
                self.assertIn("event #1", str(raised.exception))

    def test_loads_icalendar_file(self) -> None:
        path = self.write(
            "calendar.ics",
            """\
            BEGIN:VCALENDAR
            VERSION:2.0
            PRODID:-//dayview//tests//EN
            BEGIN:VEVENT
            UID:review@example.com
            DTSTAMP:20231001T000000Z
            DTSTART:20231027T120000Z
            DTEND:20231027T130000Z
            SUMMARY:Review
            LOCATION:Room 1
            END:VEVENT
            END:VCALENDAR
            """,
        )
        repository = EventRepository(path)
        self.assertTrue(repository.is_ics)

        start = pendulum.datetime(2023, 10, 27, tz="local")
        [review] = repository.get_events(start, start.add(days=1))
        self.assertEqual(review.id, "review@example.com")
        self.assertEqual(review.payload["title"], "Review")
        self.assertEqual(review.payload["location"], "Room 1")
        self.assertEqual(review.end, review.start.add(hours=1))


if __name__ == "__main__":
    unittest.main()
