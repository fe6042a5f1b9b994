import unittest

import pendulum

from dayview import Event, Window, compute_window
from dayview.service.window import unpadded_bounds


def at(hour: int, minute: int = 0, day: int = 27) -> pendulum.DateTime:
    return pendulum.datetime(2023, 10, day, hour, minute, tz="UTC")


class TestComputeWindowContract(unittest.TestCase):
    def test_no_events_gives_full_day(self) -> None:
        self.assertEqual(compute_window([]), Window(0, 1440))

    def test_single_event_is_padded_by_half_an_hour(self) -> None:
        window = compute_window([Event(start=at(10), end=at(11))])
        self.assertEqual(window, Window(570, 690))

    def test_padding_is_clamped_to_the_day(self) -> None:
        window = compute_window(
            [
                Event(start=at(0, 10), end=at(1)),
                Event(start=at(23), end=at(23, 50)),
            ]
        )
        self.assertEqual(window, Window(0, 1440))

    def test_midnight_end_extends_to_end_of_day(self) -> None:
        window = compute_window([Event(start=at(22), end=at(0, day=28))])
        self.assertEqual(window, Window(1290, 1440))

    def test_same_date_midnight_end_extends_to_end_of_day(self) -> None:
        window = compute_window([Event(start=at(22), end=at(0))])
        self.assertEqual(window, Window(1290, 1440))

    def test_padding_and_minimum_are_configurable(self) -> None:
        window = compute_window(
            [Event(start=at(10), end=at(11))], padding_minutes=0
        )
        self.assertEqual(window, Window(600, 660))

    def test_degenerate_window_falls_back_to_minimum_length(self) -> None:
        # Ends before it starts and no padding leaves an empty range
        window = compute_window(
            [Event(start=at(12), end=at(11))], padding_minutes=0
        )
        self.assertEqual(window, Window(720, 840))

    def test_degenerate_window_stays_inside_the_day(self) -> None:
        window = compute_window(
            [Event(start=at(23, 59), end=at(23, 59))], padding_minutes=0
        )
        self.assertLess(window.start, window.end)
        self.assertLessEqual(window.end, 1440)

    def test_window_covers_unpadded_bounds(self) -> None:
        events = [
            Event(start=at(8, 15), end=at(9)),
            Event(start=at(13), end=at(14, 40)),
            Event(start=at(11), end=None),
        ]
        self.assertEqual(unpadded_bounds(events), (495, 880))
        window = compute_window(events)
        self.assertLessEqual(window.start, 495)
        self.assertGreaterEqual(window.end, 880)

    def test_window_rejects_invalid_bounds(self) -> None:
        with self.assertRaises(ValueError):
            Window(600, 600)
        with self.assertRaises(ValueError):
            Window(-1, 10)
        with self.assertRaises(ValueError):
            Window(0, 1441)


if __name__ == "__main__":
    unittest.main()
