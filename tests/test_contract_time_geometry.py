import unittest

import pendulum

from dayview.geometry import (
    DEFAULT_GEOMETRY,
    TimeGeometry,
    snap_down,
    snap_to_step,
    snap_up,
)
from dayview.model.window import FULL_DAY, Window
from dayview.time import end_minutes, minutes_since_midnight


def at(hour: int, minute: int = 0, day: int = 27) -> pendulum.DateTime:
    return pendulum.datetime(2023, 10, day, hour, minute, tz="UTC")


class TestSnapContract(unittest.TestCase):
    def test_snap_to_step_rounds_to_nearest(self) -> None:
        self.assertEqual(snap_to_step(3), 5)
        self.assertEqual(snap_to_step(2), 0)
        self.assertEqual(snap_to_step(7), 5)
        self.assertEqual(snap_to_step(12, 10), 10)
        self.assertEqual(snap_to_step(18, 10), 20)

    def test_snap_to_step_rounds_halves_up(self) -> None:
        self.assertEqual(snap_to_step(5, 10), 10)
        self.assertEqual(snap_to_step(15, 10), 20)

    def test_snap_down_and_up(self) -> None:
        self.assertEqual(snap_down(7), 5)
        self.assertEqual(snap_up(7), 10)
        self.assertEqual(snap_down(10), 10)
        self.assertEqual(snap_up(10), 10)
        self.assertEqual(snap_up(1439), 1440)

    def test_snaps_are_multiples_of_step(self) -> None:
        for step in (1, 5, 10, 15, 60):
            for minutes in range(0, 1441, 7):
                for snapped in (
                    snap_down(minutes, step),
                    snap_up(minutes, step),
                    snap_to_step(minutes, step),
                ):
                    self.assertEqual(snapped % step, 0)
                self.assertLessEqual(snap_down(minutes, step), minutes)
                self.assertGreaterEqual(snap_up(minutes, step), minutes)


class TestTimeGeometryContract(unittest.TestCase):
    def test_minutes_since_midnight(self) -> None:
        self.assertEqual(minutes_since_midnight(at(0, 0)), 0)
        self.assertEqual(minutes_since_midnight(at(10, 30)), 630)
        self.assertEqual(minutes_since_midnight(at(23, 59)), 1439)

    def test_midnight_end_reads_as_end_of_day(self) -> None:
        self.assertEqual(end_minutes(at(22), at(0, day=28)), 1440)
        self.assertEqual(end_minutes(at(22), at(0)), 1440)
        self.assertEqual(end_minutes(at(0), at(0)), 0)
        self.assertIsNone(end_minutes(at(10), None))

    def test_window_height_and_offsets(self) -> None:
        self.assertEqual(DEFAULT_GEOMETRY.window_height_px(FULL_DAY), 7200)
        window = Window(570, 690)
        self.assertEqual(DEFAULT_GEOMETRY.window_height_px(window), 600)
        self.assertEqual(DEFAULT_GEOMETRY.minutes_to_px(570, window), 0)
        self.assertEqual(DEFAULT_GEOMETRY.minutes_to_px(600, window), 150)

    def test_vertical_position_of_half_hour_event(self) -> None:
        top_px, height_px = DEFAULT_GEOMETRY.vertical_position_px(60, 90, FULL_DAY)
        self.assertEqual(top_px, 300)
        self.assertEqual(height_px, 150)

    def test_minutes_to_px_is_monotonic(self) -> None:
        geometry = TimeGeometry(minutes_per_step=15, pixels_per_step=10)
        window = Window(300, 1200)
        offsets = [geometry.minutes_to_px(m, window) for m in range(0, 1441)]
        self.assertEqual(offsets, sorted(offsets))

    def test_hour_marks_inside_window(self) -> None:
        marks = DEFAULT_GEOMETRY.hour_marks(Window(570, 690))
        self.assertEqual(marks, [(600, 150), (660, 450)])

    def test_rejects_non_positive_density(self) -> None:
        with self.assertRaises(ValueError):
            TimeGeometry(minutes_per_step=0)
        with self.assertRaises(ValueError):
            TimeGeometry(pixels_per_step=-1)


if __name__ == "__main__":
    unittest.main()
