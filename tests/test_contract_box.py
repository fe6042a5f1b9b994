import unittest

import pendulum

from dayview import Event, LaidOutEvent
from dayview.view.box import box_for


def laid_out(top_px, height_px, column_index=0, column_count=1):
    start = pendulum.datetime(2023, 10, 27, 10, tz="UTC")
    return LaidOutEvent(
        event=Event(start=start, end=start.add(hours=1)),
        start_minute=600,
        end_minute=660,
        top_px=top_px,
        height_px=height_px,
        column_index=column_index,
        column_count=column_count,
    )


class TestBoxContract(unittest.TestCase):
    def test_box_splits_width_between_columns(self) -> None:
        box = box_for(laid_out(150, 300, column_index=1, column_count=2))
        self.assertEqual(box.top_px, 150)
        self.assertEqual(box.height_px, 296)
        self.assertEqual(box.left_percent, 50)
        self.assertEqual(box.width_percent, 50)
        self.assertEqual(
            box.css(),
            {
                "top": "150px",
                "height": "296px",
                "left": "calc(50% + 4px)",
                "width": "calc(50% - 8px)",
            },
        )

    def test_box_keeps_minimum_height(self) -> None:
        box = box_for(laid_out(0, 25), vertical_gap_px=20)
        self.assertEqual(box.height_px, 12)

        box = box_for(laid_out(0, 25), vertical_gap_px=20, min_height_px=0)
        self.assertEqual(box.height_px, 5)

    def test_box_in_three_columns(self) -> None:
        box = box_for(
            laid_out(0, 100, column_index=2, column_count=3), horizontal_gap_px=0
        )
        self.assertAlmostEqual(box.width_percent, 100 / 3)
        self.assertAlmostEqual(box.left_percent, 200 / 3)
        self.assertEqual(box.css()["width"], "calc(33.3333% - 0px)")


if __name__ == "__main__":
    unittest.main()
