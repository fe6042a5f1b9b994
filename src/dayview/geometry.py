# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from dayview.model.window import Window

MINUTES_PER_STEP = 5
PIXELS_PER_STEP = 25


def snap_down(minutes: int, step: int = MINUTES_PER_STEP) -> int:
    return (minutes // step) * step


def snap_up(minutes: int, step: int = MINUTES_PER_STEP) -> int:
    return -(-minutes // step) * step


def snap_to_step(minutes: int, step: int = MINUTES_PER_STEP) -> int:
    """Snap to the nearest multiple of step, halves rounding up."""
    return ((2 * minutes + step) // (2 * step)) * step


@dataclass(frozen=True)
class TimeGeometry:
    """
    Fixed-density mapping between minutes and pixels.

    Every `minutes_per_step` minutes take `pixels_per_step` pixels, so the
    mapping is linear and monotonic.
    """

    minutes_per_step: int = MINUTES_PER_STEP
    pixels_per_step: int = PIXELS_PER_STEP

    def __post_init__(self) -> None:
        if self.minutes_per_step <= 0:
            raise ValueError(
                f"minutes_per_step must be positive, got {self.minutes_per_step}"
            )
        if self.pixels_per_step <= 0:
            raise ValueError(
                f"pixels_per_step must be positive, got {self.pixels_per_step}"
            )

    @property
    def pixels_per_minute(self) -> float:
        return self.pixels_per_step / self.minutes_per_step

    def snap_down(self, minutes: int) -> int:
        return snap_down(minutes, self.minutes_per_step)

    def snap_up(self, minutes: int) -> int:
        return snap_up(minutes, self.minutes_per_step)

    def snap_to_step(self, minutes: int) -> int:
        return snap_to_step(minutes, self.minutes_per_step)

    def window_height_px(self, window: Window) -> float:
        return window.length / self.minutes_per_step * self.pixels_per_step

    def minutes_to_px(self, minutes: int, window: Window) -> float:
        return (minutes - window.start) / self.minutes_per_step * self.pixels_per_step

    def vertical_position_px(
        self, start_minute: int, end_minute: int, window: Window
    ) -> tuple[float, float]:
        """Return (top_px, height_px) of a box spanning the given minutes."""
        top_px = self.minutes_to_px(start_minute, window)
        height_px = (end_minute - start_minute) / self.minutes_per_step * (
            self.pixels_per_step
        )
        return top_px, height_px

    def hour_marks(self, window: Window) -> list[tuple[int, float]]:
        """Full hours inside the window paired with their pixel offsets."""
        first_hour = snap_up(window.start, 60)
        return [
            (minute, self.minutes_to_px(minute, window))
            for minute in range(first_hour, window.end + 1, 60)
        ]


DEFAULT_GEOMETRY = TimeGeometry()
