# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from dayview.time import MINUTES_PER_DAY


@dataclass(frozen=True)
class Window:
    """Visible part of a day, in minutes since midnight."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not (0 <= self.start < self.end <= MINUTES_PER_DAY):
            raise ValueError(
                f"window must satisfy 0 <= start < end <= {MINUTES_PER_DAY}, "
                f"got [{self.start}, {self.end}]"
            )

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, minutes: int) -> bool:
        return self.start <= minutes <= self.end


FULL_DAY = Window(0, MINUTES_PER_DAY)
