# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from dayview.model.event import Event


@dataclass(frozen=True)
class LaidOutEvent:
    event: Event
    # snapped bounds, clamped to the window
    start_minute: int
    end_minute: int
    top_px: float
    height_px: float
    column_index: int
    column_count: int
