# SPDX-License-Identifier: MIT

import logging
from collections.abc import Sequence
from typing import Optional

from dayview.model.interval import TimeInterval
from dayview.model.window import FULL_DAY, Window
from dayview.time import MINUTES_PER_DAY, end_minutes, minutes_since_midnight

logger = logging.getLogger(__name__)

WINDOW_PADDING_MINUTES = 30
MIN_WINDOW_MINUTES = 120


def unpadded_bounds(events: Sequence[TimeInterval]) -> Optional[tuple[int, int]]:
    """
    Earliest start and latest end of the events, in minutes since midnight.

    Returns None when there are no events. An event without an end counts as
    ending where it starts.
    """
    if not events:
        return None

    min_start = MINUTES_PER_DAY
    max_end = 0
    for event in events:
        start = minutes_since_midnight(event.start)
        end = end_minutes(event.start, event.end)
        if end is None:
            end = start
        min_start = min(min_start, start)
        max_end = max(max_end, end)
    return min_start, max_end


def compute_window(
    events: Sequence[TimeInterval],
    padding_minutes: int = WINDOW_PADDING_MINUTES,
    min_window_minutes: int = MIN_WINDOW_MINUTES,
) -> Window:
    """
    Pick the visible range of the day for the given events.

    The range spans the earliest start to the latest end, padded on both sides
    and clamped to the day. When the padded range is empty (for example when
    every event ends before it starts) a range of `min_window_minutes` is
    anchored at the padded start instead.

    Args:
        events: Events already filtered to the displayed day
        padding_minutes: Minutes added before the first start and after the last end
        min_window_minutes: Length of the fallback range for degenerate input

    Returns:
        The Window to render
    """
    bounds = unpadded_bounds(events)
    if bounds is None:
        return FULL_DAY

    min_start, max_end = bounds
    start = _clamp(min_start - padding_minutes)
    end = _clamp(max_end + padding_minutes)

    if end - start <= 0:
        logger.debug(
            "degenerate window [%d, %d], using %d minutes from %d",
            start,
            end,
            min_window_minutes,
            start,
        )
        start = min(start, MINUTES_PER_DAY - 1)
        end = _clamp(start + max(min_window_minutes, 1))

    return Window(start, end)


def _clamp(minutes: int) -> int:
    return max(0, min(MINUTES_PER_DAY, minutes))
