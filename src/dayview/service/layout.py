# SPDX-License-Identifier: MIT

import heapq
import logging
from collections.abc import Sequence

from dayview.geometry import DEFAULT_GEOMETRY, TimeGeometry, snap_down
from dayview.model.event import Event
from dayview.model.laid_out_event import LaidOutEvent
from dayview.model.window import Window
from dayview.time import end_minutes, minutes_since_midnight

logger = logging.getLogger(__name__)


def layout_events(
    events: Sequence[Event],
    window: Window,
    geometry: TimeGeometry = DEFAULT_GEOMETRY,
) -> list[LaidOutEvent]:
    """
    Place the day's events into side-by-side columns.

    Events are clamped into the window and snapped to the step grid, then swept
    in start order. Each event takes the lowest column not held by an event
    that is still running when it starts. Events chained together by overlap
    form a cluster and every member of a cluster shares the cluster's column
    count, so siblings render at equal widths.

    The placement is first-fit, which is collision free but not always the
    narrowest possible arrangement.

    Args:
        events: Events of the displayed day, in any order
        window: The visible range of the day
        geometry: Minute to pixel mapping

    Returns:
        One LaidOutEvent per input event, in input order
    """
    spans = [_snapped_span(event, window, geometry) for event in events]
    columns, column_counts = _assign_columns(events, spans)

    laid_out = []
    for event, (start_minute, end_minute), column, column_count in zip(
        events, spans, columns, column_counts
    ):
        top_px, height_px = geometry.vertical_position_px(
            start_minute, end_minute, window
        )
        laid_out.append(
            LaidOutEvent(
                event=event,
                start_minute=start_minute,
                end_minute=end_minute,
                top_px=top_px,
                height_px=height_px,
                column_index=column,
                column_count=column_count,
            )
        )
    return laid_out


def clamp_to_window(event: Event, window: Window, step: int) -> tuple[int, int]:
    """
    Clamp an event into the window, in minutes since midnight.

    A span that collapses (zero length, ends before it starts, no end, or lies
    outside the window) becomes a single step, cut short only where the window
    ends.
    """
    start = minutes_since_midnight(event.start)
    end = end_minutes(event.start, event.end)

    clamped_start = min(max(start, window.start), window.end)
    if end is None:
        clamped_end = clamped_start
    else:
        clamped_end = max(min(end, window.end), window.start)

    if clamped_end <= clamped_start:
        if end is None or end < start:
            logger.debug(
                "event %r has no usable end, drawing a single step at %d",
                event.id,
                clamped_start,
            )
        clamped_end = min(clamped_start + step, window.end)
        if clamped_end <= clamped_start:
            # pinned to the bottom edge on the grid, so start order is kept
            clamped_start = max(window.start, snap_down(window.end - 1, step))

    return clamped_start, clamped_end


def _snapped_span(
    event: Event, window: Window, geometry: TimeGeometry
) -> tuple[int, int]:
    clamped_start, clamped_end = clamp_to_window(
        event, window, geometry.minutes_per_step
    )
    # the window edges need not sit on the grid
    start = max(geometry.snap_down(clamped_start), window.start)
    end = min(geometry.snap_up(clamped_end), window.end)
    return start, end


def _assign_columns(
    events: Sequence[Event], spans: Sequence[tuple[int, int]]
) -> tuple[list[int], list[int]]:
    order = sorted(range(len(events)), key=lambda index: events[index].start)

    columns = [0] * len(events)
    clusters = [0] * len(events)
    cluster_widths: list[int] = []

    # (end_minute, column) of events still running, smallest end first
    active: list[tuple[int, int]] = []
    used_columns: set[int] = set()

    for index in order:
        start, end = spans[index]

        while active and active[0][0] <= start:
            _, column = heapq.heappop(active)
            used_columns.discard(column)

        if not active:
            cluster_widths.append(0)

        column = 0
        while column in used_columns:
            column += 1

        used_columns.add(column)
        heapq.heappush(active, (end, column))

        columns[index] = column
        clusters[index] = len(cluster_widths) - 1
        cluster_widths[-1] = max(cluster_widths[-1], column + 1)

    column_counts = [cluster_widths[cluster] for cluster in clusters]
    return columns, column_counts
