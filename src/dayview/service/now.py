# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

from dayview.geometry import DEFAULT_GEOMETRY, TimeGeometry
from dayview.model.window import Window
from dayview.time import minutes_since_midnight, to_date


def now_indicator_px(
    now: datetime.datetime,
    day: datetime.date,
    window: Window,
    geometry: TimeGeometry = DEFAULT_GEOMETRY,
) -> Optional[float]:
    """
    Pixel offset of the current-time marker, or None when `now` is not on `day`.

    A time outside the window pins the marker to the window's bottom edge.
    """
    if to_date(now) != to_date(day):
        return None

    minutes = minutes_since_midnight(now)
    if not window.contains(minutes):
        minutes = window.end

    # the window start need not sit on the grid
    snapped = max(geometry.snap_down(minutes), window.start)
    return geometry.minutes_to_px(snapped, window)
