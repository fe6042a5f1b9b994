# SPDX-License-Identifier: MIT

from dayview.geometry import DEFAULT_GEOMETRY, TimeGeometry
from dayview.model.event import Event
from dayview.model.interval import TimeInterval
from dayview.model.laid_out_event import LaidOutEvent
from dayview.model.window import Window
from dayview.service.layout import layout_events
from dayview.service.now import now_indicator_px
from dayview.service.window import compute_window

__all__ = [
    "DEFAULT_GEOMETRY",
    "Event",
    "LaidOutEvent",
    "TimeGeometry",
    "TimeInterval",
    "Window",
    "compute_window",
    "layout_events",
    "main",
    "now_indicator_px",
]


def main() -> None:
    # the command line stack loads only when the CLI runs
    from dayview.cleanup import register_cleanup
    from dayview.initialize import initialize
    from dayview.terminal.app import run

    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
