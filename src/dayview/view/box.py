# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from dayview.model.laid_out_event import LaidOutEvent

EVENT_VERTICAL_GAP_PX = 4
EVENT_HORIZONTAL_GAP_PX = 4
MIN_EVENT_HEIGHT_PX = 12


@dataclass(frozen=True)
class Box:
    """Absolute position of an event box inside the day column."""

    top_px: float
    height_px: float
    left_percent: float
    width_percent: float
    horizontal_gap_px: int

    def css(self) -> dict[str, str]:
        return {
            "top": f"{self.top_px:g}px",
            "height": f"{self.height_px:g}px",
            "left": f"calc({self.left_percent:g}% + {self.horizontal_gap_px}px)",
            "width": f"calc({self.width_percent:g}% - {self.horizontal_gap_px * 2}px)",
        }


def box_for(
    laid_out: LaidOutEvent,
    vertical_gap_px: int = EVENT_VERTICAL_GAP_PX,
    horizontal_gap_px: int = EVENT_HORIZONTAL_GAP_PX,
    min_height_px: int = MIN_EVENT_HEIGHT_PX,
) -> Box:
    width_percent = 100 / laid_out.column_count
    return Box(
        top_px=laid_out.top_px,
        height_px=max(laid_out.height_px - vertical_gap_px, min_height_px),
        left_percent=width_percent * laid_out.column_index,
        width_percent=width_percent,
        horizontal_gap_px=horizontal_gap_px,
    )
