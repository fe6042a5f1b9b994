# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "dayview"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    minutes_per_step: int
    pixels_per_step: int
    window_padding_minutes: int
    min_window_minutes: int
    event_vertical_gap_px: int
    event_horizontal_gap_px: int
    min_event_height_px: int
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "minutes_per_step": 5,
        "pixels_per_step": 25,
        "window_padding_minutes": 30,
        "min_window_minutes": 120,
        "event_vertical_gap_px": 4,
        "event_horizontal_gap_px": 4,
        "min_event_height_px": 12,
        "show_header": True,
        "log_level": "WARNING",
    }
