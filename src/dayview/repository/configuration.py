# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from dayview import configuration
from dayview.geometry import TimeGeometry

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            return

        stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if stored is None:
            # Empty file, keep defaults
            return
        if not isinstance(stored, dict):
            raise ValueError(
                f"{configuration.APP_CONFIG_PATH} must hold a mapping of settings"
            )

        # Keys missing from older files fall back to their defaults
        for key in self._config:
            if key in stored:
                self._config[key] = stored[key]  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_geometry(self) -> TimeGeometry:
        config = self.config
        return TimeGeometry(
            minutes_per_step=config["minutes_per_step"],
            pixels_per_step=config["pixels_per_step"],
        )

    def update_config(
        self,
        minutes_per_step: Optional[int] = None,
        pixels_per_step: Optional[int] = None,
        window_padding_minutes: Optional[int] = None,
        min_window_minutes: Optional[int] = None,
        event_vertical_gap_px: Optional[int] = None,
        event_horizontal_gap_px: Optional[int] = None,
        min_event_height_px: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        for name, value in (
            ("minutes_per_step", minutes_per_step),
            ("pixels_per_step", pixels_per_step),
            ("min_window_minutes", min_window_minutes),
        ):
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        for name, value in (
            ("window_padding_minutes", window_padding_minutes),
            ("event_vertical_gap_px", event_vertical_gap_px),
            ("event_horizontal_gap_px", event_horizontal_gap_px),
            ("min_event_height_px", min_event_height_px),
        ):
            if value is not None and value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")
        if log_level is not None and log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level}"
            )

        self.is_dirty = True

        if minutes_per_step is not None:
            self.config["minutes_per_step"] = minutes_per_step
        if pixels_per_step is not None:
            self.config["pixels_per_step"] = pixels_per_step
        if window_padding_minutes is not None:
            self.config["window_padding_minutes"] = window_padding_minutes
        if min_window_minutes is not None:
            self.config["min_window_minutes"] = min_window_minutes
        if event_vertical_gap_px is not None:
            self.config["event_vertical_gap_px"] = event_vertical_gap_px
        if event_horizontal_gap_px is not None:
            self.config["event_horizontal_gap_px"] = event_horizontal_gap_px
        if min_event_height_px is not None:
            self.config["min_event_height_px"] = min_event_height_px
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
