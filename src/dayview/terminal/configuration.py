# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from dayview import configuration
from dayview.repository.configuration import CONFIGURATION_REPO, LOG_LEVELS
from dayview.terminal.custom_typer import AliasedTyperGroup
from dayview.terminal.validate import validate_non_negative, validate_positive

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("minutes_per_step", str(config["minutes_per_step"]))
    table.add_row("pixels_per_step", str(config["pixels_per_step"]))
    table.add_row("window_padding_minutes", str(config["window_padding_minutes"]))
    table.add_row("min_window_minutes", str(config["min_window_minutes"]))
    table.add_row("event_vertical_gap_px", str(config["event_vertical_gap_px"]))
    table.add_row("event_horizontal_gap_px", str(config["event_horizontal_gap_px"]))
    table.add_row("min_event_height_px", str(config["min_event_height_px"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s", no_args_is_help=True)
def set(
    minutes_per_step: Annotated[
        Optional[int],
        typer.Option(
            "--minutes-per-step",
            callback=validate_positive,
            help="minutes covered by one grid step",
        ),
    ] = None,
    pixels_per_step: Annotated[
        Optional[int],
        typer.Option(
            "--pixels-per-step",
            callback=validate_positive,
            help="pixels taken by one grid step",
        ),
    ] = None,
    window_padding_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--window-padding",
            callback=validate_non_negative,
            help="minutes shown before the first and after the last event",
        ),
    ] = None,
    min_window_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--min-window",
            callback=validate_positive,
            help="window length used when the events give no usable range",
        ),
    ] = None,
    event_vertical_gap_px: Annotated[
        Optional[int],
        typer.Option("--vertical-gap", callback=validate_non_negative),
    ] = None,
    event_horizontal_gap_px: Annotated[
        Optional[int],
        typer.Option("--horizontal-gap", callback=validate_non_negative),
    ] = None,
    min_event_height_px: Annotated[
        Optional[int],
        typer.Option("--min-event-height", callback=validate_non_negative),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"one of {', '.join(LOG_LEVELS)}"),
    ] = None,
) -> None:
    """Change configuration settings."""
    try:
        CONFIGURATION_REPO.update_config(
            minutes_per_step=minutes_per_step,
            pixels_per_step=pixels_per_step,
            window_padding_minutes=window_padding_minutes,
            min_window_minutes=min_window_minutes,
            event_vertical_gap_px=event_vertical_gap_px,
            event_horizontal_gap_px=event_horizontal_gap_px,
            min_event_height_px=min_event_height_px,
            show_header=show_header,
            log_level=log_level,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    CONFIGURATION_REPO.flush()
    view()
