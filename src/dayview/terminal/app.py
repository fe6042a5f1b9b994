# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from dayview.logger import configure_logging
from dayview.terminal import configuration
from dayview.terminal.custom_typer import OrderedAliasedTyperGroup
from dayview.terminal.version import version
from dayview.terminal.view import day, week
from dayview.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="dayview - day calendar layout in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="day, d", no_args_is_help=True)(day)
app.command(name="week, w", no_args_is_help=True)(week)
app.command(name="version, ve")(version)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log layout decisions at debug level",
        ),
    ] = False,
) -> None:
    """
    dayview - day calendar layout in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
