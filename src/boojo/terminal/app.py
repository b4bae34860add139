# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from boojo.logger import configure_logging
from boojo.terminal import configuration
from boojo.terminal.custom_typer import AliasedTyperGroup
from boojo.terminal.list import ls
from boojo.terminal.version import version
from boojo.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Boojo is a cli tool for maintaining digital and extended bullet lists - take care of your tasks, events and notes.",
    no_args_is_help=True,
)
app.command(name="ls, l")(ls)
app.add_typer(configuration.app, name="config, c")
app.command(name="version, ve")(version)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in listings",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Write debug logging to stderr"),
    ] = False,
) -> None:
    """
    Boojo - bullet journal in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
