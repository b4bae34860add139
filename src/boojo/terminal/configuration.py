# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from boojo import configuration
from boojo.repository.configuration import CONFIGURATION_REPO
from boojo.terminal.custom_typer import AliasedTyperGroup
from boojo.terminal.validate import validate_log_category

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("default_log", config["default_log"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    for category in configuration.LOG_CATEGORIES:
        table.add_row(f"{category} log", str(configuration.DATA_PATH / f"{category}.txt"))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def update(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the log files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="use the default data directory"),
    ] = False,
    default_log: Annotated[
        Optional[str],
        typer.Option(
            "--default-log",
            callback=validate_log_category,
            help="log used when --log is not given",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header"),
    ] = None,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_log=default_log,
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()
    view()
