# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.text import Text

from boojo.color import ERROR_COLOR
from boojo.repository.configuration import CONFIGURATION_REPO
from boojo.repository.log_file import LOG_FILE_REPO, UnknownLogCategoryError
from boojo.service.list import list_entries
from boojo.terminal.validate import validate_log_category
from boojo.view.views.header import header


def ls(
    keywords: Annotated[
        Optional[list[str]],
        typer.Argument(help="only entries containing every keyword (case-insensitive)"),
    ] = None,
    log: Annotated[
        Optional[str],
        typer.Option(
            "--log",
            "-l",
            callback=validate_log_category,
            help="Log type (daily, monthly, future)",
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Display all entries, completed included"),
    ] = False,
    meta: Annotated[
        bool,
        typer.Option(
            "--meta",
            "-m",
            help="Display extra line with meta infos (effort, due, creation and completion date, recurrence)",
        ),
    ] = False,
) -> None:
    """
    List all entries from the specified log.
    """
    if log is None:
        log = CONFIGURATION_REPO.get_config()["default_log"]

    try:
        text = LOG_FILE_REPO.read_log(log)
    except UnknownLogCategoryError as e:
        raise typer.BadParameter(str(e), param_hint="--log")
    except OSError as e:
        error_console = Console(stderr=True)
        error_console.print(Text(f"Error reading file: {e}", style=ERROR_COLOR))
        raise typer.Exit(1)

    report = list_entries(
        text,
        log,
        keywords=keywords,
        include_completed=show_all,
        show_meta=meta,
    )

    console = Console(highlight=False)
    header(console, log)
    for line in report["lines"]:
        console.print(line)
    for line in report["summary"]:
        console.print(line)
