# SPDX-License-Identifier: MIT

from rich.console import Console

from boojo.configuration import APP_NAME, APP_VERSION


def version() -> None:
    """
    Show the boojo version.
    """
    console = Console()
    console.print(f"[dark_orange]{APP_NAME}[/dark_orange] {APP_VERSION}")
