# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding

from boojo.view.state import get_show_header


def header(console: Console, log_name: str) -> None:
    """Print the application header with the listed log.

    Args:
        console: Console to print to
        log_name: The log category being shown
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]boojo[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[plum1]{log_name} log[/plum1]", (0, 1, 1, 1)))
