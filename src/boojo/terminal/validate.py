# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from boojo import configuration


def validate_log_category(category: Optional[str]) -> Optional[str]:
    if category is None:
        return None
    if category not in configuration.LOG_CATEGORIES:
        raise typer.BadParameter(
            f"Unknown log type. Use --log <{'|'.join(configuration.LOG_CATEGORIES)}>"
        )
    return category
