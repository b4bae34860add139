# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

DATE_FORMAT = "YYYY-MM-DD"


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string; raises ValueError for impossible dates."""
    return pendulum.from_format(date_str.strip(), DATE_FORMAT).date()


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    """Like date_from_str, but None and unparseable values both yield None."""
    if date_str is None:
        return None
    try:
        return date_from_str(date_str)
    except ValueError:
        return None


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)

