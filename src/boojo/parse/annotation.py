# SPDX-License-Identifier: MIT

"""Annotations that may appear anywhere in an entry line.

Each annotation kind has one compiled pattern and one extractor returning an
optional typed value. Only the first occurrence of an annotation is used.
"""

import re
from typing import Optional

import pendulum

from boojo.model.entry import Recurrence, RecurrenceUnit
from boojo.time import date_from_str_optional

DUE_PATTERN = re.compile(r" due:(\d{4}-\d{2}-\d{2})", re.ASCII)
EFFORT_PATTERN = re.compile(r" ph:(\d+\.\d{1,3})", re.ASCII)
RECURRENCE_PATTERN = re.compile(r" rec:(\+)?(\d+)([dbwmy])", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}\s", re.ASCII)

RECURRENCE_UNITS: dict[str, RecurrenceUnit] = {
    "d": RecurrenceUnit.DAY,
    "b": RecurrenceUnit.WORKDAY,
    "w": RecurrenceUnit.WEEK,
    "m": RecurrenceUnit.MONTH,
    "y": RecurrenceUnit.YEAR,
}


def extract_due(line: str) -> Optional[pendulum.Date]:
    match = DUE_PATTERN.search(line)
    if match is None:
        return None
    return date_from_str_optional(match.group(1))


def extract_effort(line: str) -> Optional[float]:
    match = EFFORT_PATTERN.search(line)
    if match is None:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def extract_recurrence(line: str) -> Optional[Recurrence]:
    match = RECURRENCE_PATTERN.search(line)
    if match is None:
        return None
    strict, count, unit = match.groups()
    return {
        "source_expression": match.group(0).strip(),
        "count": int(count),
        "unit": RECURRENCE_UNITS[unit],
        "strict": strict == "+",
    }


def strip_annotations(line: str) -> str:
    """Remove due, date, recurrence and effort expressions for display."""
    line = DUE_PATTERN.sub("", line)
    line = DATE_PATTERN.sub("", line)
    line = RECURRENCE_PATTERN.sub("", line)
    line = EFFORT_PATTERN.sub("", line)
    return line
