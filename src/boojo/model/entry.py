# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum


class Status(StrEnum):
    OPEN = "open"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Layout(StrEnum):
    TASK = "task"
    # Reserved: no glyph produces events yet
    EVENT = "event"
    NOTE = "note"


class RecurrenceUnit(StrEnum):
    DAY = "day"
    WORKDAY = "workday"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


NO_PRIORITY = 9


class Recurrence(TypedDict):
    source_expression: str
    count: int
    unit: RecurrenceUnit
    strict: bool  # recur from the due date instead of the completion date


class Entry(TypedDict):
    raw_text: str
    sequence_id: int  # 1-based line number among all scanned lines
    description: str
    priority: int  # 1 (A) .. 3 (C), 9 when unset
    status: Status
    layout: Layout
    created_at: Optional[pendulum.Date]
    completed_at: Optional[pendulum.Date]
    due_at: Optional[pendulum.Date]
    recurrence: Optional[Recurrence]
    effort: Optional[float]  # person-hours
