# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

from boojo.model.entry import NO_PRIORITY, Entry
from boojo.model.glyph import GLYPHS, glyph_meaning
from boojo.model.statistics import RunStatistics
from boojo.parse.annotation import (
    DUE_PATTERN,
    extract_due,
    extract_effort,
    extract_recurrence,
)
from boojo.time import date_from_str_optional

logger = logging.getLogger(__name__)

_GLYPH_CLASS = "".join(re.escape(glyph) for glyph in GLYPHS)

# Fixed-width prefix: glyph, [date], [priority], [date]
PREFIX_PATTERN = re.compile(
    rf"^\s*(?P<glyph>[{_GLYPH_CLASS}]) "
    r"(?P<first_date>\d{4}-\d{2}-\d{2}\s)?"
    r"(?P<priority>\([ABC]\)\s)?"
    r"(?P<second_date>\d{4}-\d{2}-\d{2}\s)?",
    re.ASCII,
)
# A priority may also follow the second date when none came before it
LATE_PRIORITY_PATTERN = re.compile(r"\([ABC]\)\s", re.ASCII)

PRIORITIES = {"A": 1, "B": 2, "C": 3}


def parse_priority(token: Optional[str]) -> int:
    if token is None:
        return NO_PRIORITY
    return PRIORITIES.get(token.strip()[1:-1], NO_PRIORITY)


def parse_line(line: str, sequence_id: int) -> Optional[Entry]:
    """
    Parse one ledger line into an Entry.

    Returns None when the line does not start with a status glyph. Malformed
    dates and numbers leave their field unset instead of rejecting the line.
    """
    match = PREFIX_PATTERN.match(line)
    if match is None:
        return None

    meaning = glyph_meaning(match.group("glyph"))
    if meaning is None:
        return None

    prefix_end = match.end()
    priority_token = match.group("priority")
    if priority_token is None:
        late_match = LATE_PRIORITY_PATTERN.match(line, prefix_end)
        if late_match is not None:
            priority_token = late_match.group(0)
            prefix_end = late_match.end()

    first_date = match.group("first_date")
    second_date = match.group("second_date")
    if first_date is not None and second_date is not None:
        completed_at = date_from_str_optional(first_date)
        created_at = date_from_str_optional(second_date)
    else:
        completed_at = None
        created_at = date_from_str_optional(first_date or second_date)

    description = DUE_PATTERN.sub("", line[prefix_end:])

    return {
        "raw_text": line,
        "sequence_id": sequence_id,
        "description": description,
        "priority": parse_priority(priority_token),
        "status": meaning.status,
        "layout": meaning.layout,
        "created_at": created_at,
        "completed_at": completed_at,
        "due_at": extract_due(line),
        "recurrence": extract_recurrence(line),
        "effort": extract_effort(line),
    }


def split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping one trailing \r per line."""
    lines = text.split("\n")
    # Nothing follows a final newline
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_text(text: str, stats: RunStatistics) -> list[Entry]:
    """Parse every line of a ledger and count scanned and recognized lines."""
    entries: list[Entry] = []
    sequence_id = 0
    for sequence_id, line in enumerate(split_lines(text), start=1):
        entry = parse_line(line, sequence_id)
        if entry is not None:
            entries.append(entry)
    stats["total_file_lines"] = sequence_id
    stats["total_file_entries"] = len(entries)
    logger.debug(
        "parsed %d entries from %d lines", len(entries), stats["total_file_lines"]
    )
    return entries
