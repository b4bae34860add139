# SPDX-License-Identifier: MIT

import re
from typing import Optional

from rich.text import Text

from boojo.color import (
    CANCELLED_COLOR,
    COMPLETED_COLOR,
    NOTE_COLOR,
    OPEN_COLOR,
)
from boojo.model.entry import Entry, Layout, Status

TAG_CHARACTERS = r"[A-Za-z0-9ÄÖÜäöüß\-_]+"
CONTEXT_PATTERN = re.compile(rf"@{TAG_CHARACTERS}")
PROJECT_PATTERN = re.compile(rf"\+{TAG_CHARACTERS}")
COUNTER_PATTERN = re.compile(rf"\s#{TAG_CHARACTERS}")
PRIORITY_PATTERN = re.compile(r"\([ABC]\)")


def entry_color(entry: Entry) -> str:
    """Color for the line number and glyph of an entry."""
    if entry["status"] == Status.COMPLETED:
        return COMPLETED_COLOR
    elif entry["status"] == Status.CANCELLED:
        return CANCELLED_COLOR
    elif entry["layout"] == Layout.NOTE:
        return NOTE_COLOR
    return OPEN_COLOR


def stylize_matches(
    text: Text,
    pattern: re.Pattern[str],
    style: str,
    counts: Optional[dict[str, int]] = None,
) -> None:
    """Style every match of pattern, counting each occurrence when counts is given."""
    for match in pattern.finditer(text.plain):
        text.stylize(style, match.start(), match.end())
        if counts is not None:
            token = match.group(0)
            counts[token] = counts.get(token, 0) + 1


def format_tag_counts(tags: dict[str, int]) -> str:
    """Render tags alphabetically as 'tag (count) ' pairs."""
    return "".join(f"{tag} ({tags[tag]}) " for tag in sorted(tags))


def id_width(entries: list[Entry]) -> int:
    if len(entries) == 0:
        return 1
    return len(str(max(entry["sequence_id"] for entry in entries)))
