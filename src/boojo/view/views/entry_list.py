# SPDX-License-Identifier: MIT

import re

import pendulum
from rich.text import Text

from boojo.color import (
    CONTEXT_COLOR,
    COUNTER_COLOR,
    DATE_META_COLOR,
    DUE_META_COLOR,
    EFFORT_META_COLOR,
    PRIORITY_COLORS,
    PROJECT_COLOR,
    RECURRENCE_COLOR,
    TODAY_COLOR,
)
from boojo.model.entry import Entry
from boojo.model.glyph import GLYPHS
from boojo.model.statistics import RunStatistics
from boojo.parse.annotation import strip_annotations
from boojo.time import date_to_str
from boojo.view.util import (
    CONTEXT_PATTERN,
    COUNTER_PATTERN,
    PRIORITY_PATTERN,
    PROJECT_PATTERN,
    entry_color,
    id_width,
    stylize_matches,
)

RECURRENCE_MARKER = "∞"


def meta_line(entry: Entry) -> Text:
    """Effort, due, created, completed and recurrence of an entry, when set."""
    meta = Text()
    if entry["effort"]:
        meta.append(f" ph:{entry['effort']:.2f}", style=EFFORT_META_COLOR)
    if entry["due_at"] is not None:
        meta.append(f" due:{date_to_str(entry['due_at'])}", style=DUE_META_COLOR)
    if entry["created_at"] is not None:
        meta.append(
            f" created:{date_to_str(entry['created_at'])}", style=DATE_META_COLOR
        )
    if entry["completed_at"] is not None:
        meta.append(
            f" completed:{date_to_str(entry['completed_at'])}", style=DATE_META_COLOR
        )
    if entry["recurrence"] is not None:
        meta.append(
            f" {entry['recurrence']['source_expression']}", style=DATE_META_COLOR
        )
    return meta


def render_entry(
    entry: Entry,
    stats: RunStatistics,
    width: int,
    today: pendulum.Date,
    show_meta: bool = False,
) -> Text:
    """
    Build the display line of one entry.

    Works on a copy of the raw text with annotations removed; the entry itself
    is left untouched. Every @context and +project occurrence is counted into
    the tag tables of stats.
    """
    line = Text(strip_annotations(entry["raw_text"]))

    glyph_match = re.match(r"\s*(\S)", line.plain)
    if glyph_match is not None and glyph_match.group(1) in GLYPHS:
        line.stylize(entry_color(entry), glyph_match.start(1), glyph_match.end(1))

    priority_color = PRIORITY_COLORS.get(entry["priority"])
    if priority_color is not None:
        stylize_matches(line, PRIORITY_PATTERN, priority_color)

    stylize_matches(line, CONTEXT_PATTERN, CONTEXT_COLOR, stats["context_tags"])
    stylize_matches(line, PROJECT_PATTERN, PROJECT_COLOR, stats["project_tags"])
    stylize_matches(line, COUNTER_PATTERN, COUNTER_COLOR)

    if entry["recurrence"] is not None:
        line.append(" ")
        line.append(RECURRENCE_MARKER, style=RECURRENCE_COLOR)

    if show_meta:
        meta = meta_line(entry)
        if meta.plain:
            line.append("\n  " + " " * width)
            line.append_text(meta)

    line.highlight_words([date_to_str(today)], style=TODAY_COLOR)

    return Text.assemble(
        (f"{entry['sequence_id']:0{width}d}", entry_color(entry)), " ", line
    )


def render_entries(
    entries: list[Entry],
    stats: RunStatistics,
    today: pendulum.Date,
    show_meta: bool = False,
) -> list[Text]:
    width = id_width(entries)
    return [render_entry(entry, stats, width, today, show_meta) for entry in entries]
