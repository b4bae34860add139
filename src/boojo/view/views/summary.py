# SPDX-License-Identifier: MIT

from rich.text import Text

from boojo.color import (
    CANCELLED_COLOR,
    COMPLETED_COLOR,
    CONTEXT_COLOR,
    EFFORT_META_COLOR,
    FILTER_COLOR,
    NOTE_COLOR,
    OPEN_COLOR,
    PROJECT_COLOR,
)
from boojo.model.statistics import RunStatistics
from boojo.service.summarize import total_open, total_tasks
from boojo.view.util import format_tag_counts


def render_summary(stats: RunStatistics) -> list[Text]:
    """Trailing block with line counts, filters, totals, tags and effort."""
    lines = [
        Text(),
        Text(
            f"{stats['log_name']} log | "
            f"{stats['total_file_entries']}/{stats['total_file_lines']} parsed line(s)"
        ),
    ]

    totals = Text()
    if len(stats["filters"]) > 0:
        quoted = "".join(f'"{keyword}" ' for keyword in stats["filters"])
        totals.append(
            f"{len(stats['filters'])} filter(s): {quoted}", style=FILTER_COLOR
        )
        totals.append("| ")
    totals.append(f"{total_tasks(stats)} task(s) | ")
    totals.append(f"{stats['total_tasks_completed']} completed", style=COMPLETED_COLOR)
    totals.append(" | ")
    totals.append(f"{total_open(stats)} open", style=OPEN_COLOR)
    totals.append(" | ")
    totals.append(f"{stats['total_tasks_cancelled']} cancelled", style=CANCELLED_COLOR)
    totals.append(" | ")
    totals.append(f"{stats['total_notes']} note(s)", style=NOTE_COLOR)
    lines.append(totals)

    lines.append(
        Text.assemble(
            f"{len(stats['project_tags'])} project(s) ",
            (format_tag_counts(stats["project_tags"]), PROJECT_COLOR),
        )
    )
    lines.append(
        Text.assemble(
            f"{len(stats['context_tags'])} context(s) ",
            (format_tag_counts(stats["context_tags"]), CONTEXT_COLOR),
        )
    )
    lines.append(
        Text.assemble("ph ", (f"{stats['total_effort']:.2f}", EFFORT_META_COLOR))
    )
    return lines
