# SPDX-License-Identifier: MIT

import logging
from typing import Optional, TypedDict

import pendulum
from rich.text import Text

from boojo.model.entry import Entry
from boojo.model.statistics import RunStatistics
from boojo.parse.grammar import parse_text
from boojo.query.filter import filter_entries
from boojo.query.sort import sort_entries
from boojo.service.summarize import summarize_entries
from boojo.template.statistics import get_run_statistics_template
from boojo.time import today_local
from boojo.view.views.entry_list import render_entries
from boojo.view.views.summary import render_summary

logger = logging.getLogger(__name__)


class ListReport(TypedDict):
    entries: list[Entry]
    stats: RunStatistics
    lines: list[Text]
    summary: list[Text]


def list_entries(
    text: str,
    log_name: str,
    keywords: Optional[list[str]] = None,
    include_completed: bool = False,
    show_meta: bool = False,
    today: Optional[pendulum.Date] = None,
) -> ListReport:
    """
    Run the list pipeline over the contents of one log.

    parse -> filter -> sort -> summarize -> render. Statistics are created
    fresh for every call and returned with the report.
    """
    if today is None:
        today = today_local()

    stats = get_run_statistics_template(log_name)
    entries = parse_text(text, stats)
    entries = filter_entries(entries, keywords or [], include_completed, stats)
    entries = sort_entries(entries)
    summarize_entries(entries, stats)
    lines = render_entries(entries, stats, today, show_meta)
    summary = render_summary(stats)

    logger.debug("listed %d entries of the %s log", len(entries), log_name)

    return {
        "entries": entries,
        "stats": stats,
        "lines": lines,
        "summary": summary,
    }
