# SPDX-License-Identifier: MIT

import logging

from boojo.model.entry import Entry, Status
from boojo.model.statistics import RunStatistics

logger = logging.getLogger(__name__)


def unique_keywords(keywords: list[str]) -> list[str]:
    """Drop duplicate keywords while keeping first-seen order."""
    return list(dict.fromkeys(keywords))


def matches_keywords(entry: Entry, keywords: list[str]) -> bool:
    line = entry["raw_text"].lower()
    return all(keyword.lower() in line for keyword in keywords)


def filter_entries(
    entries: list[Entry],
    keywords: list[str],
    include_completed: bool,
    stats: RunStatistics,
) -> list[Entry]:
    keywords = unique_keywords(keywords)

    filtered_entries = []
    for entry in entries:
        if not include_completed and entry["status"] == Status.COMPLETED:
            continue
        if matches_keywords(entry, keywords):
            filtered_entries.append(entry)

    stats["total_entries"] = len(filtered_entries)
    stats["filters"] = keywords
    logger.debug(
        "%d of %d entries left after filtering by %s",
        len(filtered_entries),
        len(entries),
        keywords,
    )
    return filtered_entries
