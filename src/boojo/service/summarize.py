# SPDX-License-Identifier: MIT

from boojo.model.entry import Entry, Layout, Status
from boojo.model.statistics import RunStatistics


def summarize_entries(entries: list[Entry], stats: RunStatistics) -> RunStatistics:
    for entry in entries:
        effort = entry["effort"]
        if effort is not None and effort > 0:
            stats["total_effort"] += effort
        if entry["status"] == Status.COMPLETED:
            stats["total_tasks_completed"] += 1
        elif entry["status"] == Status.CANCELLED:
            stats["total_tasks_cancelled"] += 1
        elif entry["layout"] == Layout.NOTE:
            stats["total_notes"] += 1
    return stats


def total_tasks(stats: RunStatistics) -> int:
    return stats["total_entries"] - stats["total_notes"]


def total_open(stats: RunStatistics) -> int:
    return (
        stats["total_entries"]
        - stats["total_tasks_completed"]
        - stats["total_tasks_cancelled"]
        - stats["total_notes"]
    )
