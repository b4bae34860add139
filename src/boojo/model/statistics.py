# SPDX-License-Identifier: MIT

from typing import TypedDict


class RunStatistics(TypedDict):
    log_name: str
    total_file_lines: int  # every scanned line
    total_file_entries: int  # lines recognized as entries
    total_entries: int  # entries left after filtering
    total_tasks_completed: int
    total_tasks_cancelled: int
    total_notes: int
    total_effort: float
    project_tags: dict[str, int]
    context_tags: dict[str, int]
    filters: list[str]
