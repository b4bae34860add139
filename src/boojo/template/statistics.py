# SPDX-License-Identifier: MIT

from boojo.model.statistics import RunStatistics


def get_run_statistics_template(log_name: str = "") -> RunStatistics:
    return {
        "log_name": log_name,
        "total_file_lines": 0,
        "total_file_entries": 0,
        "total_entries": 0,
        "total_tasks_completed": 0,
        "total_tasks_cancelled": 0,
        "total_notes": 0,
        "total_effort": 0.0,
        "project_tags": {},
        "context_tags": {},
        "filters": [],
    }
