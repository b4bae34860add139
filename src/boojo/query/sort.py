# SPDX-License-Identifier: MIT

from boojo.model.entry import Entry, Layout, Status

LAYOUT_RANK = {
    Layout.TASK: 0,
    Layout.EVENT: 1,
    Layout.NOTE: 2,
}

STATUS_RANK = {
    Status.OPEN: 0,
    Status.COMPLETED: 1,
    Status.CANCELLED: 2,
}


def sort_key(entry: Entry) -> tuple[int, int, int, int, int, int]:
    """
    Priority, layout, status, due date (latest first, undated last), line number.

    The line number is unique, so no two entries ever share a key.
    """
    due_at = entry["due_at"]
    if due_at is None:
        due_rank = (1, 0)
    else:
        due_rank = (0, -due_at.toordinal())
    return (
        entry["priority"],
        LAYOUT_RANK[entry["layout"]],
        STATUS_RANK[entry["status"]],
        *due_rank,
        entry["sequence_id"],
    )


def sort_entries(entries: list[Entry]) -> list[Entry]:
    return sorted(entries, key=sort_key)
