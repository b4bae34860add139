# SPDX-License-Identifier: MIT

# Rich color names shared by the list view and the CLI messages

COMPLETED_COLOR = "green"
CANCELLED_COLOR = "bright_black"
OPEN_COLOR = "red"
NOTE_COLOR = "blue"

PRIORITY_COLORS = {
    1: "red",
    2: "yellow",
    3: "cyan",
}

CONTEXT_COLOR = "blue"
PROJECT_COLOR = "magenta"
COUNTER_COLOR = "bright_black"
RECURRENCE_COLOR = "cyan"
TODAY_COLOR = "yellow"
FILTER_COLOR = "yellow"

EFFORT_META_COLOR = "green"
DUE_META_COLOR = "cyan"
DATE_META_COLOR = "bright_black"

ERROR_COLOR = "red"
