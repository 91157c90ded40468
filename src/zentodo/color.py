# SPDX-License-Identifier: MIT

from zentodo.model.priority import Priority

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

PRIORITY_COLOR: dict[str, str] = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "blue",
}

PROGRESS_COLOR = "medium_purple"
PROGRESS_DONE_COLOR = "green"
