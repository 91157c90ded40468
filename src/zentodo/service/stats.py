# SPDX-License-Identifier: MIT

from zentodo.model.stats import Stats
from zentodo.model.task import Task


def completion_percent(completed: int, total: int) -> int:
    """100 * completed / total rounded half up, 0 for an empty list."""
    if total == 0:
        return 0
    return (200 * completed + total) // (2 * total)


def compute_stats(tasks: list[Task]) -> Stats:
    total = len(tasks)
    completed = len([task for task in tasks if task["completed"]])
    return {
        "total": total,
        "completed": completed,
        "active": total - completed,
        "percent": completion_percent(completed, total),
    }
