# SPDX-License-Identifier: MIT

from copy import deepcopy

from zentodo.model.priority import PRIORITY_WEIGHT
from zentodo.model.task import Task
from zentodo.query.filter import filter_tasks
from zentodo.time import datetime_to_millis_optional


def task_sort_key(task: Task) -> tuple[int, int, int]:
    """
    Incomplete first, then priority high to low, then newest first.

    A task still waiting for its server timestamp sorts as the oldest.
    """
    return (
        1 if task["completed"] else 0,
        -PRIORITY_WEIGHT.get(task["priority"], 0),
        -datetime_to_millis_optional(task["created_at"]),
    )


def sort_tasks(tasks: list[Task]) -> list[Task]:
    sorted_tasks = deepcopy(tasks)
    sorted_tasks.sort(key=task_sort_key)
    return sorted_tasks


def derive_tasks(tasks: list[Task], status: str, category: str) -> list[Task]:
    return sort_tasks(filter_tasks(tasks, status, category))
