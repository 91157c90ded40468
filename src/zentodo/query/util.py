# SPDX-License-Identifier: MIT

from typing import Optional

from zentodo.model.entity_id import TaskId
from zentodo.model.task import Task


def index_of_task(tasks: list[Task], id: TaskId) -> Optional[int]:
    # ids typed on the command line arrive as strings
    for index, task in enumerate(tasks):
        if task["id"] == id or str(task["id"]) == str(id):
            return index
    return None
