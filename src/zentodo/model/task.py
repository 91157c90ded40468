# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from zentodo.model.entity_id import Identity, TaskId


class Task(TypedDict):
    id: Optional[TaskId]
    text: str
    category: str
    priority: str
    completed: bool
    # None while a cloud write is waiting for its server timestamp
    created_at: Optional[pendulum.DateTime]
    owner: Optional[Identity]
