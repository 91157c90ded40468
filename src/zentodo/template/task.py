# SPDX-License-Identifier: MIT

from typing import Optional

from zentodo.model.category import Category
from zentodo.model.entity_id import Identity
from zentodo.model.priority import Priority
from zentodo.model.task import Task
from zentodo.time import now_utc


def get_task_template(
    text: str,
    category: str = Category.WORK,
    priority: str = Priority.MEDIUM,
    owner: Optional[Identity] = None,
) -> Task:
    return {
        "id": None,
        "text": text,
        "category": str(category),
        "priority": str(priority),
        "completed": False,
        "created_at": now_utc(),
        "owner": owner,
    }


def get_sample_tasks() -> list[Task]:
    tidy_desk = get_task_template("整理桌面", Category.LIFE, Priority.LOW)
    tidy_desk["id"] = 1
    report = get_task_template("完成项目报告", Category.WORK, Priority.HIGH)
    report["id"] = 2
    return [tidy_desk, report]
