# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, cast

from zentodo import time
from zentodo.model.task import Task


def task_to_record(task: Task) -> dict[str, Any]:
    record = cast(dict[str, Any], deepcopy(task))
    record["category"] = str(record["category"])
    record["priority"] = str(record["priority"])
    record["created_at"] = time.datetime_to_iso_str_optional(record["created_at"])
    return record


def task_from_record(record: dict[str, Any]) -> Task:
    return {
        "id": record["id"],
        "text": record["text"],
        "category": record["category"],
        "priority": record.get("priority", "medium"),
        "completed": bool(record.get("completed", False)),
        "created_at": time.datetime_from_str_optional(record.get("created_at")),
        "owner": record.get("owner"),
    }
