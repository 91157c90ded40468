# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Callable, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from zentodo import configuration
from zentodo.errors import TaskNotFoundError
from zentodo.model.entity_id import TaskId
from zentodo.model.task import Task
from zentodo.observable import Listeners
from zentodo.query.util import index_of_task
from zentodo.store.serialize import task_from_record, task_to_record
from zentodo.template.task import get_sample_tasks, get_task_template
from zentodo.time import datetime_to_millis

logger = logging.getLogger(__name__)


class LocalTaskRepository:
    """
    Single-user task list persisted as one YAML blob.

    The file is read once on first access and rewritten in full after every
    mutation. New tasks are prepended to the visible set.
    """

    def __init__(
        self, path: Optional[Path] = None, seed_sample_tasks: bool = False
    ) -> None:
        self._path = path
        self._seed_sample_tasks = seed_sample_tasks
        self._tasks: Optional[list[Task]] = None
        self._last_id = 0
        self._listeners = Listeners[list[Task]]()

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_TASKS_PATH

    @property
    def tasks(self) -> list[Task]:
        return deepcopy(self.__loaded_tasks())

    def __loaded_tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        if not self.path.is_file():
            self._tasks = get_sample_tasks() if self._seed_sample_tasks else []
            if self._tasks:
                self.__save_data()
            logger.debug("initialized %s with %d tasks", self.path, len(self._tasks))
            return

        raw = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        records = [] if raw is None else raw.get(configuration.LOCAL_TASKS_KEY, [])
        self._tasks = [task_from_record(record) for record in records]
        logger.debug("loaded %d tasks from %s", len(self._tasks), self.path)

    def __save_data(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            configuration.LOCAL_TASKS_KEY: [
                task_to_record(task) for task in self.__loaded_tasks()
            ]
        }
        self.path.write_text(
            dump(data, Dumper=Dumper, allow_unicode=True, sort_keys=False),
            encoding="utf-8",
        )

    def __commit(self) -> None:
        self.__save_data()
        self._listeners.notify(self.tasks)

    def __next_id(self, task: Task) -> int:
        if task["created_at"] is None:
            raise ValueError("a local task always has a creation time")
        existing = {existing_task["id"] for existing_task in self.__loaded_tasks()}
        candidate = max(datetime_to_millis(task["created_at"]), self._last_id + 1)
        while candidate in existing:
            candidate += 1
        self._last_id = candidate
        return candidate

    def subscribe(self, listener: Callable[[list[Task]], None]) -> Callable[[], None]:
        return self._listeners.add(listener)

    def create(self, text: str, category: str, priority: str) -> Optional[Task]:
        if not text.strip():
            logger.debug("ignoring task with empty text")
            return None

        task = get_task_template(text, category, priority)
        task["id"] = self.__next_id(task)
        self.__loaded_tasks().insert(0, task)
        self.__commit()
        logger.info("created task %s", task["id"])
        return deepcopy(task)

    def toggle(self, id: TaskId) -> Task:
        tasks = self.__loaded_tasks()
        index = index_of_task(tasks, id)
        if index is None:
            raise TaskNotFoundError(id)
        task = tasks[index]
        task["completed"] = not task["completed"]
        self.__commit()
        logger.info("toggled task %s completed=%s", task["id"], task["completed"])
        return deepcopy(task)

    def remove(self, id: TaskId) -> None:
        tasks = self.__loaded_tasks()
        index = index_of_task(tasks, id)
        if index is None:
            raise TaskNotFoundError(id)
        removed = tasks.pop(index)
        self.__commit()
        logger.info("removed task %s", removed["id"])

    def clear_completed(self) -> list[TaskId]:
        # Each removal commits on its own; a failure leaves earlier removals in place
        completed_ids = [
            task["id"]
            for task in self.__loaded_tasks()
            if task["completed"] and task["id"] is not None
        ]
        for id in completed_ids:
            self.remove(id)
        return completed_ids
