# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Callable, Optional

from zentodo.model.filter import (
    ALL_CATEGORIES,
    FilterState,
    StatusFilter,
    parse_category_filter,
    parse_status_filter,
)
from zentodo.model.stats import Stats
from zentodo.model.task import Task
from zentodo.observable import Listeners
from zentodo.ports import TaskRepository
from zentodo.query.sort import derive_tasks
from zentodo.service.stats import compute_stats


class TaskViewModel:
    """
    Filtered and sorted view over a repository's visible set.

    Everything is recomputed from scratch whenever the visible set or either
    filter changes. Stats cover the whole visible set, not the filtered one.
    """

    def __init__(
        self,
        status: StatusFilter = StatusFilter.ALL,
        category: str = ALL_CATEGORIES,
    ) -> None:
        self._filters: FilterState = {"status": status, "category": category}
        self._tasks: list[Task] = []
        self._visible: list[Task] = []
        self._stats: Stats = compute_stats([])
        self._listeners = Listeners["TaskViewModel"]()
        self._unbind: Optional[Callable[[], None]] = None

    @property
    def visible(self) -> list[Task]:
        return deepcopy(self._visible)

    @property
    def stats(self) -> Stats:
        return deepcopy(self._stats)

    @property
    def filters(self) -> FilterState:
        return deepcopy(self._filters)

    def bind(self, repository: TaskRepository) -> None:
        self.unbind()
        self._unbind = repository.subscribe(self.__on_tasks)
        self.__on_tasks(repository.tasks)

    def unbind(self) -> None:
        if self._unbind is not None:
            self._unbind()
            self._unbind = None

    def watch(self, listener: Callable[["TaskViewModel"], None]) -> Callable[[], None]:
        return self._listeners.add(listener)

    def set_status_filter(self, status: str) -> None:
        self._filters["status"] = parse_status_filter(status)
        self.__recompute()

    def set_category_filter(self, category: str) -> None:
        self._filters["category"] = parse_category_filter(category)
        self.__recompute()

    def __on_tasks(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        self.__recompute()

    def __recompute(self) -> None:
        self._visible = derive_tasks(
            self._tasks, self._filters["status"], self._filters["category"]
        )
        self._stats = compute_stats(self._tasks)
        self._listeners.notify(self)
