# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod

from zentodo.model.filter import ALL_CATEGORIES, StatusFilter
from zentodo.model.task import Task


def generate_filter(status: str, category: str) -> "Predicate":
    filter_obj = And()
    filter_obj.add_predicate(Status(StatusFilter(status)))
    filter_obj.add_predicate(CategoryMatch(category))
    return filter_obj


def filter_tasks(tasks: list[Task], status: str, category: str) -> list[Task]:
    return generate_filter(status, category).filter(tasks)


class Predicate(ABC):
    @abstractmethod
    def filter(self, tasks: list[Task]) -> list[Task]: ...


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def filter(self, tasks: list[Task]) -> list[Task]:
        result = list(tasks)
        for predicate in self.predicates:
            result = predicate.filter(result)
        return result


class Status(Predicate):
    def __init__(self, status: StatusFilter) -> None:
        self.status = status

    def filter(self, tasks: list[Task]) -> list[Task]:
        match self.status:
            case StatusFilter.ACTIVE:
                return [task for task in tasks if not task["completed"]]
            case StatusFilter.COMPLETED:
                return [task for task in tasks if task["completed"]]
        return list(tasks)


class CategoryMatch(Predicate):
    def __init__(self, category: str) -> None:
        self.category = category

    def filter(self, tasks: list[Task]) -> list[Task]:
        if self.category == ALL_CATEGORIES:
            return list(tasks)
        return [task for task in tasks if task["category"] == self.category]
