# tests/test_query.py

from __future__ import annotations

import random

import pytest

from zentodo.model.filter import ALL_CATEGORIES, StatusFilter
from zentodo.query.filter import filter_tasks
from zentodo.query.sort import derive_tasks, sort_tasks, task_sort_key
from zentodo.service.stats import completion_percent, compute_stats

from .fakes import BASE_TIME, make_task

CATEGORIES = ["工作", "生活", "学习", "健康", "杂项"]
PRIORITIES = ["high", "medium", "low"]


def random_tasks(rng: random.Random, count: int) -> list:
    tasks = []
    for id in range(1, count + 1):
        created_at = None if rng.random() < 0.2 else BASE_TIME.add(minutes=rng.randint(0, 500))
        tasks.append(
            make_task(
                id,
                text=f"task {id}",
                category=rng.choice(CATEGORIES),
                priority=rng.choice(PRIORITIES),
                completed=rng.random() < 0.5,
                created_at=created_at,
            )
        )
    return tasks


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_status_filters_partition_the_full_set(seed: int) -> None:
    tasks = random_tasks(random.Random(seed), 40)

    everything = filter_tasks(tasks, StatusFilter.ALL, ALL_CATEGORIES)
    active = filter_tasks(tasks, StatusFilter.ACTIVE, ALL_CATEGORIES)
    completed = filter_tasks(tasks, StatusFilter.COMPLETED, ALL_CATEGORIES)

    active_ids = {task["id"] for task in active}
    completed_ids = {task["id"] for task in completed}
    assert all(not task["completed"] for task in active)
    assert all(task["completed"] for task in completed)
    assert active_ids.isdisjoint(completed_ids)
    assert active_ids | completed_ids == {task["id"] for task in everything}
    assert len(everything) == len(tasks)


def test_status_and_category_filters_combine() -> None:
    a = make_task("a", category="生活")
    b = make_task("b", category="工作")
    c = make_task("c", category="生活", completed=True)

    result = derive_tasks([a, b, c], StatusFilter.ACTIVE, "生活")

    assert [task["id"] for task in result] == ["a"]


def test_sort_puts_incomplete_first_then_priority_then_newest() -> None:
    old_high = make_task(1, priority="high", created_at=BASE_TIME)
    new_high = make_task(2, priority="high", created_at=BASE_TIME.add(hours=1))
    low = make_task(3, priority="low", created_at=BASE_TIME.add(hours=2))
    done_high = make_task(4, priority="high", completed=True, created_at=BASE_TIME.add(hours=3))
    medium = make_task(5, priority="medium", created_at=BASE_TIME)

    result = sort_tasks([low, done_high, old_high, medium, new_high])

    assert [task["id"] for task in result] == [2, 1, 5, 3, 4]


def test_pending_timestamp_sorts_as_oldest() -> None:
    pending = make_task("pending", created_at=None)
    dated = make_task("dated", created_at=BASE_TIME.subtract(years=20))

    result = sort_tasks([pending, dated])

    assert [task["id"] for task in result] == ["dated", "pending"]


def test_pending_timestamp_still_respects_priority() -> None:
    pending_high = make_task("pending", priority="high", created_at=None)
    dated_low = make_task("dated", priority="low")

    result = sort_tasks([dated_low, pending_high])

    assert [task["id"] for task in result] == ["pending", "dated"]


@pytest.mark.parametrize("seed", [7, 11, 13, 17, 19, 23])
def test_sort_is_a_consistent_order(seed: int) -> None:
    rng = random.Random(seed)
    tasks = random_tasks(rng, 60)

    shuffled = list(tasks)
    rng.shuffle(shuffled)
    once = sort_tasks(shuffled)

    assert sort_tasks(once) == once
    keys = [task_sort_key(task) for task in once]
    assert keys == sorted(keys)
    for first, second in zip(once, once[1:]):
        assert not task_sort_key(second) < task_sort_key(first)


def test_sort_does_not_mutate_input() -> None:
    tasks = [make_task(1, priority="low"), make_task(2, priority="high")]

    sort_tasks(tasks)

    assert [task["id"] for task in tasks] == [1, 2]


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [(0, 0, 0), (1, 4, 25), (2, 3, 67), (1, 3, 33), (1, 8, 13), (3, 3, 100)],
)
def test_completion_percent(completed: int, total: int, expected: int) -> None:
    assert completion_percent(completed, total) == expected


def test_compute_stats_counts_over_the_whole_set() -> None:
    tasks = [
        make_task(1, completed=True),
        make_task(2),
        make_task(3),
        make_task(4),
    ]

    assert compute_stats(tasks) == {
        "total": 4,
        "completed": 1,
        "active": 3,
        "percent": 25,
    }
    assert compute_stats([]) == {"total": 0, "completed": 0, "active": 0, "percent": 0}
