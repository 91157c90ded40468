# tests/test_local_repository.py

from __future__ import annotations

from pathlib import Path

import pytest
from yaml import safe_load

from zentodo import configuration
from zentodo.errors import TaskNotFoundError
from zentodo.repository.task import LocalTaskRepository
from zentodo.view.view_model import TaskViewModel

from .fakes import Recorder


def test_create_prepends_and_persists(local_repo: LocalTaskRepository) -> None:
    first = local_repo.create("写周报", "工作", "high")
    second = local_repo.create("买菜", "生活", "low")

    assert first is not None and second is not None
    assert [task["text"] for task in local_repo.tasks] == ["买菜", "写周报"]
    assert all(task["completed"] is False for task in local_repo.tasks)
    assert all(task["created_at"] is not None for task in local_repo.tasks)

    raw = safe_load(local_repo.path.read_text(encoding="utf-8"))
    assert [record["text"] for record in raw[configuration.LOCAL_TASKS_KEY]] == [
        "买菜",
        "写周报",
    ]

    reloaded = LocalTaskRepository(local_repo.path)
    assert reloaded.tasks == local_repo.tasks


def test_blank_text_is_ignored(local_repo: LocalTaskRepository) -> None:
    assert local_repo.create("   ", "工作", "medium") is None
    assert local_repo.tasks == []
    assert not local_repo.path.exists()


def test_ids_are_unique_and_increasing(local_repo: LocalTaskRepository) -> None:
    created = [local_repo.create(f"task {n}", "杂项", "medium") for n in range(20)]

    ids = [task["id"] for task in created if task is not None]
    assert len(set(ids)) == 20
    assert ids == sorted(ids)


def test_toggle_flips_completion(local_repo: LocalTaskRepository) -> None:
    task = local_repo.create("跑步", "健康", "medium")
    assert task is not None

    assert local_repo.toggle(task["id"])["completed"] is True
    assert local_repo.toggle(str(task["id"]))["completed"] is False


def test_unknown_ids_raise(local_repo: LocalTaskRepository) -> None:
    with pytest.raises(TaskNotFoundError):
        local_repo.toggle(42)
    with pytest.raises(TaskNotFoundError):
        local_repo.remove(42)


def test_clear_completed_removes_only_completed(local_repo: LocalTaskRepository) -> None:
    a = local_repo.create("a", "工作", "medium")
    b = local_repo.create("b", "工作", "medium")
    c = local_repo.create("c", "工作", "medium")
    assert a is not None and b is not None and c is not None
    local_repo.toggle(a["id"])
    local_repo.toggle(b["id"])

    removed = local_repo.clear_completed()

    assert set(removed) == {a["id"], b["id"]}
    assert [task["id"] for task in local_repo.tasks] == [c["id"]]
    assert [task["id"] for task in LocalTaskRepository(local_repo.path).tasks] == [c["id"]]


def test_seeds_sample_tasks_on_first_run(tmp_path: Path) -> None:
    repo = LocalTaskRepository(tmp_path / "tasks.yaml", seed_sample_tasks=True)

    assert {task["text"] for task in repo.tasks} == {"整理桌面", "完成项目报告"}
    assert repo.path.is_file()


def test_no_seed_when_disabled(tmp_path: Path) -> None:
    repo = LocalTaskRepository(tmp_path / "tasks.yaml", seed_sample_tasks=False)

    assert repo.tasks == []


def test_listeners_receive_each_new_visible_set(local_repo: LocalTaskRepository) -> None:
    recorder: Recorder[list] = Recorder()
    unsubscribe = local_repo.subscribe(recorder)

    task = local_repo.create("a", "工作", "medium")
    assert task is not None
    local_repo.toggle(task["id"])
    unsubscribe()
    local_repo.remove(task["id"])

    assert len(recorder.calls) == 2
    assert recorder.calls[1][0]["completed"] is True


def test_add_toggle_delete_scenario(local_repo: LocalTaskRepository) -> None:
    view_model = TaskViewModel()
    view_model.bind(local_repo)

    a = local_repo.create("A", "工作", "high")
    b = local_repo.create("B", "生活", "medium")
    assert a is not None and b is not None
    assert [task["text"] for task in view_model.visible] == ["A", "B"]

    local_repo.toggle(a["id"])
    assert [task["text"] for task in view_model.visible] == ["B", "A"]

    local_repo.remove(b["id"])
    assert [task["text"] for task in view_model.visible] == ["A"]
