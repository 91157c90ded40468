# tests/test_session.py

from __future__ import annotations

from pathlib import Path

import pytest

from zentodo.configuration import get_default_configuration
from zentodo.errors import ValidationError, ZentodoError
from zentodo.identity.provider import FileIdentityProvider
from zentodo.model.filter import StatusFilter
from zentodo.model.identity import AuthStatus
from zentodo.repository.cloud_task import CloudTaskRepository
from zentodo.repository.task import LocalTaskRepository
from zentodo.session import CloudSession, LocalSession, create_session

from .fakes import Recorder, RecordingDocumentStore, make_task


@pytest.mark.asyncio
async def test_local_session_filters_and_stats(local_repo: LocalTaskRepository) -> None:
    async with LocalSession(local_repo) as session:
        await session.add_task("A", "生活")
        await session.add_task("B", "工作")
        c = await session.add_task("C", "生活")
        await session.toggle_task(c["id"])

        session.set_status_filter(StatusFilter.ACTIVE)
        session.set_category_filter("生活")

        assert [task["text"] for task in session.visible] == ["A"]
        assert session.stats == {"total": 3, "completed": 1, "active": 2, "percent": 33}


@pytest.mark.asyncio
async def test_local_session_uses_defaults_and_validates(
    local_repo: LocalTaskRepository,
) -> None:
    async with LocalSession(local_repo, default_category="学习") as session:
        task = await session.add_task("读书")
        assert task["category"] == "学习"
        assert task["priority"] == "medium"

        assert await session.add_task("   ") is None
        with pytest.raises(ValidationError):
            await session.add_task("x", category="娱乐")
        with pytest.raises(ValidationError):
            await session.add_task("x", priority="urgent")
        with pytest.raises(ValidationError):
            session.set_status_filter("done")


@pytest.mark.asyncio
async def test_local_session_clear_completed(local_repo: LocalTaskRepository) -> None:
    async with LocalSession(local_repo) as session:
        a = await session.add_task("A")
        b = await session.add_task("B")
        await session.add_task("C")
        await session.toggle_task(a["id"])
        await session.toggle_task(b["id"])

        await session.clear_completed()

        assert [task["text"] for task in local_repo.tasks] == ["C"]


@pytest.mark.asyncio
async def test_local_session_rejects_sign_in(local_repo: LocalTaskRepository) -> None:
    async with LocalSession(local_repo) as session:
        assert session.auth_state["status"] == AuthStatus.ANONYMOUS
        with pytest.raises(ZentodoError):
            await session.sign_in("alice")


@pytest.mark.asyncio
async def test_commands_require_an_open_session(local_repo: LocalTaskRepository) -> None:
    session = LocalSession(local_repo)

    with pytest.raises(ZentodoError):
        await session.add_task("A")


@pytest.mark.asyncio
async def test_view_model_listeners_fire_on_filter_and_data_changes(
    local_repo: LocalTaskRepository,
) -> None:
    recorder: Recorder = Recorder()
    async with LocalSession(local_repo) as session:
        session.watch(recorder)
        await session.add_task("A")
        session.set_status_filter(StatusFilter.COMPLETED)

        assert len(recorder.calls) == 2
        assert session.visible == []


@pytest.mark.asyncio
async def test_cloud_session_follows_identity(
    store: RecordingDocumentStore, identity_provider: FileIdentityProvider
) -> None:
    session = CloudSession(CloudTaskRepository(store), identity_provider)
    states: Recorder = Recorder()
    session.watch_auth(states)

    await session.open()
    assert session.auth_state["status"] == AuthStatus.ANONYMOUS
    assert await session.add_task("ignored") is None

    await session.sign_in()
    assert session.auth_state == {"status": AuthStatus.AUTHENTICATED, "identity": "alice"}

    await session.add_task("写周报", "工作", "high")
    await session.settle()
    assert [task["text"] for task in session.visible] == ["写周报"]

    await session.sign_out()
    assert session.auth_state["status"] == AuthStatus.ANONYMOUS
    assert session.visible == []
    assert store.open_channels == 0

    store.channels[-1].publish([make_task("late", owner="alice")])
    await session.settle()
    assert session.visible == []

    assert [state["status"] for state in states.calls] == [
        AuthStatus.ANONYMOUS,
        AuthStatus.AUTHENTICATED,
        AuthStatus.ANONYMOUS,
    ]
    await session.close()


@pytest.mark.asyncio
async def test_cloud_commands_see_existing_tasks_right_after_open(
    store: RecordingDocumentStore, identity_provider: FileIdentityProvider
) -> None:
    await store.insert(make_task(None, "保留", owner="alice"))
    done = await store.insert(make_task(None, "已做完", owner="alice"))
    await identity_provider.sign_in()

    async with CloudSession(CloudTaskRepository(store), identity_provider) as session:
        assert len(session.visible) == 2
        await session.toggle_task(done)
        await session.settle()

    async with CloudSession(CloudTaskRepository(store), identity_provider) as session:
        handles = await session.clear_completed()
        assert len(handles) == 1
        await session.settle()
        assert [task["text"] for task in session.visible] == ["保留"]

    assert [task["text"] for task in store.snapshot("alice")] == ["保留"]


@pytest.mark.asyncio
async def test_cloud_session_restores_remembered_identity(
    tmp_path: Path, store: RecordingDocumentStore
) -> None:
    first = FileIdentityProvider(tmp_path / "identity.yaml")
    await first.sign_in("bob")

    session = CloudSession(
        CloudTaskRepository(store), FileIdentityProvider(tmp_path / "identity.yaml")
    )
    async with session:
        assert session.auth_state["identity"] == "bob"
        assert store.open_channels == 1
    assert store.open_channels == 0


@pytest.mark.asyncio
async def test_cloud_session_reports_store_failures(
    store: RecordingDocumentStore, identity_provider: FileIdentityProvider
) -> None:
    errors: Recorder = Recorder()
    async with CloudSession(CloudTaskRepository(store), identity_provider) as session:
        session.on_error(errors)
        await session.sign_in()
        store.offline = True

        await session.add_task("lost")
        await session.settle()

        assert session.visible == []
        assert len(errors.calls) == 1


@pytest.mark.asyncio
async def test_sign_in_without_user_fails(
    tmp_path: Path, store: RecordingDocumentStore
) -> None:
    provider = FileIdentityProvider(tmp_path / "identity.yaml")
    async with CloudSession(CloudTaskRepository(store), provider) as session:
        with pytest.raises(ValidationError):
            await session.sign_in()
        assert session.auth_state["status"] == AuthStatus.ANONYMOUS


def test_create_session_picks_the_configured_mode(data_dir: Path) -> None:
    config = get_default_configuration()

    assert isinstance(create_session(config), LocalSession)
    assert isinstance(create_session(config, "cloud"), CloudSession)

    config["mode"] = "cloud"
    assert isinstance(create_session(config), CloudSession)
    with pytest.raises(ValidationError):
        create_session(config, "offline")
