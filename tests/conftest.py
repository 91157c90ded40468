# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from zentodo import configuration
from zentodo.identity.provider import FileIdentityProvider
from zentodo.repository.configuration import CONFIGURATION_REPO
from zentodo.repository.task import LocalTaskRepository

from .fakes import RecordingDocumentStore


@pytest.fixture()
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point every configured path at a per-test temporary directory.

    The configuration repository caches the parsed file, so it is reset on
    both sides of the test.
    """
    config_dir = tmp_path / "config"
    data = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "log")
    monkeypatch.setattr(configuration, "DATA_PATH", data)
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data / "tasks.yaml")
    monkeypatch.setattr(configuration, "DATA_CLOUD_PATH", data / "cloud.yaml")
    monkeypatch.setattr(configuration, "DATA_IDENTITY_PATH", data / "identity.yaml")
    CONFIGURATION_REPO.reset()
    yield data
    CONFIGURATION_REPO.reset()


@pytest.fixture()
def local_repo(tmp_path: Path) -> LocalTaskRepository:
    return LocalTaskRepository(tmp_path / "tasks.yaml")


@pytest.fixture()
def store() -> RecordingDocumentStore:
    return RecordingDocumentStore()


@pytest.fixture()
def identity_provider(tmp_path: Path) -> FileIdentityProvider:
    return FileIdentityProvider(tmp_path / "identity.yaml", default_user="alice")
