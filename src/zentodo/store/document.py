# SPDX-License-Identifier: MIT

import asyncio
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from zentodo.errors import TaskNotFoundError, ValidationError
from zentodo.model.entity_id import Identity, generate_document_id
from zentodo.model.task import Task
from zentodo.store.channel import SnapshotChannel
from zentodo.store.serialize import task_from_record, task_to_record
from zentodo.time import now_utc

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = ("id", "owner", "created_at")


class FileDocumentStore:
    """
    Multi-tenant task collection with server-assigned timestamps.

    Every change publishes the owner's full document set to each open
    channel for that owner. An insert is published twice: first as a pending
    write with no timestamp, then again once the timestamp is committed.
    Documents live in memory when no path is given.
    """

    def __init__(self, path: Optional[Path] = None, commit_delay: float = 0.0) -> None:
        self._path = path
        self._commit_delay = commit_delay
        self._documents: Optional[dict[str, Task]] = None
        self._channels: list[SnapshotChannel] = []

    @property
    def documents(self) -> dict[str, Task]:
        if self._documents is None:
            self.__load_data()
        if self._documents is None:
            raise ValueError()
        return self._documents

    def __load_data(self) -> None:
        self._documents = {}
        if self._path is None or not self._path.is_file():
            return
        raw = load(self._path.read_text(encoding="utf-8"), Loader=Loader)
        if raw is None:
            return
        for record in raw.get("tasks", []):
            task = task_from_record(record)
            self._documents[str(task["id"])] = task
        logger.debug("loaded %d documents from %s", len(self._documents), self._path)

    def __save_data(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {"tasks": [task_to_record(task) for task in self.documents.values()]}
        self._path.write_text(
            dump(data, Dumper=Dumper, allow_unicode=True, sort_keys=False),
            encoding="utf-8",
        )

    def snapshot(self, owner: Identity) -> list[Task]:
        return [
            deepcopy(task) for task in self.documents.values() if task["owner"] == owner
        ]

    def __publish(self, owner: Optional[Identity]) -> None:
        if owner is None:
            return
        snapshot = self.snapshot(owner)
        for channel in list(self._channels):
            if channel.owner == owner:
                channel.publish(snapshot)

    def __detach(self, channel: SnapshotChannel) -> None:
        if channel in self._channels:
            self._channels.remove(channel)
            logger.debug("channel closed owner=%s", channel.owner)

    def subscribe(self, owner: Identity) -> SnapshotChannel:
        channel = SnapshotChannel(owner, on_close=self.__detach)
        self._channels.append(channel)
        logger.debug("channel opened owner=%s", owner)
        channel.publish(self.snapshot(owner))
        return channel

    @property
    def open_channels(self) -> int:
        return len(self._channels)

    async def insert(self, document: Task) -> str:
        if document["owner"] is None:
            raise ValidationError("a cloud task needs an owner")

        document_id = generate_document_id()
        stored = deepcopy(document)
        stored["id"] = document_id
        stored["created_at"] = None
        self.documents[document_id] = stored
        self.__publish(stored["owner"])

        await asyncio.sleep(self._commit_delay)

        # The document may have been deleted before the commit landed
        if document_id in self.documents:
            self.documents[document_id]["created_at"] = now_utc()
            self.__save_data()
            self.__publish(stored["owner"])
        return document_id

    async def update(self, id: str, patch: dict[str, Any]) -> None:
        if id not in self.documents:
            raise TaskNotFoundError(id)
        for field in IMMUTABLE_FIELDS:
            if field in patch:
                raise ValidationError(f"'{field}' cannot be changed")

        await asyncio.sleep(self._commit_delay)

        if id not in self.documents:
            raise TaskNotFoundError(id)
        task = self.documents[id]
        task.update(patch)  # type: ignore[typeddict-item]
        self.__save_data()
        self.__publish(task["owner"])

    async def delete(self, id: str) -> None:
        if id not in self.documents:
            raise TaskNotFoundError(id)

        await asyncio.sleep(self._commit_delay)

        task = self.documents.pop(id, None)
        if task is None:
            raise TaskNotFoundError(id)
        self.__save_data()
        self.__publish(task["owner"])
