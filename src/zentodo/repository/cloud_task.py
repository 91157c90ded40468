# SPDX-License-Identifier: MIT

import asyncio
import logging
from copy import deepcopy
from functools import partial
from typing import Any, Callable, Coroutine, Optional

from zentodo.errors import TaskNotFoundError
from zentodo.model.entity_id import Identity, TaskId
from zentodo.model.task import Task
from zentodo.observable import Listeners
from zentodo.ports import DocumentStore
from zentodo.query.util import index_of_task
from zentodo.store.channel import SnapshotChannel
from zentodo.template.task import get_task_template

logger = logging.getLogger(__name__)


class CloudTaskRepository:
    """
    Visible set mirrored from a hosted document store.

    Writes are scheduled and never awaited here; the visible set only changes
    when a snapshot for the bound identity arrives, and every snapshot
    replaces it wholesale. Rebinding closes the previous channel before
    anything else happens, and snapshots tagged with an older binding
    generation are dropped.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self._identity: Optional[Identity] = None
        self._tasks: list[Task] = []
        self._channel: Optional[SnapshotChannel] = None
        self._consumer: Optional[asyncio.Task[None]] = None
        self._generation = 0
        self._writes: set[asyncio.Task[Any]] = set()
        self._listeners = Listeners[list[Task]]()
        self._error_listeners = Listeners[Exception]()

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def tasks(self) -> list[Task]:
        return deepcopy(self._tasks)

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: Callable[[list[Task]], None]) -> Callable[[], None]:
        return self._listeners.add(listener)

    def on_error(self, listener: Callable[[Exception], None]) -> Callable[[], None]:
        return self._error_listeners.add(listener)

    def bind(self, identity: Optional[Identity]) -> None:
        self.__cancel_subscription()
        self._generation += 1
        self._identity = identity

        if self._tasks:
            self.__replace([])

        if identity is None:
            logger.debug("unbound, visible set cleared")
            return

        channel = self._store.subscribe(identity)
        self._channel = channel
        self._consumer = asyncio.get_running_loop().create_task(
            self.__consume(channel, self._generation)
        )
        logger.debug("bound to %s generation=%d", identity, self._generation)

    def __cancel_subscription(self) -> None:
        if self._channel is not None:
            self._channel.close()
            self._channel = None
        if self._consumer is not None:
            self._consumer.cancel()
            self._consumer = None

    async def __consume(self, channel: SnapshotChannel, generation: int) -> None:
        async for snapshot in channel:
            self.apply_snapshot(snapshot, generation)

    def apply_snapshot(self, snapshot: list[Task], generation: int) -> bool:
        if generation != self._generation:
            logger.debug(
                "dropping stale snapshot generation=%d current=%d",
                generation,
                self._generation,
            )
            return False
        self.__replace(snapshot)
        return True

    def __replace(self, snapshot: list[Task]) -> None:
        self._tasks = deepcopy(snapshot)
        self._listeners.notify(self.tasks)

    def __issue(
        self, write: Coroutine[Any, Any, Any], description: str
    ) -> "asyncio.Task[Any]":
        handle = asyncio.get_running_loop().create_task(write)
        self._writes.add(handle)
        handle.add_done_callback(partial(self.__on_write_done, description))
        return handle

    def __on_write_done(self, description: str, handle: "asyncio.Task[Any]") -> None:
        self._writes.discard(handle)
        if handle.cancelled():
            return
        error = handle.exception()
        if error is None:
            return
        logger.warning("%s failed: %s", description, error)
        if isinstance(error, Exception):
            self._error_listeners.notify(error)

    def create(
        self, text: str, category: str, priority: str
    ) -> Optional["asyncio.Task[Any]"]:
        if self._identity is None:
            logger.debug("ignoring create without a signed in identity")
            return None
        if not text.strip():
            logger.debug("ignoring task with empty text")
            return None

        task = get_task_template(text, category, priority, owner=self._identity)
        task["created_at"] = None
        return self.__issue(self._store.insert(task), "insert")

    def toggle(self, id: TaskId) -> "asyncio.Task[Any]":
        index = index_of_task(self._tasks, id)
        if index is None:
            raise TaskNotFoundError(id)
        task = self._tasks[index]
        return self.__issue(
            self._store.update(str(task["id"]), {"completed": not task["completed"]}),
            f"toggle {task['id']}",
        )

    def remove(self, id: TaskId) -> "asyncio.Task[Any]":
        return self.__issue(self._store.delete(str(id)), f"delete {id}")

    def clear_completed(self) -> list["asyncio.Task[Any]"]:
        # One independent delete per task, no rollback on partial failure
        return [
            self.remove(task["id"])
            for task in self._tasks
            if task["completed"] and task["id"] is not None
        ]

    @property
    def pending(self) -> bool:
        snapshot_pending = (
            self._channel is not None
            and self._channel.has_pending
            and self._consumer is not None
            and not self._consumer.done()
        )
        return bool(self._writes) or snapshot_pending

    async def settle(self) -> None:
        """Wait for outstanding writes and for queued snapshots to be applied."""
        while self.pending:
            if self._writes:
                await asyncio.gather(*list(self._writes), return_exceptions=True)
            await asyncio.sleep(0)

    async def close(self) -> None:
        self.__cancel_subscription()
        if self._writes:
            await asyncio.gather(*list(self._writes), return_exceptions=True)
        self._identity = None
        self._generation += 1
