# SPDX-License-Identifier: MIT

import asyncio
from copy import deepcopy
from typing import Callable, Optional

from zentodo.model.entity_id import Identity
from zentodo.model.task import Task


class SnapshotChannel:
    """
    Cancellable stream of full task snapshots for one owner.

    Only the latest undelivered snapshot is kept; an older one that was never
    consumed is simply overwritten. Iteration ends once the channel is closed,
    and nothing published after close is ever delivered.
    """

    def __init__(
        self,
        owner: Identity,
        on_close: Optional[Callable[["SnapshotChannel"], None]] = None,
    ) -> None:
        self.owner = owner
        self._on_close = on_close
        self._pending: Optional[list[Task]] = None
        self._ready = asyncio.Event()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def publish(self, snapshot: list[Task]) -> None:
        if self._closed:
            return
        self._pending = deepcopy(snapshot)
        self._ready.set()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending = None
        self._ready.set()
        if self._on_close is not None:
            self._on_close(self)

    def __aiter__(self) -> "SnapshotChannel":
        return self

    async def __anext__(self) -> list[Task]:
        while True:
            if self._closed:
                raise StopAsyncIteration
            if self._pending is not None:
                snapshot = self._pending
                self._pending = None
                self._ready.clear()
                return snapshot
            await self._ready.wait()
