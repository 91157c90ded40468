# SPDX-License-Identifier: MIT

"""
Interfaces between the session and its collaborators.

Repositories, stores and identity providers are typed against these
Protocols so tests can swap in fakes.
"""

from typing import Any, Callable, Optional, Protocol

from zentodo.model.entity_id import Identity, TaskId
from zentodo.model.task import Task
from zentodo.store.channel import SnapshotChannel


class TaskRepository(Protocol):
    @property
    def tasks(self) -> list[Task]: ...

    def subscribe(self, listener: Callable[[list[Task]], None]) -> Callable[[], None]: ...

    def create(self, text: str, category: str, priority: str) -> Any: ...

    def toggle(self, id: TaskId) -> Any: ...

    def remove(self, id: TaskId) -> Any: ...

    def clear_completed(self) -> Any: ...


class DocumentStore(Protocol):
    """Hosted multi-tenant task collection."""

    async def insert(self, document: Task) -> str: ...

    async def update(self, id: str, patch: dict[str, Any]) -> None: ...

    async def delete(self, id: str) -> None: ...

    def subscribe(self, owner: Identity) -> SnapshotChannel: ...


class IdentityProvider(Protocol):
    def current_identity(self) -> Optional[Identity]: ...

    def watch(
        self, listener: Callable[[Optional[Identity]], None]
    ) -> Callable[[], None]: ...

    async def sign_in(self, user: Optional[str] = None) -> Identity: ...

    async def sign_out(self) -> None: ...
