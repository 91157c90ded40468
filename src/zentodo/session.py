# SPDX-License-Identifier: MIT

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from types import TracebackType
from typing import Any, Callable, Optional

from zentodo import configuration
from zentodo.errors import ZentodoError
from zentodo.identity.provider import FileIdentityProvider
from zentodo.model.category import Category, parse_category
from zentodo.model.entity_id import Identity, TaskId
from zentodo.model.filter import FilterState
from zentodo.model.identity import AuthState, AuthStatus
from zentodo.model.mode import SessionMode, parse_session_mode
from zentodo.model.priority import Priority, parse_priority
from zentodo.model.stats import Stats
from zentodo.model.task import Task
from zentodo.observable import Listeners
from zentodo.ports import IdentityProvider, TaskRepository
from zentodo.repository.cloud_task import CloudTaskRepository
from zentodo.repository.task import LocalTaskRepository
from zentodo.store.document import FileDocumentStore
from zentodo.template.identity import get_auth_state, get_unknown_auth_state
from zentodo.view.view_model import TaskViewModel

logger = logging.getLogger(__name__)


class Session(ABC):
    """
    Explicitly opened and closed unit of work for the presentation layer.

    Owns the repository and the view model bound to it, and exposes the
    commands the presentation dispatches. Blank task text is ignored before
    reaching the repository.
    """

    mode: SessionMode

    def __init__(
        self,
        repository: TaskRepository,
        default_category: str = Category.WORK,
        default_priority: str = Priority.MEDIUM,
    ) -> None:
        self.repository = repository
        self.view_model = TaskViewModel()
        self.default_category = parse_category(default_category)
        self.default_priority = parse_priority(default_priority)
        self._errors = Listeners[Exception]()
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def visible(self) -> list[Task]:
        return self.view_model.visible

    @property
    def stats(self) -> Stats:
        return self.view_model.stats

    @property
    def filters(self) -> FilterState:
        return self.view_model.filters

    @property
    @abstractmethod
    def auth_state(self) -> AuthState: ...

    def watch(self, listener: Callable[[TaskViewModel], None]) -> Callable[[], None]:
        return self.view_model.watch(listener)

    def on_error(self, listener: Callable[[Exception], None]) -> Callable[[], None]:
        return self._errors.add(listener)

    async def open(self) -> None:
        if self._is_open:
            return
        self.view_model.bind(self.repository)
        self._is_open = True
        logger.debug("%s session opened", self.mode)

    async def close(self) -> None:
        if not self._is_open:
            return
        self.view_model.unbind()
        self._is_open = False
        logger.debug("%s session closed", self.mode)

    async def settle(self) -> None:
        return

    async def __aenter__(self) -> "Session":
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.close()

    def __ensure_open(self) -> None:
        if not self._is_open:
            raise ZentodoError("session is not open")

    def set_status_filter(self, status: str) -> None:
        self.view_model.set_status_filter(status)

    def set_category_filter(self, category: str) -> None:
        self.view_model.set_category_filter(category)

    async def add_task(
        self,
        text: str,
        category: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> Any:
        self.__ensure_open()
        if not text.strip():
            return None
        task_category = (
            self.default_category if category is None else parse_category(category)
        )
        task_priority = (
            self.default_priority if priority is None else parse_priority(priority)
        )
        return self.repository.create(text, task_category, task_priority)

    async def toggle_task(self, id: TaskId) -> Any:
        self.__ensure_open()
        return self.repository.toggle(id)

    async def delete_task(self, id: TaskId) -> Any:
        self.__ensure_open()
        return self.repository.remove(id)

    async def clear_completed(self) -> Any:
        self.__ensure_open()
        return self.repository.clear_completed()

    async def sign_in(self, user: Optional[str] = None) -> Identity:
        raise ZentodoError(f"sign in is not available in {self.mode} mode")

    async def sign_out(self) -> None:
        raise ZentodoError(f"sign out is not available in {self.mode} mode")


class LocalSession(Session):
    mode = SessionMode.LOCAL

    def __init__(
        self,
        repository: LocalTaskRepository,
        default_category: str = Category.WORK,
        default_priority: str = Priority.MEDIUM,
    ) -> None:
        super().__init__(repository, default_category, default_priority)

    @property
    def auth_state(self) -> AuthState:
        # Local mode has one implicit user
        return get_auth_state(None)


class CloudSession(Session):
    """
    Session mirroring one user's tasks from a document store.

    The repository is rebound on every identity transition; sign out closes
    the live channel and clears the visible set before the session reports
    anonymous.
    """

    mode = SessionMode.CLOUD
    repository: CloudTaskRepository

    def __init__(
        self,
        repository: CloudTaskRepository,
        identity_provider: IdentityProvider,
        default_category: str = Category.WORK,
        default_priority: str = Priority.MEDIUM,
    ) -> None:
        super().__init__(repository, default_category, default_priority)
        self.identity_provider = identity_provider
        self._auth_state = get_unknown_auth_state()
        self._auth_listeners = Listeners[AuthState]()
        self._unwatch_identity: Optional[Callable[[], None]] = None
        self._unwatch_errors: Optional[Callable[[], None]] = None

    @property
    def auth_state(self) -> AuthState:
        return deepcopy(self._auth_state)

    def watch_auth(self, listener: Callable[[AuthState], None]) -> Callable[[], None]:
        return self._auth_listeners.add(listener)

    async def open(self) -> None:
        if self.is_open:
            return
        await super().open()
        self._unwatch_errors = self.repository.on_error(self._errors.notify)
        self._unwatch_identity = self.identity_provider.watch(self.__on_identity)
        self.__on_identity(self.identity_provider.current_identity())
        await self.repository.settle()

    async def close(self) -> None:
        if not self.is_open:
            return
        if self._unwatch_identity is not None:
            self._unwatch_identity()
            self._unwatch_identity = None
        await self.repository.close()
        if self._unwatch_errors is not None:
            self._unwatch_errors()
            self._unwatch_errors = None
        self._auth_state = get_unknown_auth_state()
        await super().close()

    async def settle(self) -> None:
        await self.repository.settle()

    def __on_identity(self, identity: Optional[Identity]) -> None:
        if (
            self._auth_state["status"] != AuthStatus.UNKNOWN
            and self._auth_state["identity"] == identity
        ):
            return
        self.repository.bind(identity)
        self._auth_state = get_auth_state(identity)
        logger.info("auth state %s", self._auth_state["status"])
        self._auth_listeners.notify(self.auth_state)

    async def sign_in(self, user: Optional[str] = None) -> Identity:
        identity = await self.identity_provider.sign_in(user)
        self.__on_identity(identity)
        await self.repository.settle()
        return identity

    async def sign_out(self) -> None:
        await self.identity_provider.sign_out()
        self.__on_identity(None)


def create_session(
    config: configuration.Configuration, mode: Optional[str] = None
) -> Session:
    session_mode = parse_session_mode(mode or config["mode"])

    if session_mode == SessionMode.CLOUD:
        return CloudSession(
            CloudTaskRepository(FileDocumentStore(configuration.DATA_CLOUD_PATH)),
            FileIdentityProvider(
                configuration.DATA_IDENTITY_PATH, default_user=config["cloud_user"]
            ),
            default_category=config["default_category"],
            default_priority=config["default_priority"],
        )

    return LocalSession(
        LocalTaskRepository(
            configuration.DATA_TASKS_PATH,
            seed_sample_tasks=config["seed_sample_tasks"],
        ),
        default_category=config["default_category"],
        default_priority=config["default_priority"],
    )
