# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Callable, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from zentodo import configuration
from zentodo.errors import ValidationError
from zentodo.model.entity_id import Identity
from zentodo.observable import Listeners

logger = logging.getLogger(__name__)


class FileIdentityProvider:
    """Remembers the signed in user between runs in identity.yaml."""

    def __init__(
        self, path: Optional[Path] = None, default_user: Optional[str] = None
    ) -> None:
        self._path = path
        self._default_user = default_user
        self._identity: Optional[Identity] = None
        self._loaded = False
        self._listeners = Listeners[Optional[Identity]]()

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_IDENTITY_PATH

    def __load_data(self) -> None:
        self._loaded = True
        if not self.path.is_file():
            return
        raw = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        if raw is not None:
            self._identity = raw.get("identity")

    def __save_data(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            dump({"identity": self._identity}, Dumper=Dumper, allow_unicode=True),
            encoding="utf-8",
        )

    def current_identity(self) -> Optional[Identity]:
        if not self._loaded:
            self.__load_data()
        return self._identity

    def watch(
        self, listener: Callable[[Optional[Identity]], None]
    ) -> Callable[[], None]:
        return self._listeners.add(listener)

    async def sign_in(self, user: Optional[str] = None) -> Identity:
        identity = (user or self._default_user or "").strip()
        if not identity:
            raise ValidationError(
                "no user given and no cloud_user configured, cannot sign in"
            )
        self.current_identity()
        self._identity = identity
        self.__save_data()
        logger.info("signed in as %s", identity)
        self._listeners.notify(identity)
        return identity

    async def sign_out(self) -> None:
        self.current_identity()
        previous = self._identity
        self._identity = None
        self.__save_data()
        logger.info("signed out %s", previous)
        self._listeners.notify(None)
