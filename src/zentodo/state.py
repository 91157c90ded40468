# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

_mode_override: ContextVar[Optional[str]] = ContextVar("mode_override", default=None)


def set_mode_override(value: Optional[str]) -> None:
    _mode_override.set(value)


def get_mode_override() -> Optional[str]:
    return _mode_override.get()
