# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

from zentodo.model.entity_id import Identity


class AuthStatus(StrEnum):
    UNKNOWN = "unknown"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class AuthState(TypedDict):
    status: AuthStatus
    identity: Optional[Identity]
