# SPDX-License-Identifier: MIT

from typing import Optional

from zentodo.model.entity_id import Identity
from zentodo.model.identity import AuthState, AuthStatus


def get_unknown_auth_state() -> AuthState:
    return {"status": AuthStatus.UNKNOWN, "identity": None}


def get_auth_state(identity: Optional[Identity]) -> AuthState:
    if identity is None:
        return {"status": AuthStatus.ANONYMOUS, "identity": None}
    return {"status": AuthStatus.AUTHENTICATED, "identity": identity}
