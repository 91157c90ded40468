# SPDX-License-Identifier: MIT

from enum import StrEnum

from zentodo.errors import ValidationError


class SessionMode(StrEnum):
    LOCAL = "local"
    CLOUD = "cloud"


def parse_session_mode(value: str) -> SessionMode:
    try:
        return SessionMode(value.strip().lower())
    except ValueError:
        raise ValidationError(f"unknown mode '{value}', expected local or cloud")
