# SPDX-License-Identifier: MIT

from enum import StrEnum

from zentodo.errors import ValidationError


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_WEIGHT: dict[str, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}

PRIORITY_LABEL: dict[str, str] = {
    Priority.HIGH: "高优",
    Priority.MEDIUM: "中等",
    Priority.LOW: "低优",
}


def parse_priority(value: str) -> Priority:
    try:
        return Priority(value.strip().lower())
    except ValueError:
        raise ValidationError(
            f"unknown priority '{value}', expected one of: high, medium, low"
        )
