# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

from zentodo.errors import ValidationError
from zentodo.model.category import CATEGORIES

ALL_CATEGORIES = "all"


class StatusFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


STATUS_FILTER_LABEL: dict[str, str] = {
    StatusFilter.ALL: "全部",
    StatusFilter.ACTIVE: "进行中",
    StatusFilter.COMPLETED: "已完成",
}


class FilterState(TypedDict):
    status: StatusFilter
    category: str


def parse_status_filter(value: str) -> StatusFilter:
    try:
        return StatusFilter(value.strip().lower())
    except ValueError:
        raise ValidationError(
            f"unknown status filter '{value}', expected one of: all, active, completed"
        )


def parse_category_filter(value: str) -> str:
    value = value.strip()
    if value == ALL_CATEGORIES or value in CATEGORIES:
        return value
    raise ValidationError(
        f"unknown category filter '{value}', expected 'all' or one of: {', '.join(CATEGORIES)}"
    )
