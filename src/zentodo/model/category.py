# SPDX-License-Identifier: MIT

from enum import StrEnum

from zentodo.errors import ValidationError


class Category(StrEnum):
    WORK = "工作"
    LIFE = "生活"
    STUDY = "学习"
    HEALTH = "健康"
    MISC = "杂项"


CATEGORIES: list[str] = [category.value for category in Category]


def parse_category(value: str) -> Category:
    try:
        return Category(value.strip())
    except ValueError:
        raise ValidationError(
            f"unknown category '{value}', expected one of: {', '.join(CATEGORIES)}"
        )
