# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from zentodo.errors import ValidationError
from zentodo.model.category import parse_category
from zentodo.model.filter import parse_category_filter, parse_status_filter
from zentodo.model.mode import parse_session_mode
from zentodo.model.priority import parse_priority


def validate_text(text: str) -> str:
    if not text.strip():
        raise typer.BadParameter("Task text cannot be empty")
    return text


def validate_category(category: Optional[str]) -> Optional[str]:
    if category is None:
        return None
    try:
        return parse_category(category)
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_priority(priority: Optional[str]) -> Optional[str]:
    if priority is None:
        return None
    try:
        return parse_priority(priority)
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_status_filter(status: str) -> str:
    try:
        return parse_status_filter(status)
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_category_filter(category: str) -> str:
    try:
        return parse_category_filter(category)
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_mode(mode: Optional[str]) -> Optional[str]:
    if mode is None:
        return None
    try:
        return parse_session_mode(mode)
    except ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    normalized = log_level.strip().upper()
    if normalized not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise typer.BadParameter(
            "Log level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return normalized
