# SPDX-License-Identifier: MIT

from typing import Annotated, Any, Optional

import typer

from zentodo.model.filter import ALL_CATEGORIES, StatusFilter
from zentodo.session import Session
from zentodo.terminal.custom_typer import AliasedTyperGroup
from zentodo.terminal.session import run_in_session
from zentodo.terminal.validate import (
    validate_category,
    validate_category_filter,
    validate_priority,
    validate_status_filter,
    validate_text,
)
from zentodo.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def render_tasks(session: Session) -> None:
    task_report.header(
        session.mode,
        session.stats,
        session.filters,
        session.auth_state["identity"],
    )
    task_report.tasks_view(session.visible)


@app.command("add, a", no_args_is_help=True)
def add(
    text: Annotated[str, typer.Argument(callback=validate_text)],
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            callback=validate_category,
            help="valid input: 工作, 生活, 学习, 健康, 杂项",
        ),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="valid input: high, medium, low",
        ),
    ] = None,
) -> None:
    async def action(session: Session) -> Any:
        return await session.add_task(text, category, priority)

    run_in_session(action, render_tasks)


@app.command("list, ls")
def list_tasks(
    status: Annotated[
        str,
        typer.Option(
            "--status",
            "-s",
            callback=validate_status_filter,
            help="valid input: all, active, completed",
        ),
    ] = StatusFilter.ALL,
    category: Annotated[
        str,
        typer.Option(
            "--category",
            "-c",
            callback=validate_category_filter,
            help="valid input: all, 工作, 生活, 学习, 健康, 杂项",
        ),
    ] = ALL_CATEGORIES,
) -> None:
    async def action(session: Session) -> None:
        session.set_status_filter(status)
        session.set_category_filter(category)

    run_in_session(action, render_tasks)


@app.command("toggle, t", no_args_is_help=True)
def toggle(id: str) -> None:
    async def action(session: Session) -> Any:
        return await session.toggle_task(id)

    run_in_session(action, render_tasks)


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    async def action(session: Session) -> Any:
        return await session.delete_task(id)

    run_in_session(action, render_tasks)


@app.command("clear, c")
def clear() -> None:
    """Delete every completed task."""

    async def action(session: Session) -> Any:
        return await session.clear_completed()

    run_in_session(action, render_tasks)


def stats() -> None:
    """Show task counts and completion progress."""

    async def action(session: Session) -> None:
        return None

    def render(session: Session) -> None:
        task_report.header(
            session.mode, session.stats, identity=session.auth_state["identity"]
        )
        task_report.stats_view(session.stats)

    run_in_session(action, render)
