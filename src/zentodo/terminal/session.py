# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from zentodo import state as app_state
from zentodo.errors import ZentodoError
from zentodo.repository.configuration import CONFIGURATION_REPO
from zentodo.session import Session, create_session

logger = logging.getLogger(__name__)

T = TypeVar("T")

console = Console(stderr=True)


def report_error(error: Exception) -> None:
    console.print(f"[red]{escape(str(error))}[/red]")


def run_in_session(
    action: Callable[[Session], Awaitable[T]],
    render: Optional[Callable[[Session], None]] = None,
    mode: Optional[str] = None,
) -> T:
    """
    Open a session, run one command against it and render the settled view.

    Store failures reported after the command returned still fail the
    process with exit code 1.
    """
    config = CONFIGURATION_REPO.get_config()
    failures: list[Exception] = []

    def on_failure(error: Exception) -> None:
        failures.append(error)
        report_error(error)

    async def runner() -> T:
        session = create_session(config, mode or app_state.get_mode_override())
        session.on_error(on_failure)
        async with session:
            result = await action(session)
            await session.settle()
            if render is not None:
                render(session)
            return result

    try:
        result = asyncio.run(runner())
    except ZentodoError as e:
        logger.debug("command failed: %s", e)
        report_error(e)
        raise typer.Exit(1)

    if failures:
        raise typer.Exit(1)
    return result
