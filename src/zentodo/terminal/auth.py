# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from zentodo.model.entity_id import Identity
from zentodo.model.mode import SessionMode
from zentodo.session import Session
from zentodo.terminal.custom_typer import AliasedTyperGroup
from zentodo.terminal.session import run_in_session

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def render_auth(session: Session) -> None:
    console = Console()
    state = session.auth_state
    if state["identity"] is None:
        console.print(f"[sandy_brown]{state['status']}[/sandy_brown]")
    else:
        console.print(
            f"[sandy_brown]{state['status']}[/sandy_brown] [plum1]{state['identity']}[/plum1]"
        )


@app.command("login, li")
def login(
    user: Annotated[
        Optional[str],
        typer.Option("--user", "-u", help="defaults to the configured cloud_user"),
    ] = None,
) -> None:
    async def action(session: Session) -> Identity:
        return await session.sign_in(user)

    run_in_session(action, render_auth, mode=SessionMode.CLOUD)


@app.command("logout, lo")
def logout() -> None:
    async def action(session: Session) -> None:
        await session.sign_out()

    run_in_session(action, render_auth, mode=SessionMode.CLOUD)


@app.command("whoami, w")
def whoami() -> None:
    async def action(session: Session) -> None:
        return None

    run_in_session(action, render_auth, mode=SessionMode.CLOUD)
