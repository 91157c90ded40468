# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from zentodo import state as app_state
from zentodo.terminal import auth, configuration, task
from zentodo.terminal.custom_typer import AliasedTyperGroup
from zentodo.terminal.validate import validate_mode

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="井井有条 - Personal task tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(auth.app, name="auth, au")
app.add_typer(configuration.app, name="config, c")
app.command(name="stats, st")(task.stats)


@app.callback()
def main_callback(
    mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            "-m",
            callback=validate_mode,
            help="Override the configured mode: local or cloud",
        ),
    ] = None,
) -> None:
    """
    井井有条 - Personal task tracking in the CLI

    Global options that apply to all commands.
    """
    app_state.set_mode_override(mode)


def run() -> None:
    app()
