# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from zentodo import configuration
from zentodo.repository.configuration import CONFIGURATION_REPO
from zentodo.terminal.custom_typer import AliasedTyperGroup
from zentodo.terminal.validate import (
    validate_category,
    validate_log_level,
    validate_mode,
    validate_priority,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("mode", config["mode"])
    table.add_row("default_category", config["default_category"])
    table.add_row("default_priority", config["default_priority"])
    table.add_row(
        "seed_sample_tasks",
        "✓ Enabled" if config["seed_sample_tasks"] else "✗ Disabled",
    )
    table.add_row("cloud_user", config["cloud_user"] or "None")
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_path", str(configuration.LOG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    mode: Annotated[
        Optional[str],
        typer.Option("--mode", "-m", callback=validate_mode, help="local or cloud"),
    ] = None,
    default_category: Annotated[
        Optional[str],
        typer.Option("--default-category", "-c", callback=validate_category),
    ] = None,
    default_priority: Annotated[
        Optional[str],
        typer.Option("--default-priority", "-p", callback=validate_priority),
    ] = None,
    seed_sample_tasks: Annotated[
        Optional[bool],
        typer.Option("--seed-sample-tasks/--no-seed-sample-tasks"),
    ] = None,
    cloud_user: Annotated[Optional[str], typer.Option("--cloud-user", "-u")] = None,
    remove_cloud_user: Annotated[
        bool, typer.Option("--remove-cloud-user", "-ru")
    ] = False,
    data_path: Annotated[Optional[str], typer.Option("--data-path", "-d")] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", "-rd")
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", callback=validate_log_level),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        mode=mode,
        default_category=default_category,
        default_priority=default_priority,
        seed_sample_tasks=seed_sample_tasks,
        cloud_user=cloud_user,
        remove_cloud_user=remove_cloud_user,
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    view()
