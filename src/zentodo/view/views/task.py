# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table

from zentodo.color import (
    COMPLETED_TASK_COLOR,
    PRIORITY_COLOR,
    PROGRESS_COLOR,
    PROGRESS_DONE_COLOR,
)
from zentodo.model.filter import ALL_CATEGORIES, STATUS_FILTER_LABEL, FilterState
from zentodo.model.priority import PRIORITY_LABEL
from zentodo.model.stats import Stats
from zentodo.model.task import Task
from zentodo.time import datetime_to_display_local_datetime_str_optional


def remaining_message(stats: Stats) -> str:
    if stats["active"] == 0 and stats["total"] > 0:
        return "太棒了！所有任务已清空 🎉"
    return f"你还有 {stats['active']} 个任务待处理"


def header(
    mode: str,
    stats: Stats,
    filters: Optional[FilterState] = None,
    identity: Optional[str] = None,
) -> None:
    """Print the app title, remaining-task message and progress.

    Args:
        mode: local or cloud
        stats: Stats over the whole visible set
        filters: Active filters, shown when given
        identity: Signed in user in cloud mode
    """
    console = Console()
    progress_color = PROGRESS_DONE_COLOR if stats["percent"] == 100 else PROGRESS_COLOR

    title = f"[bold dark_orange]井井有条[/bold dark_orange] [plum1]{mode}[/plum1]"
    if identity is not None:
        title += f" [sandy_brown]{identity}[/sandy_brown]"
    console.print(Padding(title, (1, 0, 0, 1)))
    console.print(
        Padding(
            f"{remaining_message(stats)}  "
            f"[{progress_color}]{stats['percent']}%[/{progress_color}]",
            (0, 1),
        )
    )
    if filters is not None:
        category = (
            "全部" if filters["category"] == ALL_CATEGORIES else filters["category"]
        )
        console.print(
            Padding(
                f"[sandy_brown]{STATUS_FILTER_LABEL[filters['status']]} · {category}[/sandy_brown]",
                (0, 1),
            )
        )


def tasks_view(tasks: list[Task], use_color: bool = True) -> None:
    console = Console()

    if len(tasks) == 0:
        console.print(Padding("[bold]没有找到任务[/bold]", (1, 1, 0, 1)))
        console.print(Padding("试着添加一个新任务，或者切换筛选条件", (0, 1, 1, 1)))
        return

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id")
    tasks_table.add_column("state")
    tasks_table.add_column("priority")
    tasks_table.add_column("category")
    tasks_table.add_column("text")
    tasks_table.add_column("created")

    for task in tasks:
        created = (
            datetime_to_display_local_datetime_str_optional(task["created_at"])
            or "pending"
        )
        row = [
            str(task["id"]),
            "✓" if task["completed"] else "○",
            PRIORITY_LABEL.get(task["priority"], task["priority"]),
            task["category"],
            escape(task["text"]),
            created,
        ]

        if use_color:
            if task["completed"]:
                row = [
                    f"[{COMPLETED_TASK_COLOR}]{value}[/{COMPLETED_TASK_COLOR}]"
                    for value in row
                ]
            else:
                color = PRIORITY_COLOR.get(task["priority"])
                if color is not None:
                    row[2] = f"[{color}]{row[2]}[/{color}]"

        tasks_table.add_row(*row)

    console.print(tasks_table)


def stats_view(stats: Stats) -> None:
    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("total")
    table.add_column("active")
    table.add_column("completed")
    table.add_column("progress")
    table.add_row(
        str(stats["total"]),
        str(stats["active"]),
        str(stats["completed"]),
        f"{stats['percent']}%",
    )
    console.print(table)
