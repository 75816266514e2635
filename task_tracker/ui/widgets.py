from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from task_tracker.domain.entities import TaskEntity
from task_tracker.domain.enums import Priority, TaskStatus

MENU_OPTIONS = [
    ("1", "Add New Task"),
    ("2", "View All Tasks"),
    ("3", "Search Tasks"),
    ("4", "Update Task Status"),
    ("5", "Sort by Priority"),
    ("6", "Sort by Due Date"),
    ("7", "Exit"),
]

PRIORITY_COLORS = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}

STATUS_COLORS = {
    TaskStatus.TODO: "white",
    TaskStatus.IN_PROGRESS: "cyan",
    TaskStatus.DONE: "green",
}

PRIORITY_PROMPT = "Priority (0=Low, 1=Med, 2=High)"
STATUS_PROMPT = "New Status (0=ToDo, 1=InProg, 2=Done)"

OVERDUE_TAG = "OVERDUE"


def header(title: str) -> Panel:
    return Panel(Text(title.upper(), style="bold cyan"), box=box.DOUBLE, expand=False)


def main_menu() -> Panel:
    lines = Text()
    for key, label in MENU_OPTIONS:
        lines.append(f" {key}. {label}\n")
    return Panel(
        lines,
        title=Text("PROJECT TASK TRACKER", style="bold yellow"),
        box=box.DOUBLE,
        expand=False,
    )


def task_table(tasks: Sequence[TaskEntity], now: datetime | None = None) -> Table:
    now = now or datetime.now()
    table = Table(box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("ID", justify="right", no_wrap=True)
    table.add_column("Title", max_width=40)
    table.add_column("Assignee")
    table.add_column("Priority")
    table.add_column("Status")
    table.add_column("Due Date", no_wrap=True)
    table.add_column("", no_wrap=True)

    for task in tasks:
        overdue = task.is_overdue(now)
        table.add_row(
            str(task.id),
            task.title,
            task.assignee,
            Text(task.priority.label, style=PRIORITY_COLORS.get(task.priority, "")),
            Text(task.status.label, style=STATUS_COLORS.get(task.status, "")),
            task.due_date.strftime("%Y-%m-%d"),
            Text(OVERDUE_TAG, style="bold red") if overdue else "",
            style="red" if overdue else None,
        )
    return table


def success(message: str) -> Text:
    return Text(f"[SUCCESS] {message}", style="green")


def error(message: str) -> Text:
    return Text(f"[ERROR] {message}", style="red")
