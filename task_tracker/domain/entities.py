from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import Priority, TaskStatus

TITLE_WIDTH = 20


@dataclass(frozen=True)
class TaskEntity:
    id: int
    title: str
    assignee: str
    priority: Priority
    status: TaskStatus
    due_date: datetime

    def is_overdue(self, now: datetime | None = None) -> bool:
        now = now or datetime.now()
        return self.due_date < now and self.status != TaskStatus.DONE

    def describe(self) -> str:
        title = self.title
        if len(title) > TITLE_WIDTH:
            title = title[: TITLE_WIDTH - 3] + "..."
        return "| {:<3} | {:<20} | {:<10} | {:<10} | {:<12} |".format(
            self.id,
            title,
            self.priority.label,
            self.status.label,
            self.due_date.strftime("%Y-%m-%d"),
        )
