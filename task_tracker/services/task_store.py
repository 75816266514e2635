from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timedelta

from task_tracker.domain.entities import TaskEntity
from task_tracker.domain.enums import TaskStatus
from task_tracker.domain.errors import TaskNotFoundError
from task_tracker.domain.filters import filter_by_keyword
from task_tracker.domain.parsing import (
    DEFAULT_ASSIGNEE,
    DEFAULT_DUE_DAYS,
    DEFAULT_TITLE,
    parse_days,
    parse_priority,
    parse_status,
    text_or_default,
)


class TaskStore:
    """In-memory ordered task list.

    Ids are never reused: a new task gets ``max(id) + 1``. Sorting reorders
    the list in place and is stable, so the latest sort wins and ties keep
    the order left by the previous one.
    """

    def __init__(
        self,
        tasks: Iterable[TaskEntity] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._tasks: list[TaskEntity] = list(tasks or [])
        self._clock = clock

    @property
    def tasks(self) -> list[TaskEntity]:
        return list(self._tasks)

    def next_id(self) -> int:
        return max((task.id for task in self._tasks), default=0) + 1

    def add(
        self,
        title: str | None,
        assignee: str | None,
        priority: object = None,
        days_until_due: object = None,
    ) -> TaskEntity:
        task = TaskEntity(
            id=self.next_id(),
            title=text_or_default(title, DEFAULT_TITLE),
            assignee=text_or_default(assignee, DEFAULT_ASSIGNEE),
            priority=parse_priority(priority),
            status=TaskStatus.TODO,
            due_date=self._due_date(parse_days(days_until_due)),
        )
        self._tasks.append(task)
        return task

    def _due_date(self, days: int) -> datetime:
        now = self._clock()
        try:
            return now + timedelta(days=days)
        except OverflowError:
            return now + timedelta(days=DEFAULT_DUE_DAYS)

    def find_by_id(self, task_id: int) -> TaskEntity | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    def update_status(self, task_id: int, new_status: object) -> TaskEntity:
        index = next((i for i, task in enumerate(self._tasks) if task.id == task_id), None)
        if index is None:
            raise TaskNotFoundError(task_id)
        updated = replace(self._tasks[index], status=parse_status(new_status))
        self._tasks[index] = updated
        return updated

    def search(self, keyword: str | None) -> list[TaskEntity]:
        return filter_by_keyword(self._tasks, keyword)

    def sort_by_priority_desc(self) -> None:
        self._tasks.sort(key=lambda task: task.priority, reverse=True)

    def sort_by_due_date_asc(self) -> None:
        self._tasks.sort(key=lambda task: task.due_date)
