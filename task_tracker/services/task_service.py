from __future__ import annotations

import logging
from typing import Protocol

from task_tracker.domain.entities import TaskEntity
from task_tracker.domain.errors import PersistenceError
from task_tracker.infra.activity_log import ActivityLog

from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskRepository(Protocol):
    def load(self) -> list[TaskEntity]: ...

    def save(self, tasks: list[TaskEntity]) -> None: ...


class TaskService:
    def __init__(self, store: TaskStore, repo: TaskRepository, activity_log: ActivityLog) -> None:
        self._store = store
        self._repo = repo
        self._activity_log = activity_log

    @classmethod
    def from_repository(cls, repo: TaskRepository, activity_log: ActivityLog) -> TaskService:
        return cls(TaskStore(repo.load()), repo, activity_log)

    def list_tasks(self) -> list[TaskEntity]:
        return self._store.tasks

    def get_task(self, task_id: int) -> TaskEntity | None:
        return self._store.find_by_id(task_id)

    def search(self, keyword: str | None) -> list[TaskEntity]:
        return self._store.search(keyword)

    def create_task(
        self,
        title: str | None,
        assignee: str | None,
        priority: object = None,
        days_until_due: object = None,
    ) -> TaskEntity:
        task = self._store.add(title, assignee, priority, days_until_due)
        logger.info("Created task %s (%s)", task.id, task.title)
        self._commit(f"Added Task {task.id}")
        return task

    def update_status(self, task_id: int, status: object) -> TaskEntity:
        task = self._store.update_status(task_id, status)
        logger.info("Task %s moved to %s", task.id, task.status.label)
        self._commit(f"Updated Task {task.id} to {task.status.label}")
        return task

    def sort_by_priority(self) -> list[TaskEntity]:
        self._store.sort_by_priority_desc()
        self._commit("Sorted tasks by priority")
        return self._store.tasks

    def sort_by_due_date(self) -> list[TaskEntity]:
        self._store.sort_by_due_date_asc()
        self._commit("Sorted tasks by due date")
        return self._store.tasks

    def _commit(self, message: str) -> None:
        try:
            self._repo.save(self._store.tasks)
        except PersistenceError:
            self._activity_log.write(f"{message} (save failed)")
            raise
        self._activity_log.write(message)
