from __future__ import annotations

from collections.abc import Iterable

from .entities import TaskEntity


def matches_keyword(task: TaskEntity, keyword: str | None) -> bool:
    needle = (keyword or "").lower()
    if not needle:
        return True
    return needle in task.title.lower() or needle in task.assignee.lower()


def filter_by_keyword(tasks: Iterable[TaskEntity], keyword: str | None) -> list[TaskEntity]:
    return [task for task in tasks if matches_keyword(task, keyword)]
