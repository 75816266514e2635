from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class TaskTrackerError(Exception):
    pass


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


class InvalidChoiceError(TaskTrackerError):
    def __init__(self, value: object, choices: Iterable[str]) -> None:
        self.value = value
        self.choices = list(choices)
        super().__init__(f"Invalid choice {value!r}. Expected one of: {', '.join(self.choices)}.")


class PersistenceError(TaskTrackerError):
    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Save failed ({path}): {cause}")
        self.path = path
        self.cause = cause
