from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from task_tracker.domain.entities import TaskEntity
from task_tracker.domain.enums import Priority, TaskStatus
from task_tracker.domain.errors import PersistenceError

logger = logging.getLogger(__name__)

# Keys written by the earlier console build of the tracker, accepted on load.
LEGACY_KEYS = {
    "id": "Id",
    "title": "Title",
    "assignee": "Assignee",
    "priority": "TaskPriority",
    "status": "TaskStatus",
    "dueDate": "DueDate",
}


class MalformedDocumentError(ValueError):
    pass


def _field(raw: Mapping[str, Any], key: str) -> Any:
    if key in raw:
        return raw[key]
    legacy = LEGACY_KEYS[key]
    if legacy in raw:
        return raw[legacy]
    raise MalformedDocumentError(f"missing field {key!r}")


def _enum_value(enum_cls, value: Any):
    if isinstance(value, bool):
        raise MalformedDocumentError(f"invalid {enum_cls.__name__}: {value!r}")
    try:
        if isinstance(value, int):
            return enum_cls(value)
        if isinstance(value, str):
            return enum_cls.from_label(value)
    except ValueError as exc:
        raise MalformedDocumentError(str(exc)) from exc
    raise MalformedDocumentError(f"invalid {enum_cls.__name__}: {value!r}")


def _to_entity(raw: Any) -> TaskEntity:
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError(f"task record must be an object, got {type(raw).__name__}")
    task_id = _field(raw, "id")
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        raise MalformedDocumentError(f"invalid id: {task_id!r}")
    try:
        due_date = datetime.fromisoformat(str(_field(raw, "dueDate")))
    except ValueError as exc:
        raise MalformedDocumentError(str(exc)) from exc
    if due_date.tzinfo is not None:
        # Stored dates may carry an offset; in memory they are naive local time.
        due_date = due_date.astimezone().replace(tzinfo=None)
    return TaskEntity(
        id=task_id,
        title=str(_field(raw, "title")),
        assignee=str(_field(raw, "assignee")),
        priority=_enum_value(Priority, _field(raw, "priority")),
        status=_enum_value(TaskStatus, _field(raw, "status")),
        due_date=due_date,
    )


def _to_record(task: TaskEntity) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "assignee": task.assignee,
        "priority": task.priority.label,
        "status": task.status.label,
        "dueDate": task.due_date.isoformat(),
    }


class JsonTaskRepository:
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> list[TaskEntity]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise MalformedDocumentError("document root must be an array")
            tasks = [_to_entity(raw) for raw in data]
        except (OSError, ValueError, RecursionError) as exc:
            logger.warning("Ignoring unreadable task file %s: %s", self._path, exc)
            return []
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[TaskEntity]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            payload = json.dumps([_to_record(task) for task in tasks], indent=2, ensure_ascii=False)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", encoding="utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.error("Failed to save tasks to %s: %s", self._path, exc)
            raise PersistenceError(self._path, exc) from exc
