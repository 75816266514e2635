"""Conversion of raw console input into typed task values.

Creation is lenient: anything unusable falls back to a default.
Status updates are strict and raise InvalidChoiceError instead.
"""
from __future__ import annotations

from .enums import Priority, TaskStatus
from .errors import InvalidChoiceError

DEFAULT_TITLE = "Untitled"
DEFAULT_ASSIGNEE = "Unassigned"
DEFAULT_PRIORITY = Priority.LOW
DEFAULT_DUE_DAYS = 1


def parse_int(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def text_or_default(raw: str | None, default: str) -> str:
    if raw is None or not raw.strip():
        return default
    return raw


def parse_priority(raw: object) -> Priority:
    if isinstance(raw, Priority):
        return raw
    value = parse_int(raw)
    if value is None or value not in Priority._value2member_map_:
        return DEFAULT_PRIORITY
    return Priority(value)


def parse_days(raw: object) -> int:
    value = parse_int(raw)
    return DEFAULT_DUE_DAYS if value is None else value


def parse_status(raw: object) -> TaskStatus:
    if isinstance(raw, TaskStatus):
        return raw
    value = parse_int(raw)
    if value is None or value not in TaskStatus._value2member_map_:
        raise InvalidChoiceError(raw, [f"{s.value}={s.label}" for s in TaskStatus])
    return TaskStatus(value)


def parse_task_id(raw: object) -> int | None:
    return parse_int(raw)
