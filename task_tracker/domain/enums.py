from __future__ import annotations

from enum import IntEnum

# Keyed by member name: IntEnum members of different classes compare equal by value.
_LABELS = {
    "LOW": "Low",
    "MEDIUM": "Medium",
    "HIGH": "High",
    "TODO": "ToDo",
    "IN_PROGRESS": "InProgress",
    "DONE": "Done",
}


class _LabeledEnum(IntEnum):
    @property
    def label(self) -> str:
        return _LABELS[self.name]

    @classmethod
    def from_label(cls, label: str):
        for member in cls:
            if member.label == label:
                return member
        raise ValueError(f"{label!r} is not a valid {cls.__name__}")


class Priority(_LabeledEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


class TaskStatus(_LabeledEnum):
    TODO = 0
    IN_PROGRESS = 1
    DONE = 2
