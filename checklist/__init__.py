"""checklist: recurring task tracker backed by a flat CSV-like file."""

from .errors import (
    ChecklistError,
    DuplicateTask,
    InvalidArgument,
    MalformedRecord,
    MissingFilePath,
    TaskNotFound,
    UnknownCommand,
)
from .models import ONCE, Task

__all__ = [
    "ONCE",
    "ChecklistError",
    "DuplicateTask",
    "InvalidArgument",
    "MalformedRecord",
    "MissingFilePath",
    "Task",
    "TaskNotFound",
    "UnknownCommand",
]
