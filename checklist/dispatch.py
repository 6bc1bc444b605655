"""Command dispatch: one command per invocation against the task store."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from . import codec, store
from .config import Config
from .errors import InvalidArgument, UnknownCommand
from .models import ONCE, Task
from .store import TaskStore

logger = logging.getLogger(__name__)


class Command(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    LIST = "list"
    CHECK = "check"
    UNCHECK = "uncheck"

    @classmethod
    def parse(cls, name: "str | Command") -> "Command":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError as e:
            raise UnknownCommand(str(name)) from e


# (min, max) positional arguments
ARITY: dict[Command, tuple[int, int]] = {
    Command.ADD: (2, 3),
    Command.REMOVE: (1, 1),
    Command.LIST: (0, 0),
    Command.CHECK: (1, 1),
    Command.UNCHECK: (1, 1),
}

USAGE: dict[Command, str] = {
    Command.ADD: "add <task_name> <due_date> [interval]",
    Command.REMOVE: "remove <task_name>",
    Command.LIST: "list",
    Command.CHECK: "check <task_name>",
    Command.UNCHECK: "uncheck <task_name>",
}


@dataclass
class Result:
    command: Command
    tasks: list[Task] = field(default_factory=list)
    changed: bool = False
    task: Task | None = None


def _check_arity(command: Command, args: Sequence[str]) -> None:
    low, high = ARITY[command]
    if not low <= len(args) <= high:
        raise InvalidArgument(
            f"'{command.value}' takes {low if low == high else f'{low} to {high}'} "
            f"argument(s), got {len(args)} (usage: checklist {USAGE[command]})"
        )


def _parse_add(args: Sequence[str]):
    name, due, *rest = args
    try:
        name = codec.validate_name(name)
        due_date = codec.parse_date(due)
        interval = codec.parse_interval(rest[0]) if rest else ONCE
    except ValueError as e:
        raise InvalidArgument(str(e)) from e
    return name, due_date, interval


def execute(task_store: TaskStore, command: "str | Command", args: Sequence[str]) -> Result:
    """Apply one command to an in-memory store.

    Validation happens before any mutation, so a raised error leaves the
    store as it was.
    """
    command = Command.parse(command)
    _check_arity(command, args)

    if command is Command.LIST:
        return Result(command, tasks=task_store.list())

    if command is Command.ADD:
        task = task_store.add(*_parse_add(args))
    elif command is Command.REMOVE:
        task = task_store.remove(args[0])
    elif command is Command.CHECK:
        task = task_store.check(args[0])
    else:
        task = task_store.uncheck(args[0])

    return Result(command, tasks=task_store.list(), changed=True, task=task)


def run(config: Config, command: "str | Command", args: Sequence[str]) -> Result:
    """Load the backing file, execute one command, persist if it mutated."""
    command = Command.parse(command)
    _check_arity(command, args)

    task_store = store.load(config.file_path)
    result = execute(task_store, command, args)
    logger.debug("%s %s -> changed=%s", command.value, list(args), result.changed)

    if result.changed:
        store.save(task_store, config.file_path)
    return result


__all__ = ["ARITY", "Command", "Result", "execute", "run"]
