"""Task store: ordered in-memory tasks plus load/save of the backing file."""

import logging
import os
import tempfile
from collections.abc import Iterable, Iterator
from datetime import date, timedelta
from pathlib import Path

from . import codec
from .errors import DuplicateTask, InvalidArgument, TaskNotFound
from .models import ONCE, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered task list for one invocation.

    Order is insertion order and is never changed by check/uncheck.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, name: object) -> bool:
        return any(t.name == name for t in self._tasks)

    def _index(self, name: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.name == name:
                return i
        raise TaskNotFound(name)

    def get(self, name: str) -> Task:
        return self._tasks[self._index(name)]

    def list(self) -> list[Task]:
        return list(self._tasks)

    def add(self, name: str, due_date: date, interval: int | None = ONCE) -> Task:
        if name in self:
            raise DuplicateTask(name)
        task = Task(name=name, due_date=due_date, interval=interval)
        self._tasks.append(task)
        return task

    def remove(self, name: str) -> Task:
        return self._tasks.pop(self._index(name))

    def check(self, name: str) -> Task:
        """Mark a task done.

        One-off tasks stay checked. Recurring tasks move their due date forward
        by one interval and remain unchecked for the next cycle.
        """
        task = self.get(name)
        if task.is_recurring:
            try:
                task.due_date = task.due_date + timedelta(days=task.interval)
            except OverflowError as e:
                raise InvalidArgument(
                    f"could not calculate next due date for '{name}': {e}"
                ) from e
            task.checked = False
        else:
            task.checked = True
        return task

    def uncheck(self, name: str) -> Task:
        task = self.get(name)
        task.checked = False
        return task


def load(path: Path) -> TaskStore:
    """Read the backing file. A missing file is an empty store."""
    path = Path(path)
    if not path.exists():
        logger.debug("Backing file %s does not exist, starting empty", path)
        return TaskStore()
    tasks = codec.decode_file(path.read_bytes())
    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return TaskStore(tasks)


def save(store: TaskStore, path: Path) -> None:
    """Overwrite the backing file with the full store.

    Writes to a temp file in the same directory and renames it over the
    target, so readers never see a partial file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = codec.encode_file(store.list())

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Saved %d tasks to %s", len(store), path)


__all__ = ["TaskStore", "load", "save"]
