class ChecklistError(Exception):
    """Base exception for checklist errors."""

    pass


class MissingFilePath(ChecklistError):
    """Raised when no backing file path is configured."""

    pass


class MalformedRecord(ChecklistError):
    """Raised when the backing file holds a row that cannot be parsed."""

    def __init__(self, reason: str, line_no: int | None = None, line: str | None = None):
        self.reason = reason
        self.line_no = line_no
        self.line = line
        if line_no is None:
            super().__init__(f"Malformed record: {reason}")
        else:
            super().__init__(f"Malformed record on line {line_no} ({line!r}): {reason}")


class UnknownCommand(ChecklistError):
    """Raised when the command name is not recognized."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command '{name}'")


class InvalidArgument(ChecklistError):
    """Raised for bad dates, intervals, names, or argument counts."""

    pass


class DuplicateTask(ChecklistError):
    """Raised when adding a task whose name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Task '{name}' already exists")


class TaskNotFound(ChecklistError):
    """Raised when a task name is not in the store."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Task '{name}' not found")
