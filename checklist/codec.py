"""Record codec: one task per comma-separated row."""

from collections.abc import Iterable
from datetime import date, datetime

from .errors import MalformedRecord
from .models import ONCE, Task

FIELD_SEPARATOR = ","
DATE_FORMAT = "%Y-%m-%d"
ONCE_LABEL = "once"

HEADER_FIELDS = ("task_name", "due_date", "interval", "checked")

_TRUE_FLAGS = {"1", "true", "x", "yes"}
_FALSE_FLAGS = {"0", "false", "", "no"}


def validate_name(name: str) -> str:
    if not name:
        raise ValueError("task name cannot be empty")
    if FIELD_SEPARATOR in name:
        raise ValueError(f"task name cannot contain '{FIELD_SEPARATOR}'")
    if "\n" in name or "\r" in name:
        raise ValueError("task name cannot contain line breaks")
    return name


def parse_date(text: str) -> date:
    # strptime accepts unpadded fields like 2024-1-5
    if len(text) != 10:
        raise ValueError(f"invalid date '{text}', expected YYYY-MM-DD")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"invalid date '{text}', expected YYYY-MM-DD") from e


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_interval(text: str) -> int | None:
    """Parse 'once' or a positive day count."""
    if text.strip().lower() == ONCE_LABEL:
        return ONCE
    digits = text.strip()
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid interval '{text}', expected 'once' or a positive integer")
    days = int(text)
    if days <= 0:
        raise ValueError(f"invalid interval '{text}', must be positive")
    return days


def _parse_checked(text: str) -> bool:
    flag = text.strip().lower()
    if flag in _TRUE_FLAGS:
        return True
    if flag in _FALSE_FLAGS:
        return False
    raise ValueError(f"invalid checked flag '{text}'")


def decode_row(line: str, line_no: int | None = None) -> Task:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) not in (3, 4):
        raise MalformedRecord(f"expected 3 or 4 fields, got {len(fields)}", line_no, line)

    try:
        name = validate_name(fields[0])
        due_date = parse_date(fields[1])
        interval = parse_interval(fields[2])
        checked = _parse_checked(fields[3]) if len(fields) == 4 else False
    except ValueError as e:
        raise MalformedRecord(str(e), line_no, line) from e

    return Task(name=name, due_date=due_date, interval=interval, checked=checked)


def encode_row(task: Task) -> str:
    return FIELD_SEPARATOR.join(
        [
            task.name,
            format_date(task.due_date),
            task.interval_label,
            "1" if task.checked else "0",
        ]
    )


def _is_marker(line: str) -> bool:
    if set(line.strip()) == {"-"}:
        return True
    fields = tuple(f.strip().lower() for f in line.split(FIELD_SEPARATOR))
    return fields in (HEADER_FIELDS[:3], HEADER_FIELDS)


def decode_file(data: bytes) -> list[Task]:
    """Decode the whole backing file.

    Blank lines are skipped, as is a single header or dashed separator line
    when it comes first. Raises MalformedRecord for any other unparseable line.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRecord(f"file is not valid UTF-8: {e}") from e

    tasks = []
    seen_content = False
    # split on \n only; names may hold other characters splitlines() breaks on
    for line_no, raw in enumerate(text.split("\n"), start=1):
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        if not seen_content:
            seen_content = True
            if _is_marker(line):
                continue
        tasks.append(decode_row(line, line_no))
    return tasks


def encode_file(tasks: Iterable[Task]) -> bytes:
    return "".join(f"{encode_row(task)}\n" for task in tasks).encode("utf-8")


__all__ = [
    "DATE_FORMAT",
    "FIELD_SEPARATOR",
    "ONCE_LABEL",
    "decode_file",
    "decode_row",
    "encode_file",
    "encode_row",
    "format_date",
    "parse_date",
    "parse_interval",
    "validate_name",
]
