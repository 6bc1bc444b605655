"""Task formatting for CLI display."""

from datetime import date

import typer

from .codec import format_date
from .models import Task

HEADERS = ("task", "due until", "interval", "done")


def task_to_dict(task: Task) -> dict:
    return {
        "name": task.name,
        "due_date": format_date(task.due_date),
        "interval": task.interval_label,
        "checked": task.checked,
    }


def _row(task: Task) -> tuple[str, str, str, str]:
    return (task.name, format_date(task.due_date), task.interval_label, "x" if task.checked else "")


def format_task_list(tasks: list[Task], today: date | None = None, color: bool = True) -> str:
    """Format tasks as an aligned table.

    Unchecked tasks past their due date are highlighted red when color is on.
    """
    if not tasks:
        return "No tasks"

    today = today or date.today()
    rows = [_row(task) for task in tasks]
    widths = [max(len(HEADERS[i]), *(len(r[i]) for r in rows)) for i in range(len(HEADERS))]

    def line(cells) -> str:
        return " ".join(cell.ljust(w) for cell, w in zip(cells, widths, strict=True)).rstrip()

    lines = [line(HEADERS), "-" * (sum(widths) + len(widths) - 1)]
    for task, row in zip(tasks, rows, strict=True):
        text = line(row)
        if color and not task.checked and task.is_overdue(today):
            text = typer.style(text, fg=typer.colors.RED, bold=True)
        lines.append(text)
    return "\n".join(lines)
