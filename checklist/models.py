from dataclasses import dataclass
from datetime import date

ONCE = None


@dataclass
class Task:
    name: str
    due_date: date
    interval: int | None = ONCE
    checked: bool = False

    @property
    def is_recurring(self) -> bool:
        return self.interval is not ONCE

    @property
    def interval_label(self) -> str:
        return "once" if self.interval is ONCE else str(self.interval)

    def is_overdue(self, today: date) -> bool:
        return self.due_date < today
