"""
Relevance engine: which tasks surface in a month, in the upcoming window, or on a day cell.
"""
from datetime import date, timedelta
from typing import Iterable, NamedTuple

from chacara.schemas.task import ExactDate, Task
from chacara.services.recurrence import matches_month, matches_occurrence

UPCOMING_WINDOW_DAYS = 7


class YearMonth(NamedTuple):
    year: int
    month: int  # 1–12

    @classmethod
    def of(cls, d: date) -> "YearMonth":
        return cls(d.year, d.month)


def is_relevant_for_month(task: Task, target: YearMonth) -> bool:
    """Month relevance ignores completion state; tasks without an anchor are never relevant."""
    return matches_month(task, target.month, target.year)


def is_upcoming(task: Task, today: date, window_days: int = UPCOMING_WINDOW_DAYS) -> bool:
    """
    Incomplete dated task whose literal date lies in [today, today + window_days].

    Recurrences are not expanded: a monthly task due again next week only
    counts if its own anchor date is in the window.
    """
    if task.is_completed or not isinstance(task.anchor, ExactDate):
        return False
    return today <= task.anchor.on <= today + timedelta(days=window_days)


def tasks_on_day(tasks: Iterable[Task], year: int, month: int, day: int) -> list[Task]:
    """Dated tasks with an occurrence on the given day. Seasonal tasks never land on a day."""
    return [t for t in tasks if matches_occurrence(t, day, month, year)]
