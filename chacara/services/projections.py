"""
View projections over a task snapshot.

Everything here is a pure function of (tasks, dates). Nothing is cached; callers
recompute whenever the collection or the viewed month changes.
"""
import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from chacara.schemas.task import Task, TaskCategory, Urgency
from chacara.services.relevance import (
    UPCOMING_WINDOW_DAYS,
    YearMonth,
    is_relevant_for_month,
    is_upcoming,
    tasks_on_day,
)

DASHBOARD_PREVIEW_SIZE = 4
CALENDAR_PENDING_SIZE = 5


@dataclass(frozen=True)
class MonthTasks:
    target: YearMonth
    tasks: list[Task]        # every relevant task, collection order
    seasonal: list[Task]
    dated: list[Task]


@dataclass(frozen=True)
class DayCell:
    day: int
    tasks: list[Task] = field(default_factory=list)

    @property
    def has_pending(self) -> bool:
        return any(not t.is_completed for t in self.tasks)

    @property
    def all_completed(self) -> bool:
        return bool(self.tasks) and all(t.is_completed for t in self.tasks)


@dataclass(frozen=True)
class CalendarMonth:
    target: YearMonth
    leading_blanks: int      # weekday of day 1, Sunday = 0
    days: list[DayCell]
    seasonal: list[Task]
    pending_dated: list[Task]


@dataclass(frozen=True)
class Dashboard:
    today: date
    upcoming: list[Task]
    month: MonthTasks
    preview: list[Task]


def upcoming_tasks(
    tasks: Iterable[Task], today: date, window_days: int = UPCOMING_WINDOW_DAYS
) -> list[Task]:
    """Incomplete dated tasks due within the window, earliest first."""
    found = [t for t in tasks if is_upcoming(t, today, window_days)]
    return sorted(found, key=lambda t: t.specific_date)


def month_tasks(tasks: Iterable[Task], target: YearMonth) -> MonthTasks:
    relevant = [t for t in tasks if is_relevant_for_month(t, target)]
    return MonthTasks(
        target=target,
        tasks=relevant,
        seasonal=[t for t in relevant if t.is_seasonal],
        dated=[t for t in relevant if t.is_dated],
    )


def filter_tasks(
    tasks: Iterable[Task],
    urgency: Optional[Urgency] = None,
    category: Optional[TaskCategory] = None,
) -> list[Task]:
    """Whole collection narrowed by optional filters; pending first, then by creation time."""
    selected = [
        t for t in tasks
        if (urgency is None or t.urgency == urgency)
        and (category is None or t.category == category)
    ]
    return sorted(selected, key=lambda t: (t.is_completed, t.created_at))


def day_cell(tasks: Iterable[Task], target: YearMonth, day: int) -> DayCell:
    return DayCell(day=day, tasks=tasks_on_day(tasks, target.year, target.month, day))


def calendar_month(tasks: Sequence[Task], target: YearMonth) -> CalendarMonth:
    relevant = month_tasks(tasks, target)
    first_weekday, days_in_month = calendar.monthrange(target.year, target.month)
    return CalendarMonth(
        target=target,
        # calendar uses Monday = 0
        leading_blanks=(first_weekday + 1) % 7,
        days=[day_cell(relevant.dated, target, d) for d in range(1, days_in_month + 1)],
        seasonal=relevant.seasonal,
        pending_dated=[t for t in relevant.dated if not t.is_completed][:CALENDAR_PENDING_SIZE],
    )


def dashboard(
    tasks: Sequence[Task],
    today: date,
    target: Optional[YearMonth] = None,
    window_days: int = UPCOMING_WINDOW_DAYS,
) -> Dashboard:
    month = month_tasks(tasks, target or YearMonth.of(today))
    return Dashboard(
        today=today,
        upcoming=upcoming_tasks(tasks, today, window_days),
        month=month,
        preview=month.tasks[:DASHBOARD_PREVIEW_SIZE],
    )
