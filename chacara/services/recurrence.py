"""
Recurrence matcher.

Decides whether a task has an occurrence on a given day, or in a given month.
Target months are 1–12 (datetime.date convention); SeasonalMonth.month is 0–11.

Two anchoring styles are matched independently:
  - ExactDate: a concrete event, repeating according to task.recurrence.
  - SeasonalMonth: "this work belongs to this month", every year. It matches
    months, never individual days.

Rules are looked up by recurrence kind. Kinds with no registered rule
(daily, weekly, quarterly, semiannual, or anything a store hands back)
match their literal anchor only, like "none".
"""
from datetime import date
from typing import Callable

from chacara.schemas.task import ExactDate, SeasonalMonth, Task

DayRule = Callable[[date, int, int, int], bool]    # (anchor, day, month, year)
MonthRule = Callable[[date, int, int], bool]       # (anchor, month, year)


# ── Day granularity ───────────────────────────────────────────────────────────


def _once_on_day(anchor: date, day: int, month: int, year: int) -> bool:
    return (year, month, day) == (anchor.year, anchor.month, anchor.day)


def _monthly_on_day(anchor: date, day: int, month: int, year: int) -> bool:
    # Never before the first occurrence
    if day != anchor.day:
        return False
    return (year, month, day) >= (anchor.year, anchor.month, anchor.day)


def _yearly_on_day(anchor: date, day: int, month: int, year: int) -> bool:
    return day == anchor.day and month == anchor.month


# ── Month granularity ─────────────────────────────────────────────────────────


def _once_in_month(anchor: date, month: int, year: int) -> bool:
    return (year, month) == (anchor.year, anchor.month)


def _monthly_in_month(anchor: date, month: int, year: int) -> bool:
    return (year, month) >= (anchor.year, anchor.month)


def _yearly_in_month(anchor: date, month: int, year: int) -> bool:
    return month == anchor.month


# ── Rule table ────────────────────────────────────────────────────────────────

_DAY_RULES: dict[str, DayRule] = {
    "none": _once_on_day,
    "monthly": _monthly_on_day,
    "yearly": _yearly_on_day,
}

_MONTH_RULES: dict[str, MonthRule] = {
    "none": _once_in_month,
    "monthly": _monthly_in_month,
    "yearly": _yearly_in_month,
}


def register_rule(kind: str, day_rule: DayRule, month_rule: MonthRule) -> None:
    """Install matching rules for a recurrence kind, replacing any existing ones."""
    _DAY_RULES[kind] = day_rule
    _MONTH_RULES[kind] = month_rule


def unregister_rule(kind: str) -> None:
    if kind == "none":
        raise ValueError("the 'none' rule is the fallback and cannot be removed")
    _DAY_RULES.pop(kind, None)
    _MONTH_RULES.pop(kind, None)


# ── Public API ────────────────────────────────────────────────────────────────


def matches_occurrence(task: Task, day: int, month: int, year: int) -> bool:
    """
    True if the task has an occurrence on (day, month, year).

    Only dated tasks can match a day; seasonal tasks and tasks without an
    anchor never do.
    """
    if not isinstance(task.anchor, ExactDate):
        return False
    rule = _DAY_RULES.get(task.recurrence, _once_on_day)
    return rule(task.anchor.on, day, month, year)


def matches_month(task: Task, month: int, year: int) -> bool:
    """
    True if the task has an occurrence somewhere in (month, year).

    Seasonal tasks match their reference month in every year.
    """
    anchor = task.anchor
    if isinstance(anchor, SeasonalMonth):
        return anchor.month == month - 1
    if isinstance(anchor, ExactDate):
        rule = _MONTH_RULES.get(task.recurrence, _once_in_month)
        return rule(anchor.on, month, year)
    return False
