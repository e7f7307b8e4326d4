from datetime import date

from pydantic import BaseModel

from chacara.core.labels import MONTH_NAMES
from chacara.schemas.task import TaskRead
from chacara.services.projections import CalendarMonth, Dashboard, DayCell, MonthTasks


def _reads(tasks) -> list[TaskRead]:
    return [TaskRead.from_task(t) for t in tasks]


class MonthTasksRead(BaseModel):
    year: int
    month: int
    month_name: str
    tasks: list[TaskRead]
    seasonal: list[TaskRead]
    dated: list[TaskRead]

    @classmethod
    def build(cls, view: MonthTasks) -> "MonthTasksRead":
        return cls(
            year=view.target.year,
            month=view.target.month,
            month_name=MONTH_NAMES[view.target.month - 1],
            tasks=_reads(view.tasks),
            seasonal=_reads(view.seasonal),
            dated=_reads(view.dated),
        )


class DayCellRead(BaseModel):
    day: int
    has_pending: bool
    all_completed: bool
    tasks: list[TaskRead]

    @classmethod
    def build(cls, cell: DayCell) -> "DayCellRead":
        return cls(
            day=cell.day,
            has_pending=cell.has_pending,
            all_completed=cell.all_completed,
            tasks=_reads(cell.tasks),
        )


class CalendarRead(BaseModel):
    year: int
    month: int
    month_name: str
    leading_blanks: int
    days: list[DayCellRead]
    seasonal: list[TaskRead]
    pending_dated: list[TaskRead]

    @classmethod
    def build(cls, view: CalendarMonth) -> "CalendarRead":
        return cls(
            year=view.target.year,
            month=view.target.month,
            month_name=MONTH_NAMES[view.target.month - 1],
            leading_blanks=view.leading_blanks,
            days=[DayCellRead.build(c) for c in view.days],
            seasonal=_reads(view.seasonal),
            pending_dated=_reads(view.pending_dated),
        )


class DashboardRead(BaseModel):
    today: date
    upcoming: list[TaskRead]
    month: MonthTasksRead
    preview: list[TaskRead]

    @classmethod
    def build(cls, view: Dashboard) -> "DashboardRead":
        return cls(
            today=view.today,
            upcoming=_reads(view.upcoming),
            month=MonthTasksRead.build(view.month),
            preview=_reads(view.preview),
        )
