from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from chacara.core.config import settings
from chacara.core.deps import Board, Today
from chacara.schemas.task import TaskRead
from chacara.schemas.views import CalendarRead, DashboardRead, MonthTasksRead
from chacara.services import projections
from chacara.services.relevance import YearMonth

router = APIRouter(prefix="/views", tags=["views"])


def _target(today: date, year: Optional[int], month: Optional[int]) -> YearMonth:
    return YearMonth(year if year is not None else today.year, month if month is not None else today.month)


@router.get("/dashboard", response_model=DashboardRead)
async def get_dashboard(
    board: Board,
    today: Today,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    view = projections.dashboard(
        board.snapshot(), today, _target(today, year, month), settings.UPCOMING_WINDOW_DAYS
    )
    return DashboardRead.build(view)


@router.get("/upcoming", response_model=list[TaskRead])
async def get_upcoming(board: Board, today: Today):
    tasks = projections.upcoming_tasks(board.snapshot(), today, settings.UPCOMING_WINDOW_DAYS)
    return [TaskRead.from_task(t) for t in tasks]


@router.get("/month", response_model=MonthTasksRead)
async def get_month(
    board: Board,
    today: Today,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    return MonthTasksRead.build(projections.month_tasks(board.snapshot(), _target(today, year, month)))


@router.get("/calendar", response_model=CalendarRead)
async def get_calendar(
    board: Board,
    today: Today,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    return CalendarRead.build(projections.calendar_month(board.snapshot(), _target(today, year, month)))
