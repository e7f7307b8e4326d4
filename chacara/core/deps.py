from datetime import date
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from chacara.core.config import settings
from chacara.services.advisor import Advisor
from chacara.services.board import TaskBoard
from chacara.services.logbook import LogBook


def get_board(request: Request) -> TaskBoard:
    board = getattr(request.app.state, "board", None)
    if board is None or not board.loaded:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Task store not ready")
    return board


def get_logbook(request: Request) -> LogBook:
    logbook = getattr(request.app.state, "logbook", None)
    if logbook is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Log store not ready")
    return logbook


def get_advisor(request: Request) -> Advisor:
    advisor = getattr(request.app.state, "advisor", None)
    if advisor is None:
        advisor = request.app.state.advisor = Advisor.from_settings(settings)
    return advisor


def get_today() -> date:
    return date.today()


Board = Annotated[TaskBoard, Depends(get_board)]
Logs = Annotated[LogBook, Depends(get_logbook)]
AdvisorDep = Annotated[Advisor, Depends(get_advisor)]
Today = Annotated[date, Depends(get_today)]
