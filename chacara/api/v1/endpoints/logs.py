from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from chacara.core.deps import Logs, Today
from chacara.schemas.log import DailyLogCreate, DailyLogRead
from chacara.services.logbook import LogBookUnavailable

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("", response_model=list[DailyLogRead])
async def list_recent_logs(logbook: Logs, limit: Optional[int] = Query(None, ge=1, le=200)):
    return await logbook.recent(limit)


@router.post("", response_model=DailyLogRead, status_code=status.HTTP_201_CREATED)
async def create_log(data: DailyLogCreate, logbook: Logs, today: Today):
    try:
        return await logbook.add(data, today)
    except LogBookUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
