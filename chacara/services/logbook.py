import logging
from datetime import date
from typing import Optional

from chacara.schemas.log import DailyLogCreate, DailyLogRead
from chacara.stores.base import LogStore

logger = logging.getLogger(__name__)


class LogBookUnavailable(RuntimeError):
    pass


class LogBook:
    """Append-only daily observations. Entries are never edited or deleted."""

    def __init__(self, store: LogStore, default_limit: int = 30) -> None:
        self._store = store
        self._default_limit = default_limit

    async def add(self, data: DailyLogCreate, today: date) -> DailyLogRead:
        log_date = data.log_date or today
        try:
            return await self._store.insert_log(data.content, log_date)
        except Exception as exc:
            logger.warning("saving daily log for %s failed: %s", log_date.isoformat(), exc)
            raise LogBookUnavailable("could not save the daily log") from exc

    async def recent(self, limit: Optional[int] = None) -> list[DailyLogRead]:
        """Newest first. A store failure yields an empty list."""
        try:
            return await self._store.list_recent_logs(limit or self._default_limit)
        except Exception as exc:
            logger.warning("loading recent daily logs failed: %s", exc)
            return []
