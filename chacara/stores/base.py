from datetime import date
from typing import Protocol

from chacara.schemas.log import DailyLogRead
from chacara.schemas.task import Task


class TaskStore(Protocol):
    """Durable copy of the task collection. Must round-trip every task field."""

    name: str

    async def list_tasks(self) -> list[Task]: ...

    async def insert_task(self, task: Task) -> Task: ...

    async def update_completion(self, task_id: str, is_completed: bool) -> None: ...

    async def delete_task(self, task_id: str) -> None: ...


class LogStore(Protocol):
    """Append-only daily observation log."""

    async def insert_log(self, content: str, log_date: date) -> DailyLogRead: ...

    async def list_recent_logs(self, limit: int) -> list[DailyLogRead]: ...


class Store(TaskStore, LogStore, Protocol):
    async def close(self) -> None: ...
