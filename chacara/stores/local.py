"""
Local fallback store: the whole collection lives in one JSON blob on disk.

Used when no remote database is configured or reachable. Every write rewrites
the blob through a temp file and an atomic rename. File I/O runs in a worker
thread; read-modify-write cycles hold a lock so task and log writes never
overwrite each other.
"""
import asyncio
import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Callable
from uuid import uuid4

from pydantic import ValidationError

from chacara.schemas.log import DailyLogRead
from chacara.schemas.task import Task, TaskRead

logger = logging.getLogger(__name__)

Blob = dict[str, list[Any]]


def _empty() -> Blob:
    return {"tasks": [], "logs": []}


def _record_id(raw: Any) -> Any:
    return raw.get("id") if isinstance(raw, dict) else raw


class LocalStore:
    name = "local"

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def close(self) -> None:
        return None

    # ── Blob I/O ──────────────────────────────────────────────────────────────

    def _read(self) -> Blob:
        if not self._path.exists():
            return _empty()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            aside = self._path.with_suffix(self._path.suffix + ".corrupt")
            logger.warning("local store %s is not valid JSON (%s); moved to %s", self._path, exc, aside)
            self._path.replace(aside)
            return _empty()
        if not isinstance(data, dict):
            logger.warning("local store %s has unexpected shape; ignoring it", self._path)
            return _empty()
        for key in ("tasks", "logs"):
            value = data.get(key)
            if value is None:
                data[key] = []
            elif not isinstance(value, list):
                logger.warning("local store %s: %r is not a list; ignoring it", self._path, key)
                data[key] = []
        return data

    def _write(self, data: Blob) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)

    async def _load(self) -> Blob:
        async with self._lock:
            return await asyncio.to_thread(self._read)

    async def _modify(self, change: Callable[[Blob], None]) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            change(data)
            await asyncio.to_thread(self._write, data)

    # ── Tasks ─────────────────────────────────────────────────────────────────

    async def list_tasks(self) -> list[Task]:
        tasks: list[Task] = []
        for raw in (await self._load())["tasks"]:
            try:
                tasks.append(TaskRead.model_validate(raw).to_task())
            except ValidationError as exc:
                logger.warning("local store: skipping unreadable task %r: %s", _record_id(raw), exc)
        return tasks

    async def insert_task(self, task: Task) -> Task:
        if not task.id:
            task = task.model_copy(update={"id": uuid4().hex})
        record = TaskRead.from_task(task).model_dump(mode="json")
        await self._modify(lambda data: data["tasks"].append(record))
        return task

    async def update_completion(self, task_id: str, is_completed: bool) -> None:
        def change(data: Blob) -> None:
            for raw in data["tasks"]:
                if _record_id(raw) == task_id:
                    raw["is_completed"] = is_completed

        await self._modify(change)

    async def delete_task(self, task_id: str) -> None:
        def change(data: Blob) -> None:
            data["tasks"] = [raw for raw in data["tasks"] if _record_id(raw) != task_id]

        await self._modify(change)

    # ── Daily logs ────────────────────────────────────────────────────────────

    async def insert_log(self, content: str, log_date: date) -> DailyLogRead:
        entry = DailyLogRead(
            id=uuid4().hex,
            log_date=log_date,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        record = entry.model_dump(mode="json")
        await self._modify(lambda data: data["logs"].append(record))
        return entry

    async def list_recent_logs(self, limit: int) -> list[DailyLogRead]:
        logs: list[DailyLogRead] = []
        for raw in (await self._load())["logs"]:
            try:
                logs.append(DailyLogRead.model_validate(raw))
            except ValidationError as exc:
                logger.warning("local store: skipping unreadable log %r: %s", _record_id(raw), exc)
        logs.sort(key=lambda e: (e.log_date, e.created_at), reverse=True)
        return logs[:limit]
