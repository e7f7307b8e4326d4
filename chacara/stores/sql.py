"""
Relational store on SQLAlchemy's async engine.

Production points DATABASE_URL at Postgres (asyncpg); the schema is managed by
Alembic. Any async dialect works, which is how the tests run it on SQLite.
"""
import logging
from datetime import date, datetime, timezone
from uuid import uuid4

from sqlalchemy import delete, select, text, update
from sqlalchemy.ext.asyncio import AsyncEngine

from chacara.db.base import Base
from chacara.db.session import make_engine, make_sessionmaker
from chacara.models.logs import DailyLogRow
from chacara.models.task import TaskRow
from chacara.schemas.log import DailyLogRead
from chacara.schemas.task import Task, TaskRead

logger = logging.getLogger(__name__)


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _row_to_task(row: TaskRow) -> Task:
    record = TaskRead.model_validate(row)
    return record.model_copy(update={"created_at": _aware(record.created_at)}).to_task()


def _row_to_log(row: DailyLogRow) -> DailyLogRead:
    record = DailyLogRead.model_validate(row)
    return record.model_copy(update={"created_at": _aware(record.created_at)})


class SqlStore:
    name = "remote"

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._sessions = make_sessionmaker(engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @classmethod
    def from_url(cls, url: str) -> "SqlStore":
        return cls(make_engine(url))

    async def ping(self) -> None:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_schema(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self._engine.dispose()

    # ── Tasks ─────────────────────────────────────────────────────────────────

    async def list_tasks(self) -> list[Task]:
        async with self._sessions() as db:
            result = await db.execute(select(TaskRow).order_by(TaskRow.created_at, TaskRow.id))
            rows = result.scalars().all()
        return [_row_to_task(r) for r in rows]

    async def insert_task(self, task: Task) -> Task:
        row = TaskRow(
            id=task.id or uuid4().hex,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            category=task.category.value,
            urgency=task.urgency.value,
            recurrence=task.recurrence,
            specific_date=task.specific_date,
            month_reference=task.month_reference,
            created_at=task.created_at or datetime.now(timezone.utc),
        )
        async with self._sessions() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        return _row_to_task(row)

    async def update_completion(self, task_id: str, is_completed: bool) -> None:
        async with self._sessions() as db:
            await db.execute(
                update(TaskRow).where(TaskRow.id == task_id).values(is_completed=is_completed)
            )
            await db.commit()

    async def delete_task(self, task_id: str) -> None:
        async with self._sessions() as db:
            await db.execute(delete(TaskRow).where(TaskRow.id == task_id))
            await db.commit()

    # ── Daily logs ────────────────────────────────────────────────────────────

    async def insert_log(self, content: str, log_date: date) -> DailyLogRead:
        row = DailyLogRow(
            id=uuid4().hex,
            log_date=log_date,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        async with self._sessions() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        return _row_to_log(row)

    async def list_recent_logs(self, limit: int) -> list[DailyLogRead]:
        async with self._sessions() as db:
            result = await db.execute(
                select(DailyLogRow)
                .order_by(DailyLogRow.log_date.desc(), DailyLogRow.created_at.desc())
                .limit(limit)
            )
            rows = result.scalars().all()
        return [_row_to_log(r) for r in rows]
