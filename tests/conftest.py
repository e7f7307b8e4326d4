from datetime import date, datetime, timezone
from typing import Optional, Union
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from chacara.core.deps import get_today
from chacara.main import app
from chacara.schemas.task import ExactDate, SeasonalMonth, Task, TaskCategory, Urgency
from chacara.services.advisor import Advisor
from chacara.services.board import TaskBoard
from chacara.services.logbook import LogBook
from chacara.stores import LocalStore

# Wednesday; June 2024 starts on a Saturday
TODAY = date(2024, 6, 12)


@pytest.fixture
def make_task():
    def _make(
        specific_date: Union[str, date, None] = None,
        recurrence: str = "none",
        *,
        month_reference: Optional[int] = None,
        title: str = "Tarefa",
        is_completed: bool = False,
        category: str = "general",
        urgency: str = "medium",
        created_at: Optional[datetime] = None,
        task_id: Optional[str] = None,
    ) -> Task:
        if isinstance(specific_date, str):
            specific_date = date.fromisoformat(specific_date)
        anchor = None
        if specific_date is not None:
            anchor = ExactDate(on=specific_date)
        elif month_reference is not None:
            anchor = SeasonalMonth(month=month_reference)
        return Task(
            id=task_id or uuid4().hex,
            title=title,
            is_completed=is_completed,
            category=TaskCategory(category),
            urgency=Urgency(urgency),
            recurrence=recurrence,
            anchor=anchor,
            created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def store(tmp_path) -> LocalStore:
    return LocalStore(tmp_path / "agenda.json")


@pytest_asyncio.fixture
async def board(store: LocalStore) -> TaskBoard:
    board = TaskBoard(store)
    await board.load()
    return board


@pytest_asyncio.fixture
async def client(store: LocalStore, board: TaskBoard):
    app.state.store = store
    app.state.board = board
    app.state.logbook = LogBook(store)
    app.state.advisor = Advisor(api_key="", model="gemini-test", base_url="http://gemini.test/v1beta")
    app.dependency_overrides[get_today] = lambda: TODAY

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    app.state.store = None
    app.state.board = None
    app.state.logbook = None
    app.state.advisor = None
