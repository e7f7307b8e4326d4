from datetime import date, datetime, timezone

import pytest_asyncio
from sqlalchemy.pool import StaticPool

from chacara.db.session import make_engine
from chacara.services import projections
from chacara.services.board import TaskBoard
from chacara.services.relevance import YearMonth
from chacara.stores import LocalStore, SqlStore

TODAY = date(2024, 6, 12)


@pytest_asyncio.fixture
async def remote():
    engine = make_engine("sqlite+aiosqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    store = SqlStore(engine)
    await store.create_schema()
    yield store
    await store.close()


async def test_views_agree_across_stores(tmp_path, remote: SqlStore, make_task):
    tasks = [
        make_task(
            f"2024-06-{10 + i:02d}", title=f"t{i}", task_id=f"t{i}",
            created_at=datetime(2024, 1, i, tzinfo=timezone.utc),
        )
        for i in range(1, 7)
    ]
    local = LocalStore(tmp_path / "agenda.json")
    for task in tasks:
        await local.insert_task(task)
        await remote.insert_task(task)

    boards = {}
    for store in (local, remote):
        boards[store.name] = TaskBoard(store)
        await boards[store.name].load()

    views = {
        name: (
            projections.dashboard(board.snapshot(), TODAY),
            projections.calendar_month(board.snapshot(), YearMonth(2024, 6)),
        )
        for name, board in boards.items()
    }
    (local_dash, local_cal), (remote_dash, remote_cal) = views["local"], views["remote"]

    assert [t.id for t in local_dash.preview] == ["t1", "t2", "t3", "t4"]
    assert [t.id for t in remote_dash.preview] == ["t1", "t2", "t3", "t4"]
    assert [t.id for t in local_cal.pending_dated] == [t.id for t in remote_cal.pending_dated]
    assert local_dash.upcoming == remote_dash.upcoming
