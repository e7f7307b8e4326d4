"""
Task board: the one owner of the in-memory task collection.

The collection is loaded once from the active store. Commands update memory
first and then mirror the change to the store. A failed mirror is logged and
not rolled back, so memory and store may diverge until the next load.

Mirror writes are serialized by a lock, so the store sees mutations in the
order they were applied in memory and the last write wins.
"""
import asyncio
import logging
from typing import Optional

from chacara.schemas.task import Task, TaskCreate
from chacara.stores.base import TaskStore

logger = logging.getLogger(__name__)


class TaskNotFound(LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


class TaskBoard:
    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._tasks: dict[str, Task] = {}
        self._mirror_lock = asyncio.Lock()
        self._loaded = False

    @property
    def store_name(self) -> str:
        return self._store.name

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        """Replace the in-memory collection with the store's contents."""
        # Oldest first whatever the backend returns; new tasks are appended after
        tasks = sorted(await self._store.list_tasks(), key=lambda t: t.created_at)
        self._tasks = {t.id: t for t in tasks}
        self._loaded = True
        logger.info("board loaded %d tasks from %s store", len(self._tasks), self._store.name)

    def snapshot(self) -> tuple[Task, ...]:
        """Immutable view of the collection, oldest first."""
        return tuple(self._tasks.values())

    def get(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    # ── Commands ──────────────────────────────────────────────────────────────

    async def add_task(self, data: TaskCreate) -> Task:
        task = data.build()
        self._tasks[task.id] = task
        await self._mirror("insert", task.id, self._store.insert_task(task))
        return task

    async def toggle_task(self, task_id: str) -> Task:
        return await self.set_completion(task_id, not self.get(task_id).is_completed)

    async def set_completion(self, task_id: str, is_completed: bool) -> Task:
        task = self.get(task_id).with_completion(is_completed)
        self._tasks[task_id] = task
        await self._mirror("update", task_id, self._store.update_completion(task_id, is_completed))
        return task

    async def delete_task(self, task_id: str) -> None:
        self.get(task_id)
        del self._tasks[task_id]
        await self._mirror("delete", task_id, self._store.delete_task(task_id))

    async def _mirror(self, action: str, task_id: str, call) -> Optional[object]:
        async with self._mirror_lock:
            try:
                return await call
            except Exception as exc:
                logger.warning(
                    "mirror %s of task %s to %s store failed: %s",
                    action, task_id, self._store.name, exc,
                )
                return None
