from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from chacara.core.deps import Board
from chacara.schemas.task import CompletionUpdate, TaskCategory, TaskCreate, TaskRead, Urgency
from chacara.services.board import TaskBoard, TaskNotFound
from chacara.services.projections import filter_tasks

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _get_task(board: TaskBoard, task_id: str):
    try:
        return board.get(task_id)
    except TaskNotFound:
        raise HTTPException(status_code=404, detail="Task not found")


@router.get("", response_model=list[TaskRead])
async def list_tasks(
    board: Board,
    urgency: Optional[Urgency] = Query(None),
    category: Optional[TaskCategory] = Query(None),
):
    tasks = filter_tasks(board.snapshot(), urgency=urgency, category=category)
    return [TaskRead.from_task(t) for t in tasks]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskCreate, board: Board):
    task = await board.add_task(data)
    return TaskRead.from_task(task)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: str, board: Board):
    return TaskRead.from_task(_get_task(board, task_id))


@router.post("/{task_id}/toggle", response_model=TaskRead)
async def toggle_task(task_id: str, board: Board):
    _get_task(board, task_id)
    task = await board.toggle_task(task_id)
    return TaskRead.from_task(task)


@router.patch("/{task_id}", response_model=TaskRead)
async def update_task_completion(task_id: str, data: CompletionUpdate, board: Board):
    _get_task(board, task_id)
    task = await board.set_completion(task_id, data.is_completed)
    return TaskRead.from_task(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, board: Board) -> None:
    _get_task(board, task_id)
    await board.delete_task(task_id)
