"""Task routes."""

from fastapi import APIRouter, HTTPException, status

from empower.api.deps import RoadmapSessionDep
from empower.schemas import Task, TaskCreate
from empower.services import task_service

router = APIRouter(prefix="/sessions/{session_id}/tasks", tags=["tasks"])


@router.get("", response_model=list[Task])
async def list_tasks(session: RoadmapSessionDep) -> list[Task]:
    return session.tasks


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def add_task(data: TaskCreate, session: RoadmapSessionDep) -> Task:
    """Add a task, dated today unless a date is given."""
    if data.date is not None:
        task = task_service.add_date_task(session, data.date, data.text)
    else:
        task = task_service.add_task(session, data.text)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Task text must not be blank",
        )
    return task


@router.post("/{task_id}/toggle", response_model=Task)
async def toggle_task(task_id: str, session: RoadmapSessionDep) -> Task:
    task = task_service.toggle_task(session, task_id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task
