from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from .. import handlers
from ..database import get_db
from ..errors import TaskNotFoundError
from ..models import Priority, utc_now
from ..schemas.task import (
    MAX_TASK_ID,
    CreateTaskInput,
    DeleteTaskResult,
    FilterTasksInput,
    HealthStatus,
    TaskIdInput,
    TaskRead,
    UpdateTaskInput,
)

router = APIRouter()


def _not_found(exc: TaskNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/healthcheck", response_model=HealthStatus)
def healthcheck():
    return HealthStatus(status="ok", timestamp=utc_now())


@router.post("/createTask", response_model=TaskRead)
def create_task(task: CreateTaskInput, db: Session = Depends(get_db)):
    return handlers.create_task(db, task)


@router.get("/getTasks", response_model=List[TaskRead])
def get_tasks(
    is_completed: Optional[bool] = None,
    priority: Optional[Priority] = None,
    db: Session = Depends(get_db),
):
    """Tasks matching all of the given filters."""
    filters = FilterTasksInput(is_completed=is_completed, priority=priority)
    return handlers.get_tasks(db, filters)


@router.get("/getAllTasks", response_model=List[TaskRead])
def get_all_tasks(db: Session = Depends(get_db)):
    return handlers.get_all_tasks(db)


@router.get("/getTaskById", response_model=Optional[TaskRead])
def get_task_by_id(id: int = Query(ge=1, le=MAX_TASK_ID), db: Session = Depends(get_db)):
    """The task, or ``null`` when no task has this id."""
    return handlers.get_task_by_id(db, TaskIdInput(id=id))


@router.post("/updateTask", response_model=TaskRead)
def update_task(task_update: UpdateTaskInput, db: Session = Depends(get_db)):
    try:
        return handlers.update_task(db, task_update)
    except TaskNotFoundError as exc:
        raise _not_found(exc)


@router.post("/deleteTask", response_model=DeleteTaskResult)
def delete_task(task: TaskIdInput, db: Session = Depends(get_db)):
    return handlers.delete_task(db, task)


@router.post("/toggleTaskCompletion", response_model=TaskRead)
def toggle_task_completion(task: TaskIdInput, db: Session = Depends(get_db)):
    try:
        return handlers.toggle_task_completion(db, task)
    except TaskNotFoundError as exc:
        raise _not_found(exc)
