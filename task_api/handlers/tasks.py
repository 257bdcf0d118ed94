"""Task operations.

Every function takes the session it should work on as its first argument and
commits its own unit of work before returning.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..errors import StoreError, TaskNotFoundError
from ..models import Task
from ..schemas.task import (
    CreateTaskInput,
    DeleteTaskResult,
    FilterTasksInput,
    TaskIdInput,
    UpdateTaskInput,
)

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(session: Session, action: str):
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("%s failed", action)
        raise StoreError(f"{action} failed: {exc}") from exc


def create_task(session: Session, task_input: CreateTaskInput) -> Task:
    """Insert a new task. New tasks always start out not completed."""
    with _store_errors(session, "Task creation"):
        task = Task(
            title=task_input.title,
            description=task_input.description,
            due_date=task_input.due_date,
            priority=task_input.priority,
            is_completed=False,
        )
        session.add(task)
        session.commit()
        session.refresh(task)

    logger.info("Created task %s", task.id)
    return task


def get_tasks(session: Session, filters: Optional[FilterTasksInput] = None) -> List[Task]:
    """Tasks matching every filter given; all tasks when there are none."""
    query = select(Task)
    if filters is not None:
        if filters.is_completed is not None:
            query = query.where(Task.is_completed == filters.is_completed)
        if filters.priority is not None:
            query = query.where(Task.priority == filters.priority)

    with _store_errors(session, "Task listing"):
        tasks = list(session.exec(query).all())

    logger.debug("Listed %d tasks (filters=%s)", len(tasks), filters)
    return tasks


def get_all_tasks(session: Session) -> List[Task]:
    return get_tasks(session)


def get_task_by_id(session: Session, task_input: TaskIdInput) -> Optional[Task]:
    """The task with this id, or None if there is none."""
    with _store_errors(session, "Task retrieval"):
        task = session.get(Task, task_input.id)

    if task is None:
        logger.debug("Task %s not found", task_input.id)
    return task


def update_task(session: Session, task_input: UpdateTaskInput) -> Task:
    """Apply the fields present in ``task_input`` to an existing task.

    ``updated_at`` moves forward even when nothing else changes.

    Raises:
        TaskNotFoundError: no task has ``task_input.id``.
    """
    with _store_errors(session, "Task update"):
        task = session.get(Task, task_input.id)
        if task is None:
            raise TaskNotFoundError(task_input.id)

        changes = task_input.changes()
        for field, value in changes.items():
            setattr(task, field, value)
        task.touch()

        session.add(task)
        session.commit()
        session.refresh(task)

    logger.info("Updated task %s (fields=%s)", task.id, sorted(changes))
    return task


def delete_task(session: Session, task_input: TaskIdInput) -> DeleteTaskResult:
    """Remove a task for good.

    A missing id is reported in the result rather than raised.
    """
    with _store_errors(session, "Task deletion"):
        task = session.get(Task, task_input.id)
        if task is None:
            logger.info("Delete skipped, task %s not found", task_input.id)
            return DeleteTaskResult(
                success=False,
                message=f"Task with ID {task_input.id} not found",
            )

        session.delete(task)
        session.commit()

    logger.info("Deleted task %s", task_input.id)
    return DeleteTaskResult(
        success=True,
        message=f"Task with ID {task_input.id} deleted successfully",
    )


def toggle_task_completion(session: Session, task_input: TaskIdInput) -> Task:
    """Flip ``is_completed`` on an existing task.

    Raises:
        TaskNotFoundError: no task has ``task_input.id``.
    """
    with _store_errors(session, "Task completion toggle"):
        task = session.get(Task, task_input.id)
        if task is None:
            raise TaskNotFoundError(task_input.id)

        task.is_completed = not task.is_completed
        task.touch()

        session.add(task)
        session.commit()
        session.refresh(task)

    logger.info("Toggled task %s to is_completed=%s", task.id, task.is_completed)
    return task
