class TaskError(Exception):
    """Base class for errors raised by the task handlers."""


class TaskNotFoundError(TaskError):
    """No task row exists for the requested id."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class StoreError(TaskError):
    """The database failed while running a handler.

    The underlying SQLAlchemy error is kept as ``__cause__``.
    """
