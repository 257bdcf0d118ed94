from .tasks import (
    create_task,
    delete_task,
    get_all_tasks,
    get_task_by_id,
    get_tasks,
    toggle_task_completion,
    update_task,
)

__all__ = [
    "create_task",
    "delete_task",
    "get_all_tasks",
    "get_task_by_id",
    "get_tasks",
    "toggle_task_completion",
    "update_task",
]
