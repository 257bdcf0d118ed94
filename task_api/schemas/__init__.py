from .task import (
    CreateTaskInput,
    DeleteTaskResult,
    FilterTasksInput,
    HealthStatus,
    TaskIdInput,
    TaskRead,
    UpdateTaskInput,
)

__all__ = [
    "CreateTaskInput",
    "DeleteTaskResult",
    "FilterTasksInput",
    "HealthStatus",
    "TaskIdInput",
    "TaskRead",
    "UpdateTaskInput",
]
