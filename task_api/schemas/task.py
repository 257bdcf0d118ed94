from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Priority, as_utc

# Ids come from a 32-bit serial column.
MAX_TASK_ID = 2**31 - 1

TaskId = Annotated[int, Field(ge=1, le=MAX_TASK_ID)]


class CreateTaskInput(BaseModel):
    """Schema for creating new tasks.

    ``description`` has no default: it must be sent, either as a string or as
    an explicit null. Any ``is_completed`` sent by the client is ignored.
    """
    title: str = Field(min_length=1)
    description: Optional[str]
    due_date: datetime
    priority: Priority

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value):
        return as_utc(value)


class UpdateTaskInput(BaseModel):
    """Schema for updating existing tasks.

    Fields left out of the payload are not touched. Only ``description`` may
    be set to null; ``model_fields_set`` tells an omitted field apart from
    one sent as null.
    """
    id: TaskId
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[Priority] = None
    is_completed: Optional[bool] = None

    @field_validator("title", "due_date", "priority", "is_completed", mode="before")
    @classmethod
    def _reject_null(cls, value, info):
        # Validators don't run on defaults, so this only sees explicit values.
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value):
        return as_utc(value) if value is not None else value

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, without ``id``."""
        return self.model_dump(include=self.model_fields_set - {"id"})


class FilterTasksInput(BaseModel):
    """Schema for filtering tasks; each filter is optional."""
    is_completed: Optional[bool] = None
    priority: Optional[Priority] = None


class TaskIdInput(BaseModel):
    id: TaskId


class TaskRead(BaseModel):
    """Complete task schema with all fields."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str]
    due_date: datetime
    priority: Priority
    is_completed: bool
    created_at: datetime
    updated_at: datetime


class DeleteTaskResult(BaseModel):
    success: bool
    message: str


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
