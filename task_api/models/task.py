from datetime import datetime, timedelta, timezone
from typing import Optional
import enum

from sqlalchemy import Column, DateTime, Enum as SAEnum
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Aware UTC copy of ``value``; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """``DateTime(timezone=True)`` that always hands back aware UTC values.

    SQLite keeps no offset, so rows read from it come back naive.
    """
    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        return as_utc(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return as_utc(value)


def _timestamp_column() -> Column:
    return Column(UTCDateTime(timezone=True), nullable=False)


class Task(SQLModel, table=True):
    """Task model for todo items."""
    __tablename__ = "tasks"
    # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is set.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(sa_column_kwargs={"nullable": False})
    description: Optional[str] = None
    due_date: datetime = Field(sa_column=_timestamp_column())
    priority: Priority = Field(
        sa_column=Column(
            SAEnum(
                Priority,
                name="priority",
                values_callable=lambda members: [member.value for member in members],
                create_constraint=True,
            ),
            nullable=False,
        )
    )
    is_completed: bool = Field(default=False, sa_column_kwargs={"nullable": False})
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())

    def touch(self) -> None:
        """Advance ``updated_at``; never leaves it at or before its old value."""
        now = utc_now()
        if self.updated_at is not None:
            previous = as_utc(self.updated_at)
            if now <= previous:
                now = previous + timedelta(microseconds=1)
        self.updated_at = now
