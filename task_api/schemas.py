from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Any, Optional

from task_api.models import TaskStatus

# Stand-in for "no date provided"
EMPTY_DATE = datetime.min


def is_empty_date(value: datetime) -> bool:
    return value == EMPTY_DATE


def parse_task_date(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime into a naive datetime.

    A bare calendar date means midnight. Any UTC offset is dropped and the
    wall-clock value kept. Raises ValueError for anything unparsable.
    """
    return datetime.fromisoformat(value).replace(tzinfo=None)


class TaskBase(BaseModel):
    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    date: datetime = Field(EMPTY_DATE, description="When the task is due; required")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Task status")

    @field_validator('date', mode='before')
    @classmethod
    def date_from_iso_string(cls, v: Any) -> Any:
        """Accept bare calendar dates as well as full timestamps"""
        if isinstance(v, str):
            try:
                return parse_task_date(v)
            except ValueError:
                # Let pydantic report its own error
                return v
        return v

    @field_validator('date')
    @classmethod
    def date_drop_timezone(cls, v: datetime) -> datetime:
        return v.replace(tzinfo=None)


class TaskCreate(TaskBase):
    """Schema for creating a task; a client-supplied id is ignored"""
    pass


class TaskUpdate(TaskBase):
    """Schema for updating a task.

    Empty title/description keep the stored values; date and status are
    always overwritten.
    """
    pass


class Task(TaskBase):
    """Schema for returning a task"""
    id: int

    model_config = ConfigDict(from_attributes=True)
