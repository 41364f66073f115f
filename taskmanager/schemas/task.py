"""Task API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskmanager.domain.enums import TaskPriority, TaskStatus
from taskmanager.shared.utils.datetime import ensure_utc


class TaskCreateRequest(BaseModel):
    """Request body for creating a task. Naive due dates are taken as UTC."""

    title: str = Field(..., min_length=3, max_length=120)
    description: str | None = Field(default=None, max_length=2000)
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class TaskUpdateRequest(TaskCreateRequest):
    """Request body for PUT: full replace of the mutable fields.

    status and priority are required here; omitted description/due_date clear them.
    """

    status: TaskStatus
    priority: TaskPriority


class TaskResponse(BaseModel):
    """Task as returned by the API (timestamps in UTC)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_user_id: str
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime


class TaskListResponse(BaseModel):
    """One page of tasks plus the total over the filtered set."""

    items: list[TaskResponse]
    total_count: int
    page_number: int
    page_size: int


class BulkMarkDoneRequest(BaseModel):
    """Request body for POST /tasks/bulk-mark-done."""

    task_ids: list[str] = Field(..., description="Ids to mark Done; all must exist or none change")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
