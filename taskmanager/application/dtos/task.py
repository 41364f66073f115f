"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from taskmanager.domain.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Task read-model returned by the task repository and service."""

    id: str
    owner_user_id: str
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskListQuery:
    """Filters, sort, and page for listing the caller's tasks.

    Every filter is optional and AND-combined. sort_by outside the sortable
    fields (or None) means created_at descending. page_number is 1-indexed.
    """

    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date_from: datetime | None = None
    due_date_to: datetime | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_direction: str | None = "asc"
    page_number: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult:
    """One page of tasks plus the filtered total (computed before paging)."""

    items: list[TaskResult] = field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = 10
