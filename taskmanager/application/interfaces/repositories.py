"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Every task method is scoped to owner_user_id and never sees soft-deleted rows.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from taskmanager.domain.enums import TaskPriority, TaskStatus

if TYPE_CHECKING:
    from taskmanager.application.dtos.task import PagedResult, TaskListQuery, TaskResult
    from taskmanager.application.dtos.user import UserCredentials, UserResult


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def email_exists(self, email: str) -> bool:
        """Return True if a user with this (normalized) email exists."""

    async def get_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Return id, email and password hash for login, or None."""

    async def create_user(
        self,
        email: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
    ) -> UserResult:
        """Create user; raise DuplicateEmailException on unique violation."""


class ITaskRepository(Protocol):
    """Protocol for task repository (DIP)."""

    async def create_task(
        self,
        owner_user_id: str,
        title: str,
        *,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
        priority: TaskPriority = TaskPriority.MEDIUM,
        due_date: datetime | None = None,
    ) -> TaskResult:
        """Create a task owned by owner_user_id."""

    async def get_by_id_and_owner(
        self, task_id: str, owner_user_id: str
    ) -> TaskResult | None:
        """Return the task if owned by the caller and not deleted."""

    async def list_tasks(
        self, owner_user_id: str, query: TaskListQuery
    ) -> PagedResult:
        """Return one page of the caller's tasks plus the filtered total."""

    async def update_task(
        self,
        task_id: str,
        owner_user_id: str,
        *,
        title: str,
        description: str | None,
        status: TaskStatus,
        priority: TaskPriority,
        due_date: datetime | None,
    ) -> TaskResult | None:
        """Replace the mutable fields; None if not found for this owner."""

    async def soft_delete(self, task_id: str, owner_user_id: str) -> bool:
        """Mark the task deleted; False if not found for this owner."""

    async def set_status_if_all_owned(
        self,
        task_ids: Sequence[str],
        owner_user_id: str,
        status: TaskStatus,
    ) -> bool:
        """Set status on every listed task, or on none if any is not visible."""
