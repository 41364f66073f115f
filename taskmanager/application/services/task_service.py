"""Task application service: owner-scoped CRUD, listing and bulk completion.

Every operation receives the authenticated user_id; the repository never
returns another user's task or a soft-deleted one. "Not found" is a normal
return value (None / False); the HTTP layer maps it to 404.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from taskmanager.application.dtos.task import PagedResult, TaskListQuery, TaskResult
from taskmanager.application.interfaces.repositories import ITaskRepository
from taskmanager.domain.enums import TaskPriority, TaskStatus
from taskmanager.domain.exceptions import ValidationException
from taskmanager.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


class TaskService:
    """Use cases over the caller's tasks."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def create_task(
        self,
        user_id: str,
        title: str,
        *,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
        priority: TaskPriority = TaskPriority.MEDIUM,
        due_date: datetime | None = None,
    ) -> TaskResult:
        return await self.task_repo.create_task(
            user_id,
            title,
            description=description,
            status=status,
            priority=priority,
            due_date=ensure_utc(due_date),
        )

    async def get_task(self, user_id: str, task_id: str) -> TaskResult | None:
        return await self.task_repo.get_by_id_and_owner(task_id, user_id)

    async def list_tasks(self, user_id: str, query: TaskListQuery) -> PagedResult:
        """Return one page of the caller's tasks; total_count ignores paging."""
        if query.page_number < 1:
            raise ValidationException("page_number must be >= 1", field="page_number")
        if query.page_size < 1:
            raise ValidationException("page_size must be >= 1", field="page_size")
        return await self.task_repo.list_tasks(user_id, query)

    async def update_task(
        self,
        user_id: str,
        task_id: str,
        *,
        title: str,
        description: str | None,
        status: TaskStatus,
        priority: TaskPriority,
        due_date: datetime | None,
    ) -> TaskResult | None:
        """Full replace of the mutable fields. None if not found for this user."""
        return await self.task_repo.update_task(
            task_id,
            user_id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=ensure_utc(due_date),
        )

    async def delete_task(self, user_id: str, task_id: str) -> bool:
        """Soft delete. False if not found (including already deleted)."""
        return await self.task_repo.soft_delete(task_id, user_id)

    async def bulk_mark_done(self, user_id: str, task_ids: Iterable[str]) -> bool:
        """Mark every listed task Done, or none of them.

        Fails when fewer visible tasks are found than ids were requested, so a
        repeated id fails the whole batch. The rows are locked before the
        check, so a concurrent soft delete cannot slip in between check and
        update. Caller must run this within a single DB transaction.
        """
        requested = list(task_ids)
        if not requested:
            return True
        if len(set(requested)) != len(requested):
            logger.info(
                "Bulk mark done rejected: repeated task ids for user_id=%s", user_id
            )
            return False
        done = await self.task_repo.set_status_if_all_owned(
            requested, user_id, TaskStatus.DONE
        )
        if not done:
            logger.info(
                "Bulk mark done rejected: %d requested tasks not all found for user_id=%s",
                len(requested),
                user_id,
            )
        return done
