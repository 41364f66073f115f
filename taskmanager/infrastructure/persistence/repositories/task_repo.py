"""Task repository. Owner-scoped; returns application DTOs."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.application.dtos.task import PagedResult, TaskListQuery, TaskResult
from taskmanager.domain.enums import TaskPriority, TaskStatus
from taskmanager.infrastructure.persistence.database import translate_storage_errors
from taskmanager.infrastructure.persistence.models.task import Task
from taskmanager.infrastructure.persistence.repositories.base import BaseRepository
from taskmanager.infrastructure.persistence.repositories.task_query import (
    owned_task_criteria,
    task_filter_criteria,
    task_order_by,
)
from taskmanager.shared.utils.datetime import ensure_utc, utc_now


def _task_to_result(t: Task) -> TaskResult:
    """Map ORM Task to application TaskResult (timestamps as aware UTC)."""
    return TaskResult(
        id=t.id,
        owner_user_id=t.owner_user_id,
        title=t.title,
        description=t.description,
        status=t.status,
        priority=t.priority,
        due_date=ensure_utc(t.due_date),
        is_deleted=t.is_deleted,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Every method is scoped by owned_task_criteria()."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def _get_owned_entity(self, task_id: str, owner_user_id: str) -> Task | None:
        """Load the ORM row for update/delete, or None if not visible to owner."""
        with translate_storage_errors():
            result = await self.db.execute(
                select(Task).where(Task.id == task_id, *owned_task_criteria(owner_user_id))
            )
        return result.scalar_one_or_none()

    async def _get_owned_entities(
        self,
        task_ids: Collection[str],
        owner_user_id: str,
        *,
        for_update: bool = False,
    ) -> list[Task]:
        stmt = select(Task).where(
            Task.id.in_(list(task_ids)), *owned_task_criteria(owner_user_id)
        )
        if for_update:
            stmt = stmt.with_for_update()
        with translate_storage_errors():
            result = await self.db.execute(stmt)
        return list(result.scalars().all())

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
        task = Task(
            owner_user_id=owner_user_id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=ensure_utc(due_date),
            is_deleted=False,
        )
        created = await self.create(task)
        return _task_to_result(created)

    async def get_by_id_and_owner(
        self, task_id: str, owner_user_id: str
    ) -> TaskResult | None:
        task = await self._get_owned_entity(task_id, owner_user_id)
        return _task_to_result(task) if task else None

    async def list_tasks(
        self, owner_user_id: str, query: TaskListQuery
    ) -> PagedResult:
        """Return one page plus the total over the filtered (unpaged) set."""
        criteria = [*owned_task_criteria(owner_user_id), *task_filter_criteria(query)]
        count_stmt = select(func.count()).select_from(Task).where(*criteria)
        page_stmt = (
            select(Task)
            .where(*criteria)
            .order_by(task_order_by(query.sort_by, query.sort_direction))
            .offset(query.offset)
            .limit(query.page_size)
        )
        with translate_storage_errors():
            total = (await self.db.execute(count_stmt)).scalar() or 0
            rows = (await self.db.execute(page_stmt)).scalars().all()
        return PagedResult(
            items=[_task_to_result(t) for t in rows],
            total_count=total,
            page_number=query.page_number,
            page_size=query.page_size,
        )

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
        task = await self._get_owned_entity(task_id, owner_user_id)
        if task is None:
            return None
        task.title = title
        task.description = description
        task.status = status
        task.priority = priority
        task.due_date = ensure_utc(due_date)
        updated = await self.update(task)
        return _task_to_result(updated)

    async def soft_delete(self, task_id: str, owner_user_id: str) -> bool:
        task = await self._get_owned_entity(task_id, owner_user_id)
        if task is None:
            return False
        task.is_deleted = True
        task.deleted_at = utc_now()
        await self.update(task)
        return True

    async def set_status_if_all_owned(
        self,
        task_ids: Sequence[str],
        owner_user_id: str,
        status: TaskStatus,
    ) -> bool:
        """Lock the caller's tasks among task_ids and set status on all of them.

        Returns False and changes nothing unless one visible row comes back per
        requested id. The same locked rows are updated through the ORM so
        updated_at is stamped per row.
        """
        if not task_ids:
            return True
        tasks = await self._get_owned_entities(
            set(task_ids), owner_user_id, for_update=True
        )
        if len(tasks) != len(task_ids):
            return False
        for task in tasks:
            task.status = status
        with translate_storage_errors():
            await self.db.flush()
        return True
