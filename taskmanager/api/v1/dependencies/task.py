"""Task dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.application.services.task_service import TaskService
from taskmanager.infrastructure.persistence.database import get_db, get_db_transactional
from taskmanager.infrastructure.persistence.repositories import TaskRepository


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for reads (get/list)."""
    return TaskService(TaskRepository(db))


async def get_task_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for create/update/delete/bulk (one transaction per request)."""
    return TaskService(TaskRepository(db))
