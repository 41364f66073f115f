"""Task API: thin routes delegating to TaskService.

Every route requires a bearer token; the caller's user id scopes every query.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from taskmanager.api.v1.dependencies import (
    get_current_user_id,
    get_task_service,
    get_task_service_for_write,
)
from taskmanager.application.dtos.task import TaskListQuery
from taskmanager.application.services.task_service import TaskService
from taskmanager.core.config import get_settings
from taskmanager.core.limiter import limit_writes
from taskmanager.domain.enums import TaskPriority, TaskStatus
from taskmanager.domain.exceptions import ResourceNotFoundException
from taskmanager.schemas.task import (
    BulkMarkDoneRequest,
    MessageResponse,
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)
from taskmanager.shared.utils.datetime import ensure_utc

router = APIRouter()


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Create a task owned by the caller."""
    created = await task_svc.create_task(
        user_id,
        body.title,
        description=body.description,
        status=body.status,
        priority=body.priority,
        due_date=body.due_date,
    )
    return TaskResponse.model_validate(created)


@router.post("/bulk-mark-done", response_model=MessageResponse)
@limit_writes
async def bulk_mark_done(
    request: Request,
    body: BulkMarkDoneRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Mark all listed tasks Done, or none of them (400 if any id is not found)."""
    if not await task_svc.bulk_mark_done(user_id, body.task_ids):
        raise HTTPException(status_code=400, detail="One or more tasks were not found")
    return MessageResponse(message="Tasks marked as done successfully")


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    user_id: Annotated[str, Depends(get_current_user_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
    due_date_from: datetime | None = None,
    due_date_to: datetime | None = None,
    search: Annotated[str | None, Query(max_length=120)] = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
):
    """List the caller's tasks with filters, single-key sort and pagination.

    page_size is capped at MAX_PAGE_SIZE. Unknown sort_by falls back to
    newest first.
    """
    query = TaskListQuery(
        status=status,
        priority=priority,
        due_date_from=ensure_utc(due_date_from),
        due_date_to=ensure_utc(due_date_to),
        search=search,
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=min(page_size, get_settings().max_page_size),
    )
    page = await task_svc.list_tasks(user_id, query)
    return TaskListResponse(
        items=[TaskResponse.model_validate(t) for t in page.items],
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
    )


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Get one of the caller's tasks. 404 if missing, deleted, or owned by someone else."""
    task = await task_svc.get_task(user_id, task_id)
    if task is None:
        raise ResourceNotFoundException("task", task_id)
    return TaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdateRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Replace the task's mutable fields."""
    updated = await task_svc.update_task(
        user_id,
        task_id,
        title=body.title,
        description=body.description,
        status=body.status,
        priority=body.priority,
        due_date=body.due_date,
    )
    if updated is None:
        raise ResourceNotFoundException("task", task_id)
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> Response:
    """Soft delete. A second delete of the same task answers 404."""
    if not await task_svc.delete_task(user_id, task_id):
        raise ResourceNotFoundException("task", task_id)
    return Response(status_code=204)
