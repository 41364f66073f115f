"""Query building for the task store.

owned_task_criteria() is the single starting point of every task read, update,
delete and bulk path: a task outside it does not exist for the caller.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, UnaryExpression, case, false

from taskmanager.application.dtos.task import TaskListQuery
from taskmanager.domain.enums import TASK_PRIORITY_ORDER, TASK_STATUS_ORDER
from taskmanager.infrastructure.persistence.models.task import Task
from taskmanager.shared.utils.datetime import ensure_utc

_STATUS_RANK = case(
    *[(Task.status == member, rank) for member, rank in TASK_STATUS_ORDER.items()],
    else_=len(TASK_STATUS_ORDER),
)
_PRIORITY_RANK = case(
    *[(Task.priority == member, rank) for member, rank in TASK_PRIORITY_ORDER.items()],
    else_=len(TASK_PRIORITY_ORDER),
)

# Keys are lower-case with underscores removed: "dueDate", "due_date" and
# "DUEDATE" all resolve to the same column.
SORTABLE_FIELDS: dict[str, Any] = {
    "title": Task.title,
    "status": _STATUS_RANK,
    "priority": _PRIORITY_RANK,
    "duedate": Task.due_date,
    "createdat": Task.created_at,
}


def owned_task_criteria(owner_user_id: str) -> list[ColumnElement[bool]]:
    """Base predicate: owned by the caller and not soft-deleted."""
    return [Task.owner_user_id == owner_user_id, Task.is_deleted == false()]


def task_filter_criteria(query: TaskListQuery) -> list[ColumnElement[bool]]:
    """Optional list filters; each one present is AND-combined."""
    criteria: list[ColumnElement[bool]] = []
    if query.status is not None:
        criteria.append(Task.status == query.status)
    if query.priority is not None:
        criteria.append(Task.priority == query.priority)
    if query.due_date_from is not None:
        criteria.append(Task.due_date >= ensure_utc(query.due_date_from))
    if query.due_date_to is not None:
        criteria.append(Task.due_date <= ensure_utc(query.due_date_to))
    if query.search:
        criteria.append(Task.title.icontains(query.search, autoescape=True))
    return criteria


def normalize_sort_field(sort_by: str | None) -> str | None:
    """Return the SORTABLE_FIELDS key for sort_by, or None if unrecognized."""
    if not sort_by:
        return None
    key = sort_by.strip().replace("_", "").lower()
    return key if key in SORTABLE_FIELDS else None


def task_order_by(sort_by: str | None, sort_direction: str | None) -> UnaryExpression:
    """Single-key ORDER BY. Unknown or missing field: created_at descending.

    Direction "desc" (any case) is descending; anything else is ascending.
    """
    key = normalize_sort_field(sort_by)
    if key is None:
        return Task.created_at.desc()
    column = SORTABLE_FIELDS[key]
    descending = (sort_direction or "").strip().lower() == "desc"
    return column.desc() if descending else column.asc()
