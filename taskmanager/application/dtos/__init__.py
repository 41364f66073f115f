"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from taskmanager.application.dtos.task import PagedResult, TaskListQuery, TaskResult
from taskmanager.application.dtos.user import AuthResult, UserCredentials, UserResult

__all__ = [
    "AuthResult",
    "PagedResult",
    "TaskListQuery",
    "TaskResult",
    "UserCredentials",
    "UserResult",
]
