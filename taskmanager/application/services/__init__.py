"""Application services (use cases)."""

from taskmanager.application.services.auth_service import AuthService
from taskmanager.application.services.task_service import TaskService

__all__ = ["AuthService", "TaskService"]
