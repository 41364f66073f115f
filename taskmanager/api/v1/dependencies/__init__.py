"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the caller's identity and application services.
Routes depend only on these dependencies, not on infrastructure directly.
"""

from taskmanager.api.v1.dependencies.auth import (
    get_auth_service,
    get_auth_service_for_write,
    get_current_user_id,
    get_jwt_service,
)
from taskmanager.api.v1.dependencies.task import (
    get_task_service,
    get_task_service_for_write,
)

__all__ = [
    "get_auth_service",
    "get_auth_service_for_write",
    "get_current_user_id",
    "get_jwt_service",
    "get_task_service",
    "get_task_service_for_write",
]
