"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskmanager.domain.enums import TaskPriority, TaskStatus
from taskmanager.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    InvalidCredentialsException,
    ResourceNotFoundException,
    StorageUnavailableException,
    TaskManagerException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskPriority",
    "TaskStatus",
    # Exceptions
    "AuthenticationException",
    "DuplicateEmailException",
    "InvalidCredentialsException",
    "ResourceNotFoundException",
    "StorageUnavailableException",
    "TaskManagerException",
    "ValidationException",
]
