"""Persistence models: ORM entities and mixins."""

from taskmanager.infrastructure.persistence.models.mixins import (
    AuditedModel,
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from taskmanager.infrastructure.persistence.models.task import Task
from taskmanager.infrastructure.persistence.models.types import NamedEnumType
from taskmanager.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "Task",
    "CuidMixin",
    "TimestampMixin",
    "SoftDeleteMixin",
    "AuditedModel",
    "NamedEnumType",
]
