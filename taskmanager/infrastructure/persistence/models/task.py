"""Task ORM model. Each task is exclusively owned by one user."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from taskmanager.domain.enums import (
    TASK_PRIORITY_FROM_NAME,
    TASK_PRIORITY_TO_NAME,
    TASK_STATUS_FROM_NAME,
    TASK_STATUS_TO_NAME,
    TaskPriority,
    TaskStatus,
)
from taskmanager.infrastructure.persistence.database import Base
from taskmanager.infrastructure.persistence.models.mixins import (
    AuditedModel,
    SoftDeleteMixin,
)
from taskmanager.infrastructure.persistence.models.types import NamedEnumType


class Task(AuditedModel, SoftDeleteMixin, Base):
    """Task owned by a user. Table: task."""

    __tablename__ = "task"

    owner_user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        NamedEnumType(TASK_STATUS_TO_NAME, TASK_STATUS_FROM_NAME),
        nullable=False,
        default=TaskStatus.TODO,
    )
    priority: Mapped[TaskPriority] = mapped_column(
        NamedEnumType(TASK_PRIORITY_TO_NAME, TASK_PRIORITY_FROM_NAME),
        nullable=False,
        default=TaskPriority.MEDIUM,
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_task_owner_deleted", "owner_user_id", "is_deleted"),
    )
