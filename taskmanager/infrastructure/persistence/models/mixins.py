"""SQLAlchemy mixins for common model patterns (DRY).

Provides: CuidMixin, TimestampMixin, SoftDeleteMixin, and the combined
AuditedModel. Audit timestamps are stamped by mapper events registered on
TimestampMixin (propagate=True), so every mapped subclass gets them on insert
and on every mutating flush without service code touching them.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, event
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from taskmanager.shared.utils.datetime import utc_now
from taskmanager.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware, set by the store)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)


class SoftDeleteMixin:
    """Mixin for soft delete: is_deleted flag plus deleted_at (null while live)."""

    @declared_attr
    def is_deleted(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean, nullable=False, default=False, index=True
        )

    @declared_attr
    def deleted_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True)


class AuditedModel(CuidMixin, TimestampMixin):
    """Combined mixin: CUID id + created_at/updated_at."""

    __abstract__ = True


@event.listens_for(TimestampMixin, "before_insert", propagate=True)
def _stamp_created(mapper, connection, target) -> None:
    now = utc_now()
    target.created_at = now
    target.updated_at = now


@event.listens_for(TimestampMixin, "before_update", propagate=True)
def _stamp_updated(mapper, connection, target) -> None:
    target.updated_at = utc_now()
