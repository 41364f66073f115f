"""User ORM model for authentication."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from taskmanager.infrastructure.persistence.database import Base
from taskmanager.infrastructure.persistence.models.mixins import AuditedModel


class User(AuditedModel, Base):
    """User model. Table: app_user. Email is unique (stored normalized)."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (UniqueConstraint("email", name="uq_app_user_email"),)
