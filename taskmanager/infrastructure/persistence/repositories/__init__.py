"""Repositories: SQLAlchemy implementations of the application repository ports."""

from taskmanager.infrastructure.persistence.repositories.base import BaseRepository
from taskmanager.infrastructure.persistence.repositories.task_repo import TaskRepository
from taskmanager.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = ["BaseRepository", "TaskRepository", "UserRepository"]
