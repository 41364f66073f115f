"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.application.dtos.user import UserCredentials, UserResult
from taskmanager.domain.exceptions import DuplicateEmailException
from taskmanager.infrastructure.persistence.database import translate_storage_errors
from taskmanager.infrastructure.persistence.models.user import User
from taskmanager.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        email=u.email,
        first_name=u.first_name,
        last_name=u.last_name,
    )


class UserRepository(BaseRepository[User]):
    """User repository. Emails are compared as given; callers pass them normalized."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def email_exists(self, email: str) -> bool:
        with translate_storage_errors():
            result = await self.db.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())

    async def get_credentials_by_email(self, email: str) -> UserCredentials | None:
        with translate_storage_errors():
            result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return UserCredentials(
            id=user.id, email=user.email, hashed_password=user.hashed_password
        )

    async def create_user(
        self,
        email: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
    ) -> UserResult:
        """Create user; raise DuplicateEmailException on unique constraint violation."""
        user = User(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
        )
        try:
            created = await self.create(user)
        except IntegrityError as e:
            raise DuplicateEmailException() from e
        return _user_to_result(created)
