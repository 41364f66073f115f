"""Base repository: generic create/update with storage error translation."""

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.infrastructure.persistence.database import Base, translate_storage_errors

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with create and update.

    Every round trip runs under translate_storage_errors(), so connection
    failures surface as StorageUnavailableException and never as driver errors.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record (flush, then refresh server-side values)."""
        with translate_storage_errors():
            self.db.add(obj)
            await self.db.flush()
            await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and refresh it."""
        with translate_storage_errors():
            await self.db.flush()
            await self.db.refresh(obj)
        return obj
