"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional) so import does not trigger Settings validation.

Storage connection failures are translated to StorageUnavailableException
by translate_storage_errors(); raw driver exceptions never leave this layer.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from taskmanager.core.config import get_settings
from taskmanager.domain.exceptions import StorageUnavailableException

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None

_TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    OSError,
    asyncio.TimeoutError,
)


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }
    if "postgresql" in settings.database_url:
        command_timeout = (
            settings.db_command_timeout
            if settings.db_command_timeout is not None
            else 30
        )
        engine_kwargs.update(
            pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
            max_overflow=(
                settings.db_max_overflow if settings.db_max_overflow is not None else 20
            ),
            pool_recycle=3600,
            connect_args={"command_timeout": command_timeout},
        )
    engine = create_async_engine(settings.database_url, **engine_kwargs)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


@contextmanager
def translate_storage_errors() -> Iterator[None]:
    """Re-raise connection-level failures as StorageUnavailableException.

    Integrity errors and programming errors pass through unchanged; callers
    translate those where they have meaning (e.g. duplicate email).
    """
    try:
        yield
    except _TRANSIENT_ERRORS as e:
        logger.warning("Storage unavailable: %s", type(e).__name__, exc_info=True)
        raise StorageUnavailableException(type(e).__name__) from e


def _session_factory() -> async_sessionmaker[AsyncSession]:
    _ensure_engine()
    if AsyncSessionLocal is None:
        raise StorageUnavailableException("database not configured")
    return AsyncSessionLocal


async def init_models() -> None:
    """Create all tables (local development and tests; no migration tooling)."""
    from taskmanager.infrastructure.persistence import models  # noqa: F401

    _ensure_engine()
    with translate_storage_errors():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)


async def drop_models() -> None:
    """Drop all tables (tests)."""
    from taskmanager.infrastructure.persistence import models  # noqa: F401

    _ensure_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory (shutdown, tests)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
    engine = None
    AsyncSessionLocal = None


async def _connect_with_retry(session: AsyncSession) -> None:
    """Acquire the session's connection, retrying transient failures.

    Up to db_retry_attempts tries; the delay doubles from db_retry_base_delay
    and is capped at db_retry_max_delay. The last failure propagates.
    """
    settings = get_settings()
    attempts = settings.db_retry_attempts
    for attempt in range(1, attempts + 1):
        try:
            await session.connection()
            return
        except _TRANSIENT_ERRORS as e:
            await session.rollback()
            if attempt == attempts:
                raise
            delay = min(
                settings.db_retry_base_delay * 2 ** (attempt - 1),
                settings.db_retry_max_delay,
            )
            logger.warning(
                "Database not ready (attempt %d/%d): %s; retrying in %.1fs",
                attempt,
                attempts,
                type(e).__name__,
                delay,
            )
            await asyncio.sleep(delay)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    factory = _session_factory()
    with translate_storage_errors():
        async with factory() as session:
            await _connect_with_retry(session)
            yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Commits on success, rolls back on exception (including cancellation by
    the request timeout), so a logical operation either fully applies or not
    at all. Use for POST, PUT, PATCH, DELETE endpoints.
    """
    factory = _session_factory()
    with translate_storage_errors():
        async with factory() as session:
            await _connect_with_retry(session)
            try:
                yield session
            except BaseException:
                await session.rollback()
                raise
            await session.commit()
