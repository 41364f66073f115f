"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, schema, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskmanager.core.config import get_settings
from taskmanager.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: configure logging, create tables when DATABASE_CREATE_TABLES is
    set. Shutdown: SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    if settings.database_create_tables:
        from taskmanager.infrastructure.persistence.database import init_models

        await init_models()
        logger.info("Database tables created")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    from taskmanager.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
