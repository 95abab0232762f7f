"""
Dependency injection for FastAPI endpoints.
"""

import asyncio

import structlog
from fastapi import HTTPException

from voltstream.config.settings import get_settings
from voltstream.feedback.config import FeedbackConfig
from voltstream.feedback.repository import FeedbackRepository
from voltstream.storage.database import Database

logger = structlog.get_logger(__name__)

# Global instances (initialized on first request)
_database: Database | None = None
_feedback_repository: FeedbackRepository | None = None
_feedback_config: FeedbackConfig | None = None

# Separate locks: get_feedback_repository awaits get_database while holding its own
_database_lock = asyncio.Lock()
_repository_lock = asyncio.Lock()


async def get_database() -> Database:
    """
    Get the shared Database, connecting on first use.

    Raises:
        HTTPException: 500 carrying the connection error when the store is unreachable.
    """
    global _database

    if _database is not None:
        return _database

    async with _database_lock:
        if _database is None:
            database = Database()
            try:
                await database.connect()
            except Exception as e:
                logger.error("Database connection failed", error=str(e))
                raise HTTPException(
                    status_code=500,
                    detail=f"Database unavailable: {e}",
                ) from e
            _database = database

    return _database


async def get_feedback_repository() -> FeedbackRepository:
    """
    Get feedback repository instance.

    On first use, creates the feedback table when
    ``DB_AUTO_CREATE_SCHEMA`` is enabled.
    """
    global _feedback_repository

    if _feedback_repository is not None:
        return _feedback_repository

    async with _repository_lock:
        if _feedback_repository is None:
            repository = FeedbackRepository(await get_database())

            if get_settings().db_auto_create_schema:
                try:
                    await repository.create_tables()
                except Exception as e:
                    logger.error("Feedback schema creation failed", error=str(e))
                    raise HTTPException(
                        status_code=500,
                        detail=f"Database unavailable: {e}",
                    ) from e

            _feedback_repository = repository

    return _feedback_repository


def get_feedback_config() -> FeedbackConfig:
    """Get intake configuration (loaded from ``FEEDBACK_*`` once)."""
    global _feedback_config

    if _feedback_config is None:
        _feedback_config = FeedbackConfig()

    return _feedback_config


async def cleanup_dependencies() -> None:
    """Clean up global dependencies on shutdown."""
    global _database, _feedback_repository

    _feedback_repository = None

    if _database is not None:
        await _database.close()
        _database = None
