"""Storage layer: asyncpg connection pool management."""

from voltstream.storage.database import Database

__all__ = ["Database"]
