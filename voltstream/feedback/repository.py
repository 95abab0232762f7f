"""Feedback repository for CRUD operations and aggregation queries.

asyncpg-backed storage for Feedback records: insert, status update,
priority-ordered listing, lookup, delete, and statistics.
"""

import asyncio
import logging
from typing import Any

from voltstream.feedback.schemas import Feedback, decode_rationale, encode_rationale
from voltstream.storage.database import Database

logger = logging.getLogger(__name__)

# Column names for the grouped stats queries
_GROUPED_STATS: dict[str, str] = {
    "by_status": "status",
    "by_owner": "owner",
    "by_sentiment": "sentiment",
}


class FeedbackRepository:
    """Repository for feedback persistence and querying.

    Only ``status`` is ever updated; the scored columns are written once
    by ``create``.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    async def create_tables(self) -> None:
        """Create the feedback table and its listing index if missing."""
        create_sql = """
        CREATE TABLE IF NOT EXISTS feedback (
            id BIGSERIAL PRIMARY KEY,
            title TEXT NOT NULL,
            text TEXT NOT NULL,
            source TEXT NOT NULL,
            sentiment TEXT NOT NULL,
            urgency INTEGER NOT NULL,
            impact INTEGER NOT NULL,
            priority INTEGER NOT NULL,
            owner TEXT NOT NULL,
            rationale TEXT NOT NULL DEFAULT '[]',
            status TEXT NOT NULL DEFAULT 'NEW',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );

        CREATE INDEX IF NOT EXISTS idx_feedback_priority_created
            ON feedback (priority DESC, created_at DESC);
        """
        await self._db.execute(create_sql)
        logger.info("Feedback table ready")

    async def create(self, feedback: Feedback) -> Feedback:
        """Insert a new feedback record.

        Args:
            feedback: Scored, unsaved Feedback.

        Returns:
            The stored Feedback with id and created_at assigned by the DB.
        """
        sql = """
            INSERT INTO feedback (
                title, text, source, sentiment, urgency, impact,
                priority, owner, rationale, status
            ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
            RETURNING *
        """
        row = await self._db.fetchrow(
            sql,
            feedback.title,
            feedback.text,
            feedback.source,
            feedback.sentiment,
            feedback.urgency,
            feedback.impact,
            feedback.priority,
            feedback.owner,
            encode_rationale(feedback.rationale),
            feedback.status,
        )
        created = _row_to_feedback(row)
        logger.info(
            f"Feedback added: id={created.id} priority={created.priority} owner={created.owner}"
        )
        return created

    async def update_status(self, feedback_id: int, status: str) -> Feedback | None:
        """Set the status of one record.

        Returns:
            The updated Feedback, or None if no record has that id.
        """
        sql = "UPDATE feedback SET status = $1 WHERE id = $2 RETURNING *"
        row = await self._db.fetchrow(sql, status, feedback_id)
        if row is None:
            return None
        logger.info(f"Status updated: id={feedback_id} -> {status}")
        return _row_to_feedback(row)

    async def list_all(self) -> list[Feedback]:
        """Get every record, highest priority first, newest first within a priority."""
        sql = """
            SELECT * FROM feedback
            ORDER BY priority DESC, created_at DESC, id DESC
        """
        rows = await self._db.fetch(sql)
        return [_row_to_feedback(row) for row in rows]

    async def get_by_id(self, feedback_id: int) -> Feedback | None:
        sql = "SELECT * FROM feedback WHERE id = $1"
        row = await self._db.fetchrow(sql, feedback_id)
        if row is None:
            return None
        return _row_to_feedback(row)

    async def delete(self, feedback_id: int) -> bool:
        """Delete one record.

        Returns:
            True if a record was removed, False if none had that id.
        """
        sql = "DELETE FROM feedback WHERE id = $1 RETURNING id"
        deleted_id = await self._db.fetchval(sql, feedback_id)
        if deleted_id is None:
            return False
        logger.info(f"Deleted feedback: id={feedback_id}")
        return True

    async def get_stats(self, high_priority_threshold: int = 16) -> dict[str, Any]:
        """Aggregate counts over all feedback.

        Runs the five count queries concurrently and waits for all of them.
        A query that fails is logged and its key left out of the result;
        the others are still returned.

        Args:
            high_priority_threshold: Minimum priority counted as high priority.

        Returns:
            Dict with any of ``total``, ``high_priority`` (ints) and
            ``by_status``, ``by_owner``, ``by_sentiment`` (label -> count).
        """
        queries: dict[str, Any] = {
            "total": self._db.fetchval("SELECT COUNT(*) FROM feedback"),
            "high_priority": self._db.fetchval(
                "SELECT COUNT(*) FROM feedback WHERE priority >= $1",
                high_priority_threshold,
            ),
        }
        for key, column in _GROUPED_STATS.items():
            queries[key] = self._count_by(column)

        results = await asyncio.gather(*queries.values(), return_exceptions=True)

        stats: dict[str, Any] = {}
        for key, result in zip(queries.keys(), results):
            if isinstance(result, Exception):
                logger.warning(f"Stats query {key!r} failed: {result}")
                continue
            stats[key] = result
        return stats

    async def _count_by(self, column: str) -> dict[str, int]:
        sql = f"""
            SELECT {column} AS label, COUNT(*) AS count
            FROM feedback
            GROUP BY {column}
            ORDER BY {column}
        """
        rows = await self._db.fetch(sql)
        return {row["label"]: row["count"] for row in rows}


def _row_to_feedback(row: Any) -> Feedback:
    """Convert an asyncpg Record to a Feedback."""
    return Feedback(
        id=row["id"],
        title=row["title"],
        text=row["text"],
        source=row["source"],
        sentiment=row["sentiment"],
        urgency=row["urgency"],
        impact=row["impact"],
        priority=row["priority"],
        owner=row["owner"],
        rationale=decode_rationale(row.get("rationale")),
        status=row["status"],
        created_at=row["created_at"],
    )
