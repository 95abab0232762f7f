"""Feedback statistics endpoint."""

import time

import structlog
from fastapi import APIRouter, Depends

from voltstream.api.dependencies import get_feedback_config, get_feedback_repository
from voltstream.api.models import FeedbackStatsResponse
from voltstream.feedback.config import FeedbackConfig
from voltstream.feedback.repository import FeedbackRepository

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "/stats",
    response_model=FeedbackStatsResponse,
    response_model_exclude_none=True,
    summary="Get feedback statistics",
    description=(
        "Total count, high-priority count, and counts grouped by status, "
        "owner, and sentiment. A count whose query fails is left out "
        "rather than failing the whole response."
    ),
)
async def get_stats(
    feedback_repo: FeedbackRepository = Depends(get_feedback_repository),
    config: FeedbackConfig = Depends(get_feedback_config),
) -> FeedbackStatsResponse:
    start_time = time.perf_counter()

    stats = await feedback_repo.get_stats(
        high_priority_threshold=config.high_priority_threshold,
    )

    latency_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        "Feedback stats retrieved",
        keys=sorted(stats),
        total=stats.get("total"),
        latency_ms=round(latency_ms, 2),
    )

    return FeedbackStatsResponse(**stats, latency_ms=round(latency_ms, 2))
