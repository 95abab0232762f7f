"""Feedback endpoints: submit, re-status, list, fetch, and delete feedback."""

import time

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from voltstream.api.dependencies import get_feedback_config, get_feedback_repository
from voltstream.api.models import (
    ErrorResponse,
    FeedbackCreateRequest,
    FeedbackCreateResponse,
    FeedbackDeleteResponse,
    FeedbackItem,
    FeedbackListResponse,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from voltstream.feedback.config import FeedbackConfig
from voltstream.feedback.intake import build_feedback
from voltstream.feedback.repository import FeedbackRepository
from voltstream.feedback.schemas import VALID_SENTIMENTS
from voltstream.feedback.sentiment import is_auto

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "/feedback/add",
    response_model=FeedbackCreateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing text or invalid sentiment"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Submit feedback",
    description=(
        "Store a piece of customer feedback. Sentiment is inferred from the "
        "text when omitted or 'auto'; priority, owner, and rationale are "
        "computed once here and never recomputed."
    ),
)
async def add_feedback(
    request: FeedbackCreateRequest,
    feedback_repo: FeedbackRepository = Depends(get_feedback_repository),
    config: FeedbackConfig = Depends(get_feedback_config),
) -> FeedbackCreateResponse:
    start_time = time.perf_counter()

    if not request.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Feedback text is required",
        )

    if not is_auto(request.sentiment) and request.sentiment not in VALID_SENTIMENTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Invalid sentiment {request.sentiment!r}. "
                f"Must be one of: {sorted(VALID_SENTIMENTS)} or 'auto'"
            ),
        )

    try:
        feedback = build_feedback(
            request.text,
            title=request.title,
            source=request.source,
            sentiment=request.sentiment,
            status=request.status,
            config=config,
        )
        created = await feedback_repo.create(feedback)

        latency_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "Feedback created",
            feedback_id=created.id,
            priority=created.priority,
            owner=created.owner,
            sentiment=created.sentiment,
            latency_ms=round(latency_ms, 2),
        )

        return FeedbackCreateResponse(
            message="Feedback added and prioritized!",
            id=created.id,
            priority=created.priority,
            owner=created.owner,
            sentiment=created.sentiment,
            latency_ms=round(latency_ms, 2),
        )

    except Exception as e:
        logger.error("add_feedback_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create feedback: {e}",
        )


@router.post(
    "/feedback/update/{feedback_id}",
    response_model=StatusUpdateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing status"},
        404: {"model": ErrorResponse, "description": "Feedback not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Update feedback status",
    description="Change the lifecycle status of one record. No other field can change.",
)
async def update_feedback_status(
    feedback_id: int,
    request: StatusUpdateRequest,
    feedback_repo: FeedbackRepository = Depends(get_feedback_repository),
) -> StatusUpdateResponse:
    if not request.status:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Status is required",
        )

    try:
        updated = await feedback_repo.update_status(feedback_id, request.status)
    except Exception as e:
        logger.error("update_feedback_status_failed", feedback_id=feedback_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update feedback: {e}",
        )

    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Feedback item not found",
        )

    logger.info("Feedback status updated", feedback_id=feedback_id, status=request.status)

    return StatusUpdateResponse(
        message=f"Status updated to {request.status}",
        feedback=FeedbackItem.from_feedback(updated),
    )


# Declared before /feedback/{feedback_id} so "all" is not parsed as an id
@router.get(
    "/feedback/all",
    response_model=FeedbackListResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="List feedback",
    description="All feedback ordered by priority (highest first), then newest first.",
)
async def list_feedback(
    feedback_repo: FeedbackRepository = Depends(get_feedback_repository),
) -> FeedbackListResponse:
    start_time = time.perf_counter()

    try:
        records = await feedback_repo.list_all()
    except Exception as e:
        logger.error("list_feedback_failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to list feedback: {e}",
        )

    items = [FeedbackItem.from_feedback(record) for record in records]
    latency_ms = (time.perf_counter() - start_time) * 1000

    logger.info("Feedback listed", count=len(items), latency_ms=round(latency_ms, 2))

    return FeedbackListResponse(
        items=items,
        total=len(items),
        latency_ms=round(latency_ms, 2),
    )


@router.get(
    "/feedback/{feedback_id}",
    response_model=FeedbackItem,
    responses={
        404: {"model": ErrorResponse, "description": "Feedback not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Get feedback",
)
async def get_feedback(
    feedback_id: int,
    feedback_repo: FeedbackRepository = Depends(get_feedback_repository),
) -> FeedbackItem:
    try:
        record = await feedback_repo.get_by_id(feedback_id)
    except Exception as e:
        logger.error("get_feedback_failed", feedback_id=feedback_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to get feedback: {e}",
        )

    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Feedback not found",
        )

    return FeedbackItem.from_feedback(record)


@router.delete(
    "/feedback/{feedback_id}",
    response_model=FeedbackDeleteResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Feedback not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Delete feedback",
)
async def delete_feedback(
    feedback_id: int,
    feedback_repo: FeedbackRepository = Depends(get_feedback_repository),
) -> FeedbackDeleteResponse:
    try:
        deleted = await feedback_repo.delete(feedback_id)
    except Exception as e:
        logger.error("delete_feedback_failed", feedback_id=feedback_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete feedback: {e}",
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Feedback not found",
        )

    logger.info("Feedback deleted", feedback_id=feedback_id)

    return FeedbackDeleteResponse(
        message="Feedback deleted successfully",
        id=feedback_id,
    )
