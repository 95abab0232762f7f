"""
Request and response models for the feedback API.
"""

from pydantic import BaseModel, Field

from voltstream.feedback.schemas import Feedback


class ErrorResponse(BaseModel):
    """Response model for errors."""

    detail: str = Field(
        ...,
        description="Error message",
    )
    error_type: str = Field(
        default="error",
        description="Error type",
    )


# Health models


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = Field(..., description="Always 'healthy' while the process serves requests")
    timestamp: str = Field(..., description="Current server time (ISO format, UTC)")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class ComponentHealth(BaseModel):
    """Health status for a single infrastructure component."""

    status: str = Field(..., description="Component status: healthy or unhealthy")
    latency_ms: float | None = Field(
        default=None,
        description="Round-trip latency in milliseconds",
    )
    details: dict | None = Field(
        default=None,
        description="Additional diagnostic information",
    )


class ReadinessResponse(BaseModel):
    """Readiness probe response including dependency checks."""

    status: str = Field(..., description="Overall status: healthy or unhealthy")
    timestamp: str = Field(..., description="Current server time (ISO format, UTC)")
    components: dict[str, ComponentHealth] = Field(
        default_factory=dict,
        description="Per-component health",
    )


# Feedback models


class FeedbackCreateRequest(BaseModel):
    """Request model for submitting feedback.

    ``text`` is optional at the schema level so a missing value can be
    answered with a 400 and a descriptive message.
    """

    title: str | None = Field(default=None, description="Short title")
    text: str | None = Field(default=None, description="Raw feedback text (required)")
    source: str | None = Field(
        default=None,
        description="Channel the feedback came from, e.g. Zendesk, Slack, Email",
    )
    sentiment: str | None = Field(
        default=None,
        description="Positive, Neutral, Negative, or 'auto' to infer from the text",
    )
    status: str | None = Field(default=None, description="Initial status (default NEW)")


class FeedbackCreateResponse(BaseModel):
    """Response model for a created feedback record."""

    message: str = Field(..., description="Human-readable confirmation")
    id: int = Field(..., description="Store-assigned identifier")
    priority: int = Field(..., description="Computed priority score")
    owner: str = Field(..., description="Team assigned to follow up")
    sentiment: str = Field(..., description="Supplied or inferred sentiment")
    latency_ms: float = Field(..., description="Processing latency in milliseconds")


class StatusUpdateRequest(BaseModel):
    """Request model for changing a record's status."""

    status: str | None = Field(default=None, description="New status label (required)")


class RationaleItem(BaseModel):
    """One scoring contribution."""

    label: str = Field(..., description="What contributed, e.g. 'Keyword Match: \"bug\"'")
    value: int | str = Field(..., description="Score contribution, or 'x1.2' for multipliers")


class FeedbackItem(BaseModel):
    """Single feedback record."""

    id: int = Field(..., description="Feedback identifier")
    title: str = Field(..., description="Title")
    text: str = Field(..., description="Raw feedback text")
    source: str = Field(..., description="Source channel")
    sentiment: str = Field(..., description="Positive, Neutral, or Negative")
    urgency: int = Field(..., description="Reserved placeholder")
    impact: int = Field(..., description="Reserved placeholder")
    priority: int = Field(..., description="Priority score")
    owner: str = Field(..., description="Owning team")
    rationale: list[RationaleItem] = Field(
        default_factory=list,
        description="Ordered scoring contributions",
    )
    status: str = Field(..., description="Lifecycle status")
    created_at: str | None = Field(default=None, description="Creation timestamp (ISO format)")

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "FeedbackItem":
        return cls(
            id=feedback.id,
            title=feedback.title,
            text=feedback.text,
            source=feedback.source,
            sentiment=feedback.sentiment,
            urgency=feedback.urgency,
            impact=feedback.impact,
            priority=feedback.priority,
            owner=feedback.owner,
            rationale=[
                RationaleItem(label=entry.label, value=entry.value)
                for entry in feedback.rationale
            ],
            status=feedback.status,
            created_at=feedback.created_at.isoformat() if feedback.created_at else None,
        )


class FeedbackListResponse(BaseModel):
    """Response model for listing feedback."""

    items: list[FeedbackItem] = Field(..., description="Records ordered by priority, newest first")
    total: int = Field(..., description="Number of records returned")
    latency_ms: float = Field(..., description="Processing latency in milliseconds")


class StatusUpdateResponse(BaseModel):
    """Response model for a status change."""

    message: str = Field(..., description="Human-readable confirmation")
    feedback: FeedbackItem = Field(..., description="Updated record")


class FeedbackDeleteResponse(BaseModel):
    """Response model for a deletion."""

    message: str = Field(..., description="Human-readable confirmation")
    id: int = Field(..., description="Identifier of the deleted record")


class FeedbackStatsResponse(BaseModel):
    """Aggregated feedback counts.

    A count whose query failed is omitted from the response.
    """

    total: int | None = Field(default=None, description="Total number of records")
    high_priority: int | None = Field(
        default=None,
        description="Records at or above the high-priority threshold",
    )
    by_status: dict[str, int] | None = Field(default=None, description="Counts per status")
    by_owner: dict[str, int] | None = Field(default=None, description="Counts per owner")
    by_sentiment: dict[str, int] | None = Field(default=None, description="Counts per sentiment")
    latency_ms: float = Field(..., description="Processing latency in milliseconds")
