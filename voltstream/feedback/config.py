"""Feedback intake configuration.

Defaults applied to submissions and the stats threshold. All settings
can be overridden via ``FEEDBACK_*`` environment variables. Keyword
weights, owner rules, and channel multipliers are constants in
``voltstream.feedback.scoring``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedbackConfig(BaseSettings):
    """Configuration for feedback intake and statistics."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDBACK_",
        case_sensitive=False,
        extra="ignore",
    )

    default_title: str = Field(
        default="Untitled Feedback",
        min_length=1,
        description="Title stored when a submission has none",
    )
    default_source: str = Field(
        default="Unknown",
        min_length=1,
        description="Source label stored and scored when a submission has none",
    )
    default_status: str = Field(
        default="NEW",
        min_length=1,
        description="Initial lifecycle status",
    )
    placeholder_urgency: int = Field(
        default=4,
        description="Value written to the reserved urgency column",
    )
    placeholder_impact: int = Field(
        default=4,
        description="Value written to the reserved impact column",
    )
    high_priority_threshold: int = Field(
        default=16,
        ge=0,
        description="Priority at or above which feedback counts as high priority",
    )
