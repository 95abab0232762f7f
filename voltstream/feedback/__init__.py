"""Customer feedback triage: sentiment, priority scoring, ownership, persistence.

Components:
- Feedback: Dataclass mapping to the feedback table
- RationaleEntry: One scoring contribution in a record's rationale trail
- score_feedback / ScoreResult: Deterministic priority + owner scorer
- resolve_sentiment: Keyword sentiment inference with the "auto" sentinel
- build_feedback: Applies defaults and scoring to a submission
- FeedbackConfig: Pydantic settings for intake defaults
- FeedbackRepository: CRUD and statistics for feedback persistence
"""

from voltstream.feedback.config import FeedbackConfig
from voltstream.feedback.intake import build_feedback
from voltstream.feedback.repository import FeedbackRepository
from voltstream.feedback.schemas import (
    VALID_OWNERS,
    VALID_SENTIMENTS,
    Feedback,
    RationaleEntry,
)
from voltstream.feedback.scoring import ScoreResult, score_feedback
from voltstream.feedback.sentiment import resolve_sentiment

__all__ = [
    "Feedback",
    "FeedbackConfig",
    "FeedbackRepository",
    "RationaleEntry",
    "ScoreResult",
    "VALID_OWNERS",
    "VALID_SENTIMENTS",
    "build_feedback",
    "resolve_sentiment",
    "score_feedback",
]
