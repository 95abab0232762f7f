"""Turn a feedback submission into a scored, unsaved Feedback record."""

import logging

from voltstream.feedback.config import FeedbackConfig
from voltstream.feedback.schemas import Feedback
from voltstream.feedback.scoring import score_feedback
from voltstream.feedback.sentiment import resolve_sentiment

logger = logging.getLogger(__name__)


def build_feedback(
    text: str,
    *,
    title: str | None = None,
    source: str | None = None,
    sentiment: str | None = None,
    status: str | None = None,
    config: FeedbackConfig | None = None,
) -> Feedback:
    """Apply defaults, resolve sentiment, and score a submission.

    Args:
        text: Raw feedback text (required, non-empty).
        title: Optional title; the configured placeholder when empty.
        source: Optional channel label; the configured placeholder when empty.
        sentiment: Concrete sentiment, or None / ``"auto"`` to infer it.
        status: Optional initial status; ``NEW`` by default.
        config: Intake defaults; read from the environment when omitted.

    Returns:
        Feedback with priority, owner, and rationale filled in. ``id`` and
        ``created_at`` stay None until the repository stores it.

    Raises:
        ValueError: If ``text`` is empty or the sentiment is not recognised.
    """
    if not text:
        raise ValueError("Feedback text is required")

    config = config or FeedbackConfig()
    source = source or config.default_source
    resolved = resolve_sentiment(text, sentiment)

    result = score_feedback(text, resolved, source)
    logger.debug(
        f"Scored feedback: sentiment={resolved} source={source} "
        f"keywords={result.matched_keywords} priority={result.priority} owner={result.owner}"
    )

    feedback = Feedback(
        title=title or config.default_title,
        text=text,
        source=source,
        sentiment=resolved,
        urgency=config.placeholder_urgency,
        impact=config.placeholder_impact,
        priority=result.priority,
        owner=result.owner,
        rationale=result.rationale,
        status=status or config.default_status,
    )
    feedback.validate()
    return feedback
