"""
Keyword-based sentiment inference for feedback text.

Not a model: a fixed, ordered set of trigger words checked as
case-insensitive substrings. The first rule whose triggers appear in
the text decides the sentiment, so negative triggers win over
positive ones.

Usage:
    from voltstream.feedback.sentiment import resolve_sentiment

    resolve_sentiment("The export keeps crashing")        # "Negative"
    resolve_sentiment("Love it", supplied="auto")         # "Positive"
    resolve_sentiment("Love it", supplied="Neutral")      # "Neutral"
"""

from voltstream.feedback.schemas import (
    AUTO_SENTIMENT,
    SENTIMENT_NEGATIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_POSITIVE,
)

NEGATIVE_TRIGGERS: tuple[str, ...] = ("bug", "error", "crash", "terrible", "unacceptable")
POSITIVE_TRIGGERS: tuple[str, ...] = ("love", "great", "excellent")

# Checked in order; first match wins
SENTIMENT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (NEGATIVE_TRIGGERS, SENTIMENT_NEGATIVE),
    (POSITIVE_TRIGGERS, SENTIMENT_POSITIVE),
)


def is_auto(supplied: str | None) -> bool:
    """True when the caller left sentiment for us to infer."""
    return not supplied or supplied.strip().lower() == AUTO_SENTIMENT


def infer_sentiment(text: str) -> str:
    """Infer Positive, Neutral, or Negative from trigger words in ``text``."""
    lowered = text.lower()
    for triggers, sentiment in SENTIMENT_RULES:
        if any(trigger in lowered for trigger in triggers):
            return sentiment
    return SENTIMENT_NEUTRAL


def resolve_sentiment(text: str, supplied: str | None = None) -> str:
    """Return ``supplied`` unchanged unless it is absent or the auto sentinel."""
    if is_auto(supplied):
        return infer_sentiment(text)
    return supplied
