"""Deterministic priority scoring and owner assignment for feedback.

Turns (text, sentiment, source) into a priority score, an owning team,
and an ordered rationale trail:

  priority = round_half_up((base[sentiment] + sum(matched keyword weights)) * channel_multiplier)

The rationale lists the base score first, then each matched keyword in
table order, then the source multiplier. Scoring is pure: the same
inputs always produce the same result, so stored scores can be
re-derived from stored (text, sentiment, source).

Components:
- KEYWORD_WEIGHTS: Ordered (phrase, weight) table
- OWNER_RULES: Ordered (phrases, owner) chain, first match wins
- ScoreResult: Scorer output
- score_feedback: The scoring function
"""

import math
from dataclasses import dataclass, field

from voltstream.feedback.schemas import (
    OWNER_BILLING,
    OWNER_ENGINEERING,
    OWNER_PRODUCT,
    OWNER_SUPPORT,
    SENTIMENT_NEGATIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_POSITIVE,
    RationaleEntry,
)

# ── Constants ────────────────────────────────────────────

BASE_SCORES: dict[str, int] = {
    SENTIMENT_NEGATIVE: 6,
    SENTIMENT_NEUTRAL: 3,
    SENTIMENT_POSITIVE: 1,
}

# Order matters: it is the order of keyword entries in the rationale.
KEYWORD_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("canceling", 5),
    ("cancel", 4),
    ("refund", 4),
    ("money back", 3),
    ("charged twice", 5),
    ("billing", 3),
    ("bug", 3),
    ("crash", 4),
    ("error", 2),
    ("broken", 3),
    ("failed", 2),
    ("not working", 3),
    ("immediately", 2),
    ("urgent", 3),
    ("critical", 4),
    ("unacceptable", 2),
    ("terrible", 2),
    ("slow", 2),
    ("confusing", 1),
    ("feature request", 1),
    ("suggestion", 1),
)

HIGH_PRIORITY_CHANNELS: frozenset[str] = frozenset({"Zendesk", "Slack"})
HIGH_PRIORITY_MULTIPLIER = 1.2
DEFAULT_MULTIPLIER = 1.0

OWNER_RULES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"bug", "error", "failed", "crash", "broken", "not working"}), OWNER_ENGINEERING),
    (frozenset({"money back", "charged twice", "canceling", "cancel", "refund", "billing"}), OWNER_BILLING),
    (frozenset({"immediately", "urgent", "critical", "unacceptable", "terrible"}), OWNER_SUPPORT),
)
DEFAULT_OWNER = OWNER_PRODUCT


# ── Schemas ──────────────────────────────────────────────


@dataclass(frozen=True)
class ScoreResult:
    """Output of the scorer.

    Attributes:
        priority: Rounded priority score.
        owner: Team label from the owner rule chain.
        rationale: Contributions in the order they were applied.
        matched_keywords: Matched phrases in table order.
    """

    priority: int
    owner: str
    rationale: list[RationaleEntry] = field(default_factory=list)
    matched_keywords: list[str] = field(default_factory=list)


# ── Scoring ──────────────────────────────────────────────


def round_half_up(value: float) -> int:
    """Round to the nearest integer; an exact half rounds up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def source_multiplier(source: str) -> float:
    """Channel multiplier. Channel names are matched case-sensitively."""
    if source in HIGH_PRIORITY_CHANNELS:
        return HIGH_PRIORITY_MULTIPLIER
    return DEFAULT_MULTIPLIER


def match_keywords(text: str) -> list[tuple[str, int]]:
    """Return every (phrase, weight) whose phrase occurs in ``text``.

    Matching is an unanchored, case-insensitive substring test, so
    "canceling" matches both "canceling" and "cancel". Each phrase counts
    at most once however often it appears.
    """
    lowered = text.lower()
    return [(phrase, weight) for phrase, weight in KEYWORD_WEIGHTS if phrase in lowered]


def assign_owner(matched_keywords: list[str]) -> str:
    matched = set(matched_keywords)
    for phrases, owner in OWNER_RULES:
        if matched & phrases:
            return owner
    return DEFAULT_OWNER


def score_feedback(text: str, sentiment: str, source: str) -> ScoreResult:
    """Score one piece of feedback.

    Args:
        text: Raw feedback text. Empty text simply matches no keywords.
        sentiment: Resolved sentiment. Unknown values contribute a base of 0.
        source: Channel label; callers substitute a placeholder when absent.

    Returns:
        ScoreResult with priority, owner, and rationale trail.
    """
    base = BASE_SCORES.get(sentiment, 0)
    rationale = [RationaleEntry(label=f"Base Score (Sentiment: {sentiment})", value=base)]

    matches = match_keywords(text)
    keyword_boost = 0
    for phrase, weight in matches:
        keyword_boost += weight
        rationale.append(RationaleEntry(label=f'Keyword Match: "{phrase}"', value=weight))

    multiplier = source_multiplier(source)
    priority = round_half_up((base + keyword_boost) * multiplier)
    rationale.append(
        RationaleEntry(label=f"Source Multiplier ({source})", value=f"x{multiplier:.1f}")
    )

    matched_keywords = [phrase for phrase, _ in matches]
    return ScoreResult(
        priority=priority,
        owner=assign_owner(matched_keywords),
        rationale=rationale,
        matched_keywords=matched_keywords,
    )
