"""Schema definitions for feedback records.

Maps 1:1 to the ``feedback`` database table. Each record is a piece of
customer feedback together with the priority, owner, and rationale trail
computed when it was submitted.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)

SENTIMENT_POSITIVE = "Positive"
SENTIMENT_NEUTRAL = "Neutral"
SENTIMENT_NEGATIVE = "Negative"

VALID_SENTIMENTS: frozenset[str] = frozenset({
    SENTIMENT_POSITIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_NEGATIVE,
})

# Sentinel a client sends to request sentiment inference
AUTO_SENTIMENT = "auto"

OWNER_ENGINEERING = "Engineering"
OWNER_BILLING = "Billing/Finance"
OWNER_SUPPORT = "Support/Triage"
OWNER_PRODUCT = "Product/UX"

VALID_OWNERS: frozenset[str] = frozenset({
    OWNER_ENGINEERING,
    OWNER_BILLING,
    OWNER_SUPPORT,
    OWNER_PRODUCT,
})


@dataclass(frozen=True)
class RationaleEntry:
    """One scoring contribution: a human-readable label and its value.

    ``value`` is an integer score contribution for the base and keyword
    entries, and a string such as ``"x1.2"`` for the source multiplier.
    """

    label: str
    value: int | str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "value": self.value}


def encode_rationale(entries: list[RationaleEntry]) -> str:
    """Serialize a rationale trail to the JSON text stored in the table."""
    return json.dumps([entry.to_dict() for entry in entries])


def decode_rationale(payload: str | None) -> list[RationaleEntry]:
    """Parse a stored rationale payload back into its ordered entries.

    Missing or malformed payloads decode to an empty list so a bad row
    never breaks a read.
    """
    if not payload:
        return []
    try:
        raw = json.loads(payload)
        return [RationaleEntry(label=item["label"], value=item["value"]) for item in raw]
    except (TypeError, ValueError, KeyError) as e:
        logger.warning(f"Discarding unparseable rationale payload: {e}")
        return []


@dataclass
class Feedback:
    """A feedback record from the feedback table.

    Attributes:
        text: Raw feedback content. Immutable after creation.
        sentiment: Positive, Neutral, or Negative.
        priority: Score computed once at creation.
        owner: Team responsible for follow-up.
        title: Short title, placeholder when the submitter gave none.
        source: Channel the feedback arrived through (e.g. Zendesk).
        rationale: Ordered scoring contributions explaining ``priority``.
        urgency: Reserved placeholder, always written as 4.
        impact: Reserved placeholder, always written as 4.
        status: Lifecycle label, the only field updated after creation.
        id: Store-assigned identifier, None until persisted.
        created_at: Store-assigned insertion time, None until persisted.
    """

    text: str
    sentiment: str
    priority: int
    owner: str
    title: str = "Untitled Feedback"
    source: str = "Unknown"
    rationale: list[RationaleEntry] = field(default_factory=list)
    urgency: int = 4
    impact: int = 4
    status: str = "NEW"
    id: int | None = None
    created_at: datetime | None = None

    def validate(self) -> None:
        """Check a new record before it is stored.

        Rows read back from the store are not re-validated.

        Raises:
            ValueError: If text is empty, or sentiment or owner is unknown.
        """
        if not self.text:
            raise ValueError("Feedback text must not be empty.")
        if self.sentiment not in VALID_SENTIMENTS:
            raise ValueError(
                f"Invalid sentiment {self.sentiment!r}. "
                f"Must be one of: {sorted(VALID_SENTIMENTS)}"
            )
        if self.owner not in VALID_OWNERS:
            raise ValueError(
                f"Invalid owner {self.owner!r}. "
                f"Must be one of: {sorted(VALID_OWNERS)}"
            )
