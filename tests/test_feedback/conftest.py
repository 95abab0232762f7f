"""Shared fixtures for feedback tests."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from voltstream.feedback.repository import FeedbackRepository


@pytest.fixture
def mock_database():
    """Mock Database with async fetch methods."""
    db = AsyncMock()
    db.execute = AsyncMock(return_value="CREATE TABLE")
    db.fetchrow = AsyncMock()
    db.fetch = AsyncMock(return_value=[])
    db.fetchval = AsyncMock()
    return db


@pytest.fixture
def repo(mock_database):
    """FeedbackRepository with a mock database."""
    return FeedbackRepository(mock_database)


@pytest.fixture
def sample_row():
    """A feedback row as the database returns it."""
    return {
        "id": 7,
        "title": "Billing issue",
        "text": "I was charged twice, I want a refund",
        "source": "Email",
        "sentiment": "Neutral",
        "urgency": 4,
        "impact": 4,
        "priority": 12,
        "owner": "Billing/Finance",
        "rationale": json.dumps([
            {"label": "Base Score (Sentiment: Neutral)", "value": 3},
            {"label": 'Keyword Match: "refund"', "value": 4},
            {"label": 'Keyword Match: "charged twice"', "value": 5},
            {"label": "Source Multiplier (Email)", "value": "x1.0"},
        ]),
        "status": "NEW",
        "created_at": datetime(2026, 2, 5, 10, 0, 0, tzinfo=timezone.utc),
    }
