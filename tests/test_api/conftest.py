"""Shared fixtures for API tests."""

import dataclasses
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from voltstream.api.app import create_app
from voltstream.api.dependencies import get_feedback_config, get_feedback_repository
from voltstream.feedback.config import FeedbackConfig
from voltstream.feedback.repository import FeedbackRepository
from voltstream.feedback.schemas import Feedback


@pytest.fixture
def mock_feedback_repo():
    """Mock FeedbackRepository that assigns ids on create."""
    repo = AsyncMock(spec=FeedbackRepository)

    async def _create(feedback: Feedback) -> Feedback:
        return dataclasses.replace(
            feedback,
            id=42,
            created_at=datetime(2026, 2, 5, 10, 0, 0, tzinfo=timezone.utc),
        )

    repo.create = AsyncMock(side_effect=_create)
    repo.update_status = AsyncMock(return_value=None)
    repo.list_all = AsyncMock(return_value=[])
    repo.get_by_id = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=False)
    repo.get_stats = AsyncMock(return_value={})
    return repo


@pytest.fixture
def client(mock_feedback_repo):
    """FastAPI TestClient with dependency overrides for feedback."""
    app = create_app()

    app.dependency_overrides[get_feedback_repository] = lambda: mock_feedback_repo
    app.dependency_overrides[get_feedback_config] = lambda: FeedbackConfig()

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
