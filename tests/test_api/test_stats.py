"""Tests for the /stats endpoint."""

from voltstream.api.dependencies import get_feedback_config
from voltstream.feedback.config import FeedbackConfig


class TestStatsEndpoint:
    """Tests for aggregate feedback counts."""

    def test_stats_full(self, client, mock_feedback_repo):
        mock_feedback_repo.get_stats.return_value = {
            "total": 4,
            "high_priority": 1,
            "by_status": {"NEW": 3, "DONE": 1},
            "by_owner": {"Engineering": 3, "Billing/Finance": 1},
            "by_sentiment": {"Negative": 2, "Neutral": 2},
        }

        resp = client.get("/stats")

        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 4
        assert data["high_priority"] == 1
        assert data["by_status"] == {"NEW": 3, "DONE": 1}
        assert data["by_owner"] == {"Engineering": 3, "Billing/Finance": 1}
        assert data["by_sentiment"] == {"Negative": 2, "Neutral": 2}
        assert "latency_ms" in data
        mock_feedback_repo.get_stats.assert_awaited_once_with(high_priority_threshold=16)

    def test_failed_keys_omitted(self, client, mock_feedback_repo):
        mock_feedback_repo.get_stats.return_value = {
            "total": 2,
            "by_status": {"NEW": 2},
        }

        resp = client.get("/stats")

        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 2
        assert data["by_status"] == {"NEW": 2}
        assert "high_priority" not in data
        assert "by_owner" not in data
        assert "by_sentiment" not in data

    def test_empty_store(self, client, mock_feedback_repo):
        mock_feedback_repo.get_stats.return_value = {
            "total": 0,
            "high_priority": 0,
            "by_status": {},
            "by_owner": {},
            "by_sentiment": {},
        }

        data = client.get("/stats").json()

        assert data["total"] == 0
        assert data["by_owner"] == {}

    def test_threshold_from_config(self, client, mock_feedback_repo):
        client.app.dependency_overrides[get_feedback_config] = lambda: FeedbackConfig(
            high_priority_threshold=20
        )

        client.get("/stats")

        mock_feedback_repo.get_stats.assert_awaited_once_with(high_priority_threshold=20)
