"""Integration tests for feedback API."""
import pytest

from app.core.identifiers import new_id


@pytest.mark.integration
class TestFeedbackEndpoints:
    """Test feedback submission and reporting."""

    def test_submit_and_resubmit(self, client):
        lecture_id, user_id = new_id(), new_id()
        body = {"lecture_id": lecture_id, "user_id": user_id}

        first = client.post("/api/v1/feedback", json={**body, "too_fast": True, "other": "Slow down"})
        second = client.post("/api/v1/feedback", json={**body, "boring": True})

        assert first.json()["created"] is True
        assert second.json()["created"] is False
        assert second.json()["message"] == "Feedback updated"

        mine = client.get(f"/api/v1/feedback/lectures/{lecture_id}/users/{user_id}").json()
        assert mine == {
            "too_fast": False,
            "too_slow": False,
            "boring": True,
            "bad_question_quality": False,
            "other": "",
        }

    def test_summary_empty(self, client):
        response = client.get(f"/api/v1/feedback/lectures/{new_id()}/summary")

        assert response.status_code == 200
        assert response.json() == {"too_fast": 0, "too_slow": 0, "boring": 0, "bad_question_quality": 0}

    def test_comments(self, client, make_user):
        lecture_id = new_id()
        user = make_user(username="hopper")
        client.post("/api/v1/feedback", json={"lecture_id": lecture_id, "user_id": user["id"], "other": "  a < b  "})

        comments = client.get(f"/api/v1/feedback/lectures/{lecture_id}/comments").json()

        assert comments == [{"user_id": user["id"], "username": "hopper", "avatar": user["avatar"], "comment": "a < b"}]

    def test_user_feedback_missing(self, client):
        response = client.get(f"/api/v1/feedback/lectures/{new_id()}/users/{new_id()}")

        assert response.status_code == 404

