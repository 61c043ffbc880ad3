"""Integration tests for lectures API."""
import pytest

from app.core.identifiers import new_id


def _create(client, **overrides):
    payload = {
        "topic": "Consensus protocols",
        "start_time": "2025-01-01T10:00:00.000Z",
        "duration": 90,
        "organizer_id": new_id(),
        "speaker_id": "",
        "status": 0,
    }
    payload.update(overrides)
    return client.post("/api/v1/lectures", json=payload)


@pytest.mark.integration
class TestLectureCreation:
    """Test lecture creation endpoint."""

    def test_create_lecture(self, client):
        response = _create(client)

        assert response.status_code == 201
        data = response.json()
        assert data["start_time"] == 1735725600000
        assert data["speaker_id"] is None
        assert 100000 <= data["lecturecode"] <= 999999

    def test_create_lecture_sanitizes_topic(self, client):
        response = _create(client, topic="<b>Graphs</b>")

        assert response.json()["topic"] == "Graphs"

    def test_invalid_start_time(self, client):
        response = _create(client, start_time="soon")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid start_time"

    def test_invalid_speaker(self, client):
        response = _create(client, speaker_id="abc")

        assert response.status_code == 400

    def test_code_exhaustion_is_503(self, client, monkeypatch):
        monkeypatch.setattr("app.services.lectures.make_lecture_code", lambda: 424242)
        _create(client)

        response = _create(client)

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "code_allocation_exhausted"


@pytest.mark.integration
class TestLectureQueries:
    """Test lecture lookup endpoints."""

    def test_lookups(self, client):
        organizer_id, speaker_id = new_id(), new_id()
        lecture = _create(client, organizer_id=organizer_id, speaker_id=speaker_id).json()
        _create(client)

        assert client.get(f"/api/v1/lectures/{lecture['id']}").json() == lecture
        assert client.get(f"/api/v1/lectures/by-code/{lecture['lecturecode']}").json() == lecture
        assert client.get(f"/api/v1/lectures/by-organizer/{organizer_id}").json() == [lecture]
        assert client.get(f"/api/v1/lectures/by-speaker/{speaker_id}").json() == [lecture]
        assert len(client.get("/api/v1/lectures").json()) == 2

    def test_unknown_lecture(self, client):
        response = client.get(f"/api/v1/lectures/{new_id()}")

        assert response.status_code == 404


@pytest.mark.integration
class TestLectureChanges:
    """Test update and delete endpoints."""

    def test_partial_update(self, client):
        lecture = _create(client).json()

        response = client.put(
            f"/api/v1/lectures/{lecture['id']}",
            json={"duration": 30, "start_time": 1735689600000}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["duration"] == 30
        assert data["start_time"] == 1735689600000
        assert data["topic"] == lecture["topic"]

    def test_empty_update_rejected(self, client):
        lecture = _create(client).json()

        response = client.put(f"/api/v1/lectures/{lecture['id']}", json={})

        assert response.status_code == 400

    def test_delete_keeps_invitations(self, client):
        lecture = _create(client).json()
        invitation = client.post(
            "/api/v1/invitations",
            json={"lecture_id": lecture["id"], "speaker_id": new_id()}
        ).json()

        response = client.delete(f"/api/v1/lectures/{lecture['id']}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get(f"/api/v1/lectures/{lecture['id']}").status_code == 404
        assert client.get(f"/api/v1/invitations/{invitation['id']}").status_code == 200
