"""Integration tests for the upload event webhook."""

import pytest

from lectorflow.config import get_settings


class TestUploadEventToken:
    """Shared-secret protection of the webhook."""

    @pytest.fixture
    def token_configured(self, monkeypatch):
        monkeypatch.setattr(get_settings(), "UPLOAD_EVENT_TOKEN", "storage-secret")

    def test_missing_token_rejected(self, client, known_identities, token_configured):
        response = client.post("/api/v1/uploads/events", json={"object_path": "uploads/alice/a.pdf", "size": 1})

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"

    def test_wrong_token_rejected(self, client, known_identities, token_configured):
        response = client.post(
            "/api/v1/uploads/events",
            json={"object_path": "uploads/alice/a.pdf", "size": 1},
            headers={"X-Upload-Token": "guess"},
        )
        assert response.status_code == 401

    def test_valid_token_accepted(self, client, known_identities, token_configured):
        response = client.post(
            "/api/v1/uploads/events",
            json={"object_path": "uploads/alice/a.pdf", "size": 1},
            headers={"X-Upload-Token": "storage-secret"},
        )
        assert response.status_code == 202
        assert response.json()["accepted"] is True


class TestUploadEventValidation:
    """Request body validation."""

    def test_negative_size_rejected(self, client):
        response = client.post("/api/v1/uploads/events", json={"object_path": "uploads/alice/a.pdf", "size": -1})
        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_missing_path_rejected(self, client):
        response = client.post("/api/v1/uploads/events", json={"size": 1})
        assert response.status_code == 422

    def test_sole_identity_upload(self, client, alice):
        response = client.post("/api/v1/uploads/events", json={"object_path": "uploads/alice/a.pdf", "size": 1})

        assert response.status_code == 202
        body = response.json()
        assert body["accepted"] is True
        assert body["reviewer_id"] is None


class TestHealth:
    """Health endpoints."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json()["database"] == "ok"

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_metrics_exposed(self, client, known_identities):
        client.post("/api/v1/uploads/events", json={"object_path": "uploads/alice/a.pdf", "size": 1})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert 'lectorflow_uploads_received_total{outcome="accepted"}' in response.text

    def test_request_id_generated_when_absent(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 36
