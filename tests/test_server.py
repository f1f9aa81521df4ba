"""Tests for the render API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client() -> TestClient:
    """Test client for the API."""
    return TestClient(app)


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_renders_payload(self, client: TestClient, sample_payload: str) -> None:
        """A JSON payload is rendered into instructions."""
        response = client.post("/api/render", json={"json_payload": sample_payload})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 7
        assert [item["kind"] for item in body["instructions"]] == [
            "textBlock",
            "textBlock",
            "spacer",
            "listRow",
            "listRow",
        ]
        assert body["instructions"][0]["style"]["name"] == "heading-1"
        assert body["outline"].startswith("[heading-1] Course overview")

    def test_malformed_payload_is_not_http_error(self, client: TestClient) -> None:
        """Malformed JSON yields a single error instruction with status 200."""
        response = client.post("/api/render", json={"json_payload": "{not json"})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["instructions"][0]["style"]["name"] == "error"
        assert body["instructions"][0]["spans"][0]["text"] == "Failed to render content"

    def test_empty_request_gives_placeholder(self, client: TestClient) -> None:
        """Without any content the placeholder is returned."""
        response = client.post("/api/render", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["outline"] == "[placeholder] No content available"

    def test_plain_text_fallback(self, client: TestClient) -> None:
        """The fallback text is returned verbatim."""
        response = client.post("/api/render", json={"plain_text_fallback": "Hello there"})

        body = response.json()
        assert body["instructions"][0]["scrollable"] is True
        assert body["instructions"][0]["spans"][0]["text"] == "Hello there"

    def test_validate_colors_override(self, client: TestClient) -> None:
        """Requests can enable color validation."""
        payload = (
            '{"type": "paragraph", "content": [{"type": "text", "text": "x", '
            '"marks": [{"type": "textStyle", "attrs": {"color": "url(x)"}}]}]}'
        )

        response = client.post(
            "/api/render", json={"json_payload": payload, "validate_colors": True}
        )

        assert response.json()["instructions"][0]["spans"][0]["color"] == "primary"


def test_health(client: TestClient) -> None:
    """The health endpoint responds."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
