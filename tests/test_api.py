"""Tests for the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from conftest import REPO_PATH, gemini_success, repo_payload
from readmegen.agents.orchestrator import ReadmePipeline
from readmegen.services.readme_generator import ReadmeGenerator
from readmegen.ui.fastapi_app import app, get_pipeline


@pytest.fixture
def client_for(make_github, make_gemini):
    """TestClient whose pipeline talks to in-memory GitHub and Gemini."""
    def _make(github_routes, gemini_route=(200, gemini_success("\n# Hello-World\n"))):
        github, _ = make_github(github_routes)
        gemini, gemini_transport = make_gemini(gemini_route)
        app.dependency_overrides[get_pipeline] = lambda: ReadmePipeline(github, ReadmeGenerator(gemini))
        return TestClient(app), gemini_transport
    yield _make
    app.dependency_overrides.clear()


def test_health_endpoint():
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_templates_endpoint():
    response = TestClient(app).get("/templates")
    assert response.status_code == 200
    templates = response.json()
    assert [t["id"] for t in templates] == [
        "comprehensive", "startup", "open_source", "library",
        "portfolio", "academic", "enterprise", "minimalist",
    ]
    assert templates[3]["icon"] == "📦"


class TestReadmeEndpoint:
    """Tests for POST /readme."""

    def test_generates_readme(self, client_for):
        client, _ = client_for({REPO_PATH: (200, repo_payload())})

        response = client.post("/readme", json={"repo_url": "https://github.com/octocat/Hello-World"})

        assert response.status_code == 200
        data = response.json()
        assert data["readme"] == "\n# Hello-World\n"
        assert data["template"] == "comprehensive"
        assert data["detected_template"] == "comprehensive"
        assert data["repository"]["stargazers_count"] == 1500

    def test_template_override(self, client_for):
        client, _ = client_for({REPO_PATH: (200, repo_payload())})

        response = client.post(
            "/readme",
            json={"username": "octocat", "repo": "Hello-World", "template": "enterprise"}
        )

        assert response.status_code == 200
        assert response.json()["template"] == "enterprise"

    def test_invalid_url_is_bad_request(self, client_for):
        client, gemini_transport = client_for({})

        response = client.post("/readme", json={"repo_url": "not-a-url"})

        assert response.status_code == 400
        assert "Invalid GitHub URL format" in response.json()["detail"]
        assert gemini_transport.requests == []

    def test_unknown_template_is_bad_request(self, client_for):
        client, _ = client_for({REPO_PATH: (200, repo_payload())})

        response = client.post("/readme", json={"username": "octocat", "repo": "Hello-World", "template": "wiki"})

        assert response.status_code == 400

    def test_missing_repository_is_not_found(self, client_for):
        client, _ = client_for({})

        response = client.post("/readme", json={"username": "octocat", "repo": "nope"})

        assert response.status_code == 404
        assert "404 Not Found" in response.json()["detail"]

    def test_generation_failure_is_bad_gateway(self, client_for):
        client, _ = client_for(
            {REPO_PATH: (200, repo_payload())},
            (400, {"error": {"message": "API key not valid"}})
        )

        response = client.post("/readme", json={"username": "octocat", "repo": "Hello-World"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to generate README: API key not valid"


def test_download_returns_markdown_attachment(client_for):
    client, _ = client_for({REPO_PATH: (200, repo_payload())})

    response = client.post("/readme/download", json={"username": "octocat", "repo": "Hello-World"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert response.headers["content-disposition"] == 'attachment; filename="README.md"'
    assert response.text == "# Hello-World"
