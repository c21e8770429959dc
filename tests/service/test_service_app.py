"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from readmegen.composer import Composer, ReadmeGenerationError
from readmegen.export.github import ExportError
from readmegen.models import ExportOutcome, ProjectDescription
from readmegen.service import create_app


class _StubExporter:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.export_calls: list[dict[str, object]] = []

    def export(self, repository_url: str, content: str, token: str | None = None) -> ExportOutcome:
        self.export_calls.append(
            {"repository_url": repository_url, "content": content, "token": token}
        )
        if self.fail:
            raise ExportError("Invalid GitHub token")
        return ExportOutcome(
            success=True,
            message="README.md created successfully in owner/repo",
            repo_path="owner/repo",
            created=True,
        )

    def validate_token(self, token: str) -> bool:
        if token != "good":
            raise ExportError("Invalid GitHub token")
        return True


class _FailingComposer(Composer):
    def compose(self, project: ProjectDescription | None) -> str:
        raise ReadmeGenerationError("Failed to generate README: boom")


@pytest.fixture
def exporter() -> _StubExporter:
    return _StubExporter()


@pytest.fixture
def client(exporter: _StubExporter) -> TestClient:
    app = create_app(exporter_factory=lambda: exporter)
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_endpoint_returns_markdown(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        json={
            "projectName": "Test Project",
            "description": "This is a test project",
            "templateType": "API",
            "technologies": ["Python"],
            "repositoryUrl": "https://github.com/owner/repo",
            "includeTableOfContents": True,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "success"
    assert "error" not in data
    markdown = data["markdown"]
    assert "# Test Project" in markdown
    assert "## Authentication" in markdown
    assert "img.shields.io/github/stars/owner/repo" in markdown
    assert "- [Tech Stack](#tech-stack)" in markdown


def test_generate_endpoint_accepts_snake_case(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        json={"project_name": "Snake", "description": "Snake case body works"},
    )
    assert response.status_code == 200
    assert "# Snake" in response.json()["markdown"]


def test_generate_endpoint_reports_field_errors(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        json={
            "projectName": "",
            "description": "short",
            "repositoryUrl": "https://gitlab.com/owner/repo",
        },
    )
    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "error"
    assert {"projectName", "description", "repositoryUrl"} <= set(data["errors"])


def test_generate_endpoint_maps_generation_failure(exporter: _StubExporter) -> None:
    app = create_app(_FailingComposer, exporter_factory=lambda: exporter)
    response = TestClient(app).post(
        "/api/generate",
        json={"projectName": "Test", "description": "A valid description"},
    )
    assert response.status_code == 400
    assert response.json() == {"status": "error", "error": "Failed to generate README: boom"}


def test_export_endpoint_success(client: TestClient, exporter: _StubExporter) -> None:
    response = client.post(
        "/api/export",
        json={
            "repositoryUrl": "https://github.com/owner/repo",
            "readmeContent": "# Hello",
            "githubToken": "good",
        },
    )
    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "message": "README.md created successfully in owner/repo",
    }
    assert exporter.export_calls[0]["content"] == "# Hello"


def test_export_endpoint_failure() -> None:
    failing = _StubExporter(fail=True)
    client = TestClient(create_app(exporter_factory=lambda: failing))
    response = client.post(
        "/api/export",
        json={
            "repositoryUrl": "https://github.com/owner/repo",
            "readmeContent": "# Hello",
            "githubToken": "bad",
        },
    )
    assert response.status_code == 500
    assert response.json() == {"status": "error", "error": "Invalid GitHub token"}


def test_validate_token_endpoint(client: TestClient) -> None:
    assert client.get("/api/validate-token", params={"token": "good"}).json() == {"valid": True}
    assert client.get("/api/validate-token", params={"token": "bad"}).json() == {"valid": False}


def test_templates_endpoint(client: TestClient) -> None:
    data = client.get("/api/templates").json()
    assert data["types"] == ["API", "LIBRARY", "FRONTEND", "CLI", "FULLSTACK"]
    assert data["sections"]["LIBRARY"] == ["Quick Start", "API Reference", "Examples"]
    assert "MIT" in data["licenses"]
    assert "Python" in data["technologies"]
