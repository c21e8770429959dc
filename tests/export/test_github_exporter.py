"""Tests for the GitHub README exporter."""

from __future__ import annotations

import base64
import json

import pytest

from readmegen.export.github import (
    COMMIT_MESSAGE_CREATE,
    COMMIT_MESSAGE_UPDATE,
    ExportError,
    GitHubExporter,
)

API = "https://api.github.test"
CONTENTS = f"{API}/repos/owner/repo/contents/README.md"


class RecordingTransport:
    """Fake transport replying from a ``(method, url) -> (status, body)`` table."""

    def __init__(self, responses: dict[tuple[str, str], tuple[int, object]]) -> None:
        self.responses = responses
        self.calls: list[dict[str, object]] = []

    def __call__(self, method, url, *, headers, data=None, timeout=30.0):  # type: ignore[no-untyped-def]
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers),
                "payload": json.loads(data) if data else None,
                "timeout": timeout,
            }
        )
        return self.responses.get((method, url), (500, {"message": "unexpected call"}))


def _exporter(transport: RecordingTransport, **kwargs) -> GitHubExporter:
    return GitHubExporter(api_url=API, transport=transport, **kwargs)


def test_export_creates_readme_when_missing() -> None:
    transport = RecordingTransport(
        {
            ("GET", f"{API}/user"): (200, {"login": "owner"}),
            ("GET", CONTENTS): (404, {"message": "Not Found"}),
            ("PUT", CONTENTS): (201, {"content": {"path": "README.md"}}),
        }
    )

    outcome = _exporter(transport).export("https://github.com/owner/repo", "# Hello", "tok")

    assert outcome.success is True
    assert outcome.created is True
    assert outcome.repo_path == "owner/repo"
    assert outcome.message == "README.md created successfully in owner/repo"
    put = transport.calls[-1]
    assert put["method"] == "PUT"
    assert put["payload"]["message"] == COMMIT_MESSAGE_CREATE
    assert "sha" not in put["payload"]
    assert base64.b64decode(put["payload"]["content"]).decode("utf-8") == "# Hello"
    assert put["headers"]["Authorization"] == "Bearer tok"


def test_export_updates_existing_readme() -> None:
    transport = RecordingTransport(
        {
            ("GET", f"{API}/user"): (200, {"login": "owner"}),
            ("GET", CONTENTS): (200, {"sha": "abc123", "path": "README.md"}),
            ("PUT", CONTENTS): (200, {}),
        }
    )

    outcome = _exporter(transport).export("https://github.com/owner/repo.git", "# Hi", "tok")

    assert outcome.created is False
    assert outcome.message == "README.md updated successfully in owner/repo"
    payload = transport.calls[-1]["payload"]
    assert payload["message"] == COMMIT_MESSAGE_UPDATE
    assert payload["sha"] == "abc123"


def test_export_uses_default_token_when_none_given() -> None:
    transport = RecordingTransport(
        {
            ("GET", f"{API}/user"): (200, {}),
            ("GET", CONTENTS): (404, None),
            ("PUT", CONTENTS): (201, {}),
        }
    )
    _exporter(transport, default_token="fallback").export("https://github.com/owner/repo", "x")
    assert transport.calls[0]["headers"]["Authorization"] == "Bearer fallback"


def test_export_requires_token() -> None:
    transport = RecordingTransport({})
    with pytest.raises(ExportError, match="GitHub token is required"):
        _exporter(transport).export("https://github.com/owner/repo", "x", "")
    assert transport.calls == []


@pytest.mark.parametrize(
    "url",
    ["https://github.com/owner", "https://github.com/owner/repo/tree/main", "https://github.com/"],
)
def test_export_rejects_malformed_repository(url: str) -> None:
    transport = RecordingTransport({("GET", f"{API}/user"): (200, {})})
    with pytest.raises(ExportError, match="Invalid repository URL"):
        _exporter(transport).export(url, "x", "tok")


def test_export_rejects_invalid_token() -> None:
    transport = RecordingTransport({("GET", f"{API}/user"): (401, {"message": "Bad credentials"})})
    with pytest.raises(ExportError, match="Invalid GitHub token"):
        _exporter(transport).export("https://github.com/owner/repo", "x", "bad")


def test_export_reports_inaccessible_repository() -> None:
    transport = RecordingTransport(
        {
            ("GET", f"{API}/user"): (200, {}),
            ("GET", CONTENTS): (403, {"message": "Forbidden"}),
        }
    )
    with pytest.raises(ExportError, match="Unable to access repository"):
        _exporter(transport).export("https://github.com/owner/repo", "x", "tok")


def test_export_reports_failed_write() -> None:
    transport = RecordingTransport(
        {
            ("GET", f"{API}/user"): (200, {}),
            ("GET", CONTENTS): (404, None),
            ("PUT", CONTENTS): (422, {"message": "Invalid request"}),
        }
    )
    with pytest.raises(ExportError, match="Invalid request \\(HTTP 422\\)"):
        _exporter(transport).export("https://github.com/owner/repo", "x", "tok")


def test_validate_token_success() -> None:
    transport = RecordingTransport({("GET", f"{API}/user"): (200, {"login": "me"})})
    assert _exporter(transport).validate_token("tok") is True
