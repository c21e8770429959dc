"""Publish generated README files to GitHub repositories."""

from __future__ import annotations

import base64
import json
from typing import Any, Callable, Mapping, Optional, Tuple
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..config import DEFAULT_GITHUB_API_URL
from ..logging import get_logger
from ..markdown.badges import extract_repo_path
from ..models import ExportOutcome

README_FILENAME = "README.md"
COMMIT_MESSAGE_CREATE = "Create README.md via README Generator"
COMMIT_MESSAGE_UPDATE = "Update README.md via README Generator"

Transport = Callable[..., Tuple[int, Any]]


class ExportError(RuntimeError):
    """Raised when a README cannot be published to the remote repository."""


class GitHubExporter:
    """Creates or updates ``README.md`` at a repository root via the contents API."""

    def __init__(
        self,
        *,
        api_url: str = DEFAULT_GITHUB_API_URL,
        default_token: Optional[str] = None,
        request_timeout: float = 30.0,
        transport: Transport | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.default_token = default_token
        self.request_timeout = request_timeout
        self._transport = transport or self._default_transport
        self.logger = get_logger("export.github")

    def export(
        self, repository_url: str, content: str, token: Optional[str] = None
    ) -> ExportOutcome:
        """Write ``content`` to README.md, updating the file when it already exists."""
        self.logger.info("Attempting to export README to repository: %s", repository_url)
        auth_token = self._determine_token(token)
        self.validate_token(auth_token)

        repo_path = extract_repo_path(repository_url)
        self._validate_repo_path(repo_path)

        existing_sha = self._existing_readme_sha(repo_path, auth_token)
        payload: dict[str, Any] = {
            "message": COMMIT_MESSAGE_UPDATE if existing_sha else COMMIT_MESSAGE_CREATE,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if existing_sha:
            self.logger.info("Updating existing %s", README_FILENAME)
            payload["sha"] = existing_sha
        else:
            self.logger.info("Creating new %s", README_FILENAME)

        status, body = self._request("PUT", self._contents_url(repo_path), auth_token, payload)
        if status >= 400:
            raise ExportError(
                f"Failed to export to GitHub: {self._error_detail(status, body)}"
            )

        created = existing_sha is None
        message = (
            f"{README_FILENAME} {'created' if created else 'updated'} successfully in {repo_path}"
        )
        self.logger.info(message)
        return ExportOutcome(success=True, message=message, repo_path=repo_path, created=created)

    def validate_token(self, token: Optional[str]) -> bool:
        """Return True when GitHub accepts ``token``; raise ``ExportError`` otherwise."""
        if token is None or not token.strip():
            raise ExportError("GitHub token is required")
        status, body = self._request("GET", f"{self.api_url}/user", token)
        if status in (401, 403):
            raise ExportError("Invalid GitHub token")
        if status >= 400:
            raise ExportError(f"Token validation failed: {self._error_detail(status, body)}")
        self.logger.debug("GitHub token validated successfully")
        return True

    # ------------------------------------------------------------------
    # Helpers

    def _determine_token(self, token: Optional[str]) -> Optional[str]:
        if token and token.strip():
            return token
        return self.default_token

    @staticmethod
    def _validate_repo_path(repo_path: str) -> None:
        if not repo_path:
            raise ExportError("Invalid repository URL")
        parts = repo_path.split("/")
        if len(parts) != 2 or not all(parts):
            raise ExportError("Invalid repository URL format. Expected: github.com/owner/repo")

    def _contents_url(self, repo_path: str) -> str:
        return f"{self.api_url}/repos/{quote(repo_path)}/contents/{README_FILENAME}"

    def _existing_readme_sha(self, repo_path: str, token: str) -> Optional[str]:
        status, body = self._request("GET", self._contents_url(repo_path), token)
        if status == 404:
            self.logger.debug("No existing %s found in %s", README_FILENAME, repo_path)
            return None
        if status >= 400:
            raise ExportError(
                "Unable to access repository. Check that the repository exists "
                "and your token has the required permissions."
            )
        if isinstance(body, Mapping):
            sha = body.get("sha")
            if isinstance(sha, str) and sha:
                return sha
        return None

    def _request(
        self,
        method: str,
        url: str,
        token: str,
        payload: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[int, Any]:
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "User-Agent": "readmegen",
        }
        data = None
        if payload is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(payload).encode("utf-8")
        return self._transport(
            method, url, headers=headers, data=data, timeout=self.request_timeout
        )

    @staticmethod
    def _error_detail(status: int, body: Any) -> str:
        if isinstance(body, Mapping):
            message = body.get("message")
            if isinstance(message, str) and message:
                return f"{message} (HTTP {status})"
        return f"HTTP {status}"

    @staticmethod
    def _default_transport(
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        data: Optional[bytes] = None,
        timeout: float = 30.0,
    ) -> Tuple[int, Any]:
        http_request = Request(url, data=data, headers=dict(headers), method=method)
        try:
            with urlopen(http_request, timeout=timeout) as response:  # type: ignore[arg-type]
                status = response.status
                raw = response.read()
        except HTTPError as exc:
            status = exc.code
            raw = exc.read() if hasattr(exc, "read") else b""
        except URLError as exc:  # pragma: no cover - depends on network
            raise ExportError(f"Failed to export to GitHub: {exc.reason}") from exc

        if not raw:
            return status, None
        try:
            return status, json.loads(raw.decode("utf-8"))
        except json.JSONDecodeError:
            return status, None


__all__ = [
    "COMMIT_MESSAGE_CREATE",
    "COMMIT_MESSAGE_UPDATE",
    "ExportError",
    "GitHubExporter",
    "README_FILENAME",
]
