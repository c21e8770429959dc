"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from .models import ProjectDescription

CONFIG_FILENAME = ".readmegen.yml"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
ENV_TOKEN_KEYS = ("READMEGEN_GITHUB_TOKEN", "GITHUB_TOKEN")

_DEFAULT_KEYS = (
    "author",
    "license",
    "template",
    "include_badges",
    "include_table_of_contents",
    "include_contributing",
    "include_license",
    "include_screenshots",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """Settings for publishing README files to GitHub."""

    api_url: str = DEFAULT_GITHUB_API_URL
    token: Optional[str] = None
    request_timeout: float = 30.0


@dataclass
class ServiceConfig:
    """Bind address for service mode."""

    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    defaults: Dict[str, Any] = field(default_factory=dict)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)

    def apply_defaults(self, project_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return ``project_data`` with configured defaults filled in underneath."""
        merged = dict(self.defaults)
        merged.update({key: value for key, value in project_data.items() if value is not None})
        return merged


def load_config(config_path: Path) -> ReadmeGenConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmeGenConfig(root=root, github=GitHubConfig(token=_env_token()))

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults_data = _as_dict(data.get("defaults"))
    defaults = {key: defaults_data[key] for key in _DEFAULT_KEYS if defaults_data.get(key) is not None}

    github_data = _as_dict(data.get("github"))
    github = GitHubConfig(
        api_url=(_as_str(github_data.get("api_url")) or DEFAULT_GITHUB_API_URL).rstrip("/"),
        token=_as_str(github_data.get("token")) or _env_token(),
        request_timeout=_as_float(github_data.get("request_timeout")) or 30.0,
    )

    service_data = _as_dict(data.get("service"))
    service = ServiceConfig(
        host=_as_str(service_data.get("host")) or "0.0.0.0",
        port=_as_int(service_data.get("port")) or 8000,
    )

    return ReadmeGenConfig(root=root, defaults=defaults, github=github, service=service)


def load_project(project_path: Path, config: Optional[ReadmeGenConfig] = None) -> ProjectDescription:
    """Read a YAML project description file, layering config defaults underneath."""
    path = project_path.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {path}")
    data = _read_config(path)
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    if config is not None:
        data = config.apply_defaults(data)
    try:
        return ProjectDescription.from_mapping(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid project file {path.name}: {exc}") from exc


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _env_token(keys: Sequence[str] = ENV_TOKEN_KEYS) -> Optional[str]:
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        text = str(value).strip()
        return text or None
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GitHubConfig",
    "ReadmeGenConfig",
    "ServiceConfig",
    "load_config",
    "load_project",
]
