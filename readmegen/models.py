"""Core data models shared across readmegen components."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class TemplateType(str, Enum):
    """Project kinds that contribute their own placeholder sections."""

    API = "API"
    LIBRARY = "LIBRARY"
    FRONTEND = "FRONTEND"
    CLI = "CLI"
    FULLSTACK = "FULLSTACK"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: "TemplateType | str | None") -> Optional["TemplateType"]:
        """Return the member named by ``value`` (case-insensitive), or None when blank."""
        if value is None or isinstance(value, cls):
            return value
        cleaned = str(value).strip()
        if not cleaned:
            return None
        try:
            return cls(cleaned.upper())
        except ValueError:
            raise ValueError(f"Unknown template type: {value}") from None


_DISPLAY_NAMES = {
    TemplateType.API: "API",
    TemplateType.LIBRARY: "Library",
    TemplateType.FRONTEND: "Frontend",
    TemplateType.CLI: "CLI",
    TemplateType.FULLSTACK: "Fullstack",
}


@dataclass(frozen=True)
class ProjectDescription:
    """Everything the composer needs to render one README.

    Only ``project_name`` and ``description`` are required. Every other field
    may be left at its default, in which case the matching section is omitted.
    """

    project_name: str
    description: str
    tagline: Optional[str] = None
    template_type: Optional[TemplateType] = None
    technologies: Tuple[str, ...] = ()
    features: Optional[str] = None
    installation: Optional[str] = None
    usage: Optional[str] = None
    license: Optional[str] = None
    author: Optional[str] = None
    repository_url: Optional[str] = None
    demo_url: Optional[str] = None
    include_badges: bool = True
    include_table_of_contents: bool = False
    include_contributing: bool = True
    include_license: bool = True
    include_screenshots: bool = False

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the value hashable and immutable.
        object.__setattr__(self, "technologies", tuple(self.technologies or ()))
        object.__setattr__(self, "template_type", TemplateType.parse(self.template_type))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProjectDescription":
        """Build a description from a YAML/JSON mapping with snake_case or camelCase keys."""
        known = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for raw_key, raw_value in data.items():
            key = _normalise_key(str(raw_key))
            if key == "template":
                key = "template_type"
            if key not in known:
                continue
            if key == "technologies":
                values[key] = _as_str_tuple(raw_value)
            elif key.startswith("include_"):
                flag = _as_bool(raw_value)
                if flag is not None:
                    values[key] = flag
            else:
                text = _as_optional_str(raw_value)
                if text is not None:
                    values[key] = text
        return cls(
            project_name=values.pop("project_name", ""),
            description=values.pop("description", ""),
            **values,
        )


def _normalise_key(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key.strip()).lower().replace("-", "_")


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _as_str_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(str(item) for item in value if item is not None)
    if isinstance(value, Mapping):
        raise ValueError("technologies must be a list or a comma-separated string")
    return (str(value),)


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


@dataclass
class ExportOutcome:
    """Result of publishing a README to a remote repository."""

    success: bool
    message: str
    repo_path: str = ""
    created: bool = False


__all__ = ["ExportOutcome", "ProjectDescription", "TemplateType"]
