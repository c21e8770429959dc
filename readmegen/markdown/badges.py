"""Shields.io badge catalog for generated README files."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

SHIELDS_IO_BASE = "https://img.shields.io"
BADGE_STYLE = "for-the-badge"
DEFAULT_COLOR = "0078D4"
LICENSE_COLOR = "blue"

_GITHUB_PREFIXES = ("https://github.com/", "http://github.com/")


class BadgeStyle(NamedTuple):
    """Display color (hex, no ``#``) and simple-icons logo slug for a technology."""

    color: str
    logo: str


_TECHNOLOGY_STYLES: Mapping[str, BadgeStyle] = MappingProxyType(
    {
        "Java": BadgeStyle("ED8B00", "java"),
        "Spring": BadgeStyle("6DB33F", "spring"),
        "Spring Boot": BadgeStyle("6DB33F", "springboot"),
        "JavaScript": BadgeStyle("F7DF1E", "javascript"),
        "TypeScript": BadgeStyle("3178C6", "typescript"),
        "React": BadgeStyle("61DAFB", "react"),
        "Vue": BadgeStyle("4FC08D", "vuedotjs"),
        "Angular": BadgeStyle("DD0031", "angular"),
        "Python": BadgeStyle("3776AB", "python"),
        "Node.js": BadgeStyle("339933", "nodedotjs"),
        "Go": BadgeStyle("00ADD8", "go"),
        "Rust": BadgeStyle("000000", "rust"),
        "PHP": BadgeStyle("777BB4", "php"),
        "Ruby": BadgeStyle("CC342D", "ruby"),
        "C#": BadgeStyle("239120", "csharp"),
        ".NET": BadgeStyle("512BD4", "dotnet"),
    }
)

SUGGESTED_TECHNOLOGIES: tuple[str, ...] = (
    "Java",
    "Spring Boot",
    "JavaScript",
    "React",
    "Vue",
    "Angular",
    "Python",
    "Django",
    "Flask",
    "Node.js",
    "Express",
    "TypeScript",
    "Go",
    "Rust",
    "PHP",
    "Laravel",
    "Ruby",
    "Rails",
    "C#",
    ".NET",
)

SUPPORTED_LICENSES: tuple[str, ...] = ("MIT", "Apache-2.0", "GPL-3.0", "BSD-3-Clause", "ISC")


def lookup(technology: str) -> Optional[BadgeStyle]:
    """Return the catalog entry for an exact technology name, if any."""
    return _TECHNOLOGY_STYLES.get(technology)


def known_technologies() -> tuple[str, ...]:
    return tuple(_TECHNOLOGY_STYLES)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _label(text: str) -> str:
    return text.replace(" ", "_")


def _github_badge(kind: str, alt_text: str, repo_path: Optional[str]) -> str:
    if _is_blank(repo_path):
        return ""
    return f"![{alt_text}]({SHIELDS_IO_BASE}/github/{kind}/{repo_path}?style={BADGE_STYLE})"


def stars_badge(repo_path: Optional[str]) -> str:
    return _github_badge("stars", "GitHub stars", repo_path)


def forks_badge(repo_path: Optional[str]) -> str:
    return _github_badge("forks", "GitHub forks", repo_path)


def issues_badge(repo_path: Optional[str]) -> str:
    return _github_badge("issues", "GitHub issues", repo_path)


def license_badge(license_name: Optional[str]) -> str:
    if _is_blank(license_name):
        return ""
    return (
        f"![License]({SHIELDS_IO_BASE}/badge/license-{_label(license_name)}-{LICENSE_COLOR}"
        f"?style={BADGE_STYLE})"
    )


def technology_badge(technology: Optional[str]) -> str:
    """Return a colored technology badge, deriving a logo slug for unknown names."""
    if _is_blank(technology):
        return ""
    style = lookup(technology)
    if style is None:
        logo = technology.lower().replace(" ", "").replace(".", "")
        style = BadgeStyle(DEFAULT_COLOR, logo)
    return (
        f"![{technology}]({SHIELDS_IO_BASE}/badge/{_label(technology)}-{style.color}"
        f"?style={BADGE_STYLE}&logo={style.logo}&logoColor=white)"
    )


def extract_repo_path(url: Optional[str]) -> str:
    """Return the ``owner/repo`` part of a GitHub URL.

    Scheme/host prefixes, trailing ``.git`` suffixes and trailing slashes are
    removed until none remain, so feeding the result back in returns it
    unchanged. The remainder is returned as-is for the caller to validate.
    """
    if _is_blank(url):
        return ""
    cleaned = url
    while cleaned.startswith(_GITHUB_PREFIXES):
        for prefix in _GITHUB_PREFIXES:
            if cleaned.startswith(prefix):
                cleaned = cleaned[len(prefix):]
                break
    while cleaned.endswith((".git", "/")):
        cleaned = cleaned[: -len(".git")] if cleaned.endswith(".git") else cleaned[:-1]
    return cleaned


__all__ = [
    "BADGE_STYLE",
    "BadgeStyle",
    "DEFAULT_COLOR",
    "SHIELDS_IO_BASE",
    "SUGGESTED_TECHNOLOGIES",
    "SUPPORTED_LICENSES",
    "extract_repo_path",
    "forks_badge",
    "issues_badge",
    "known_technologies",
    "license_badge",
    "lookup",
    "stars_badge",
    "technology_badge",
]
