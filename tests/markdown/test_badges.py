"""Tests for the shields.io badge catalog."""

from __future__ import annotations

import pytest

from readmegen.markdown import badges


def test_stars_badge_targets_repository() -> None:
    badge = badges.stars_badge("owner/repo")
    assert badge == (
        "![GitHub stars](https://img.shields.io/github/stars/owner/repo?style=for-the-badge)"
    )


def test_forks_and_issues_badges() -> None:
    assert "/github/forks/owner/repo" in badges.forks_badge("owner/repo")
    assert "/github/issues/owner/repo" in badges.issues_badge("owner/repo")


@pytest.mark.parametrize(
    "factory",
    [badges.stars_badge, badges.forks_badge, badges.issues_badge, badges.license_badge],
)
@pytest.mark.parametrize("value", [None, "", "  "])
def test_badges_return_empty_for_blank_input(factory, value) -> None:
    assert factory(value) == ""


def test_license_badge_replaces_spaces() -> None:
    badge = badges.license_badge("Apache 2.0")
    assert "license-Apache_2.0-blue" in badge
    assert badge.startswith("![License](https://img.shields.io/badge/")


def test_technology_badge_uses_catalog_color_and_logo() -> None:
    badge = badges.technology_badge("Java")
    assert badge == (
        "![Java](https://img.shields.io/badge/Java-ED8B00"
        "?style=for-the-badge&logo=java&logoColor=white)"
    )


def test_technology_badge_multiword_name() -> None:
    badge = badges.technology_badge("Spring Boot")
    assert "/badge/Spring_Boot-6DB33F" in badge
    assert "logo=springboot" in badge


def test_technology_badge_unknown_falls_back() -> None:
    badge = badges.technology_badge("My Lib.io")
    assert "My_Lib.io-0078D4" in badge
    assert "logo=mylibio" in badge


def test_technology_badge_is_exact_match() -> None:
    assert "0078D4" in badges.technology_badge("java")


def test_technology_badge_blank() -> None:
    assert badges.technology_badge("   ") == ""


def test_catalog_is_read_only() -> None:
    assert badges.lookup("Python") == badges.BadgeStyle("3776AB", "python")
    assert badges.lookup("Cobol") is None
    assert "Node.js" in badges.known_technologies()
    with pytest.raises(TypeError):
        badges._TECHNOLOGY_STYLES["Cobol"] = badges.BadgeStyle("000000", "cobol")  # type: ignore[index]


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/o/r",
        "https://github.com/o/r/",
        "https://github.com/o/r.git",
        "http://github.com/o/r",
        "https://github.com/o/r.git/",
    ],
)
def test_extract_repo_path_variants(url: str) -> None:
    assert badges.extract_repo_path(url) == "o/r"


@pytest.mark.parametrize("url", [None, "", "   "])
def test_extract_repo_path_blank(url) -> None:
    assert badges.extract_repo_path(url) == ""


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/owner/repo.git",
        "https://github.com/o/r.git.git",
        "https://github.com/o/r.git/.git",
        "https://github.com/o/r//",
        "https://github.com/https://github.com/o/r",
    ],
)
def test_extract_repo_path_is_idempotent(url: str) -> None:
    once = badges.extract_repo_path(url)
    assert badges.extract_repo_path(once) == once


def test_extract_repo_path_strips_repeated_suffixes() -> None:
    assert badges.extract_repo_path("https://github.com/o/r.git.git") == "o/r"
    assert badges.extract_repo_path("https://github.com/o/r.git/.git/") == "o/r"


def test_extract_repo_path_does_not_validate_remainder() -> None:
    assert badges.extract_repo_path("https://github.com/owner") == "owner"
    assert badges.extract_repo_path("https://github.com/o/r/tree/main") == "o/r/tree/main"
