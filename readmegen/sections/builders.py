"""Section builders composed, in order, into a README.

Each builder takes the project description and returns a markdown fragment,
or ``None`` when the section does not apply to that project.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ..markdown import badges
from ..markdown.formatting import (
    bold,
    centered_block,
    code_block,
    header,
    horizontal_rule,
    image,
    link,
    toc_link,
    unordered_list,
    unordered_list_from_text,
)
from ..models import ProjectDescription
from .constants import (
    DEFAULT_LICENSE,
    PLACEHOLDER_BODY,
    SCREENSHOT_PLACEHOLDER_URL,
    TOC_SECTIONS,
    sections_for,
)

SectionBuilder = Callable[[ProjectDescription], Optional[str]]

CONTRIBUTING_BODY = (
    "Contributions are always welcome!\n\n"
    "1. Fork the project\n"
    "2. Create your feature branch (`git checkout -b feature/AmazingFeature`)\n"
    "3. Commit your changes (`git commit -m 'Add some AmazingFeature'`)\n"
    "4. Push to the branch (`git push origin feature/AmazingFeature`)\n"
    "5. Open a Pull Request\n\n"
)


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def _technologies(project: ProjectDescription) -> List[str]:
    return [tech for tech in project.technologies if _present(tech)]


def content_sections(project: ProjectDescription) -> Dict[str, bool]:
    """Return which linkable sections the project will render, keyed by title."""
    return {
        "About": True,
        "Screenshots": project.include_screenshots,
        "Features": _present(project.features),
        "Tech Stack": bool(_technologies(project)),
        "Installation": _present(project.installation),
        "Usage": _present(project.usage),
        "Contributing": project.include_contributing,
        "License": project.include_license,
    }


def build_header(project: ProjectDescription) -> str:
    fragment = centered_block(header(1, project.project_name))
    if _present(project.tagline):
        fragment += centered_block(f"### {project.tagline}\n")
    return fragment


def build_badges(project: ProjectDescription) -> Optional[str]:
    """Stars/forks/issues, license, then one badge per technology, centered."""
    if not project.include_badges:
        return None

    lines: List[str] = []
    repo_path = badges.extract_repo_path(project.repository_url)
    if repo_path:
        lines.append(badges.stars_badge(repo_path))
        lines.append(badges.forks_badge(repo_path))
        lines.append(badges.issues_badge(repo_path))
    if _present(project.license):
        lines.append(badges.license_badge(project.license))
    for tech in _technologies(project):
        lines.append(badges.technology_badge(tech))

    if not lines:
        return None
    body = "".join(f"{line}\n" for line in lines)
    return f'<div align="center">\n\n{body}\n</div>\n\n'


def build_table_of_contents(project: ProjectDescription) -> Optional[str]:
    if not project.include_table_of_contents:
        return None
    included = content_sections(project)
    entries = "".join(f"{toc_link(title)}\n" for title in TOC_SECTIONS if included[title])
    return header(2, "Table of Contents") + entries + "\n"


def build_about(project: ProjectDescription) -> str:
    fragment = header(2, "About") + f"{project.description}\n\n"
    if _present(project.demo_url):
        fragment += bold(link("Live Demo", project.demo_url)) + "\n\n"
    return fragment


def build_screenshots(project: ProjectDescription) -> Optional[str]:
    if not project.include_screenshots:
        return None
    return (
        header(2, "Screenshots")
        + image("App Screenshot", SCREENSHOT_PLACEHOLDER_URL)
        + "\n\n"
    )


def build_features(project: ProjectDescription) -> Optional[str]:
    if not _present(project.features):
        return None
    return header(2, "Features") + unordered_list_from_text(project.features)


def build_tech_stack(project: ProjectDescription) -> Optional[str]:
    technologies = _technologies(project)
    if not technologies:
        return None
    return header(2, "Tech Stack") + unordered_list([bold(tech) for tech in technologies])


def build_installation(project: ProjectDescription) -> Optional[str]:
    if not _present(project.installation):
        return None
    return header(2, "Installation") + code_block(project.installation, "bash")


def build_usage(project: ProjectDescription) -> Optional[str]:
    if not _present(project.usage):
        return None
    return header(2, "Usage") + code_block(project.usage, "bash")


def build_template_sections(project: ProjectDescription) -> Optional[str]:
    """Placeholder headings for the project's template variant.

    A title is skipped only when it is literally "Installation", "Usage" or
    "Features" and the matching field already produced real content.
    """
    titles = sections_for(project.template_type)
    if not titles:
        return None
    already_rendered = {
        "Installation": _present(project.installation),
        "Usage": _present(project.usage),
        "Features": _present(project.features),
    }
    fragments = [
        header(2, title) + f"{PLACEHOLDER_BODY}\n\n"
        for title in titles
        if not already_rendered.get(title, False)
    ]
    return "".join(fragments) or None


def build_contributing(project: ProjectDescription) -> Optional[str]:
    if not project.include_contributing:
        return None
    return header(2, "Contributing") + CONTRIBUTING_BODY


def build_license(project: ProjectDescription) -> Optional[str]:
    if not project.include_license:
        return None
    license_name = project.license if _present(project.license) else DEFAULT_LICENSE
    return (
        header(2, "License")
        + f"This project is licensed under the {license_name} License"
        + " - see the [LICENSE](LICENSE) file for details.\n\n"
    )


def build_footer(project: ProjectDescription) -> Optional[str]:
    lines: List[str] = []
    if _present(project.author):
        lines.append(f"Made by {bold(project.author)}\n\n")
    if _present(project.repository_url):
        lines.append("Star this repo if you find it useful!\n\n")
    if not lines:
        return None
    return horizontal_rule() + '<div align="center">\n\n' + "".join(lines) + "</div>\n"


DEFAULT_PIPELINE: tuple[SectionBuilder, ...] = (
    build_header,
    build_badges,
    build_table_of_contents,
    build_about,
    build_screenshots,
    build_features,
    build_tech_stack,
    build_installation,
    build_usage,
    build_template_sections,
    build_contributing,
    build_license,
    build_footer,
)


__all__ = [
    "CONTRIBUTING_BODY",
    "DEFAULT_PIPELINE",
    "SectionBuilder",
    "build_about",
    "build_badges",
    "build_contributing",
    "build_features",
    "build_footer",
    "build_header",
    "build_installation",
    "build_license",
    "build_screenshots",
    "build_table_of_contents",
    "build_tech_stack",
    "build_template_sections",
    "build_usage",
    "content_sections",
]
