from __future__ import annotations

import pytest

from readmegen.models import ProjectDescription


@pytest.fixture
def bare_project() -> ProjectDescription:
    """Required fields only, with every optional section switched off."""
    return ProjectDescription(
        project_name="Test Project",
        description="This is a test project",
        include_badges=False,
        include_contributing=False,
        include_license=False,
    )


@pytest.fixture
def full_project() -> ProjectDescription:
    """A description that exercises every section."""
    return ProjectDescription(
        project_name="Complete Project",
        tagline="A comprehensive test",
        description="Full description",
        template_type="FULLSTACK",
        technologies=["Java", "React"],
        features="Feature 1\nFeature 2",
        installation="npm install",
        usage="npm start",
        license="MIT",
        author="Test Author",
        repository_url="https://github.com/user/repo",
        demo_url="https://demo.com",
        include_table_of_contents=True,
        include_screenshots=True,
    )
