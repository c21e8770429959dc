"""README composition from a project description."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .logging import get_logger
from .models import ProjectDescription
from .sections.builders import DEFAULT_PIPELINE, SectionBuilder


class ReadmeGenerationError(RuntimeError):
    """Raised when a README cannot be generated for a project description."""


class InvalidInputError(ReadmeGenerationError):
    """Raised when a required project field is missing or blank."""


class Composer:
    """Runs the section pipeline in order and joins the fragments it produces."""

    def __init__(self, pipeline: Optional[Iterable[SectionBuilder]] = None) -> None:
        self.pipeline: tuple[SectionBuilder, ...] = (
            tuple(pipeline) if pipeline is not None else DEFAULT_PIPELINE
        )
        self.logger = get_logger("composer")

    def compose(self, project: Optional[ProjectDescription]) -> str:
        """Return the README markdown for ``project``.

        Raises ``InvalidInputError`` for a missing name or description and
        ``ReadmeGenerationError`` (chained to the cause) if any section fails.
        Nothing is returned on failure, so partial documents never escape.
        """
        self._validate(project)
        self.logger.info("Generating README for project: %s", project.project_name)

        fragments: List[str] = []
        for builder in self.pipeline:
            try:
                fragment = builder(project)
            except Exception as exc:
                self.logger.exception(
                    "Error generating README for project: %s", project.project_name
                )
                raise ReadmeGenerationError(f"Failed to generate README: {exc}") from exc
            if fragment:
                fragments.append(fragment)

        self.logger.debug("Rendered %d sections", len(fragments))
        self.logger.info("README generated successfully for project: %s", project.project_name)
        return "".join(fragments)

    @staticmethod
    def _validate(project: Optional[ProjectDescription]) -> None:
        if project is None:
            raise InvalidInputError("Project description cannot be None")
        if not (project.project_name or "").strip():
            raise InvalidInputError("Project name is required")
        if not (project.description or "").strip():
            raise InvalidInputError("Project description is required")


_DEFAULT_COMPOSER = Composer()


def compose(project: ProjectDescription) -> str:
    """Render ``project`` with the default section pipeline."""
    return _DEFAULT_COMPOSER.compose(project)


__all__ = ["Composer", "InvalidInputError", "ReadmeGenerationError", "compose"]
