"""README composition from structured project descriptions."""

from .composer import Composer, InvalidInputError, ReadmeGenerationError, compose
from .models import ProjectDescription, TemplateType

__all__ = [
    "Composer",
    "InvalidInputError",
    "ProjectDescription",
    "ReadmeGenerationError",
    "TemplateType",
    "compose",
]
