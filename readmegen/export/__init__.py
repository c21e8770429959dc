"""Publishing collaborators for generated README files."""

from .github import ExportError, GitHubExporter

__all__ = ["ExportError", "GitHubExporter"]
