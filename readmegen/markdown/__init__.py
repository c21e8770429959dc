"""Markdown fragments and shields.io badges."""

from .badges import BadgeStyle, extract_repo_path
from .formatting import FormattingArgumentError

__all__ = ["BadgeStyle", "FormattingArgumentError", "extract_repo_path"]
