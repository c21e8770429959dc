"""README section builders and the template section catalog."""

from .builders import DEFAULT_PIPELINE, SectionBuilder
from .constants import TEMPLATE_SECTIONS, sections_for

__all__ = ["DEFAULT_PIPELINE", "SectionBuilder", "TEMPLATE_SECTIONS", "sections_for"]
