"""Shared constants for README sections and template variants."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..models import TemplateType

TEMPLATE_SECTIONS: Mapping[TemplateType, tuple[str, ...]] = MappingProxyType(
    {
        TemplateType.API: ("Authentication", "Endpoints", "Examples", "Rate Limiting"),
        TemplateType.LIBRARY: ("Quick Start", "API Reference", "Examples"),
        TemplateType.FRONTEND: ("Demo", "Features", "Customization"),
        TemplateType.CLI: ("Commands", "Options", "Configuration"),
        TemplateType.FULLSTACK: ("Tech Stack", "Architecture", "Deployment"),
    }
)

TOC_SECTIONS: tuple[str, ...] = (
    "About",
    "Screenshots",
    "Features",
    "Tech Stack",
    "Installation",
    "Usage",
    "Contributing",
    "License",
)

PLACEHOLDER_BODY = "*Documentation coming soon...*"
DEFAULT_LICENSE = "MIT"
SCREENSHOT_PLACEHOLDER_URL = "https://via.placeholder.com/800x400?text=Add+Your+Screenshot+Here"


def sections_for(template_type: Optional[TemplateType]) -> tuple[str, ...]:
    """Return the placeholder section titles contributed by ``template_type``."""
    if template_type is None:
        return ()
    return TEMPLATE_SECTIONS.get(template_type, ())


__all__ = [
    "DEFAULT_LICENSE",
    "PLACEHOLDER_BODY",
    "SCREENSHOT_PLACEHOLDER_URL",
    "TEMPLATE_SECTIONS",
    "TOC_SECTIONS",
    "sections_for",
]
