"""Markdown formatting primitives used by the section builders."""

from __future__ import annotations

import re
from typing import Iterable, Optional

_NEWLINE = "\n"
_DOUBLE_NEWLINE = "\n\n"
_LINE_BREAK = re.compile(r"\r?\n")
_SLUG_STRIP = re.compile(r"[^a-z0-9\s-]")
_SLUG_SPACES = re.compile(r"\s+")
_ESCAPED_CHARACTERS = ("\\", "`", "*", "_", "[", "]")


class FormattingArgumentError(ValueError):
    """Raised when a primitive is called with an argument it cannot format."""


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def header(level: int, text: str) -> str:
    """Return an ATX heading of ``level`` (1-6) followed by a blank line."""
    if level < 1 or level > 6:
        raise FormattingArgumentError("Header level must be between 1 and 6")
    return f"{'#' * level} {text}{_DOUBLE_NEWLINE}"


def centered_block(content: str) -> str:
    return f'<div align="center">{_DOUBLE_NEWLINE}{content}{_DOUBLE_NEWLINE}</div>{_DOUBLE_NEWLINE}'


def code_block(code: str, language: Optional[str] = None) -> str:
    """Wrap ``code`` in a fenced block; the language tag is empty when not given."""
    lang = language if not _is_blank(language) else ""
    return f"```{lang}{_NEWLINE}{code}{_NEWLINE}```{_DOUBLE_NEWLINE}"


def unordered_list(items: Optional[Iterable[str]]) -> str:
    """Render one ``- `` bullet per non-blank item; empty string when nothing remains."""
    if items is None:
        return ""
    bullets = [f"- {item}" for item in items if not _is_blank(item)]
    if not bullets:
        return ""
    return _NEWLINE.join(bullets) + _DOUBLE_NEWLINE


def unordered_list_from_text(text: Optional[str]) -> str:
    """Split multi-line text on line breaks and render it as a bullet list."""
    if _is_blank(text):
        return ""
    return unordered_list(_LINE_BREAK.split(text))


def link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def image(alt_text: str, url: str) -> str:
    return f"![{alt_text}]({url})"


def horizontal_rule() -> str:
    return f"---{_DOUBLE_NEWLINE}"


def bold(text: str) -> str:
    return f"**{text}**"


def italic(text: str) -> str:
    return f"*{text}*"


def inline_code(code: str) -> str:
    return f"`{code}`"


def anchor_slug(title: str) -> str:
    """Return the in-page anchor for a heading title.

    The title is lower-cased, everything except letters, digits, whitespace
    and hyphens is dropped, and each whitespace run becomes one hyphen.
    """
    slug = _SLUG_STRIP.sub("", title.lower())
    return _SLUG_SPACES.sub("-", slug)


def toc_link(title: str) -> str:
    """Return a table-of-contents bullet linking to ``title``'s anchor."""
    return f"- [{title}](#{anchor_slug(title)})"


def sanitize(text: Optional[str]) -> str:
    """Escape characters with markdown meaning so ``text`` renders literally."""
    if _is_blank(text):
        return ""
    # Backslash goes first so the escapes added below are not doubled.
    for character in _ESCAPED_CHARACTERS:
        text = text.replace(character, f"\\{character}")
    return text


__all__ = [
    "FormattingArgumentError",
    "anchor_slug",
    "bold",
    "centered_block",
    "code_block",
    "header",
    "horizontal_rule",
    "image",
    "inline_code",
    "italic",
    "link",
    "sanitize",
    "toc_link",
    "unordered_list",
    "unordered_list_from_text",
]
