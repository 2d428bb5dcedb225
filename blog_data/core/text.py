"""
Text helpers used to build post excerpts for listing views.
"""
from __future__ import annotations

import bleach
import markdown

EXCERPT_LENGTH = 300
EXCERPT_SUFFIX = "..."


def truncate(text: str, length: int) -> str:
    """Cut text to at most `length` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if len(text) <= length:
        return text
    return text[:length]


def strip_tags(html: str) -> str:
    """Remove every HTML tag, keeping the text content."""
    return bleach.clean(html, tags=[], attributes={}, strip=True)


# PUBLIC_INTERFACE
def render_excerpt(body: str, length: int = EXCERPT_LENGTH) -> str:
    """
    Render a markdown body to plain sanitized text for listings.

    The body is rendered to HTML, every tag is stripped, the result is cut to
    `length` characters and the ellipsis suffix is always appended.
    """
    html = markdown.markdown(body)
    return truncate(strip_tags(html), length) + EXCERPT_SUFFIX
