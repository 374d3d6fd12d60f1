"""Text helpers (frontmatter, markdown titles)."""
from __future__ import annotations

from .frontmatter import ParsedDocument, extract_title, parse_frontmatter, slug_to_title

__all__ = ["ParsedDocument", "parse_frontmatter", "extract_title", "slug_to_title"]
