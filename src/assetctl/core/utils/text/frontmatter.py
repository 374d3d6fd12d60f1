"""YAML frontmatter parsing for catalog markdown files.

The frontmatter is delimited by '---' markers at the start of the file.

Example:
    ```markdown
    ---
    description: "Review pull requests"
    tags: [review, git]
    ---

    # PR Reviewer
    ```
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml


# Matches content between the first pair of '---' markers at file start
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)

_TITLE_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)


@dataclass
class ParsedDocument:
    """Result of parsing a document with YAML frontmatter.

    Attributes:
        frontmatter: Parsed YAML frontmatter as a dictionary
        content: The markdown content after the frontmatter
        raw_frontmatter: The raw YAML string (for debugging)
    """
    frontmatter: Dict[str, Any]
    content: str
    raw_frontmatter: str


def parse_frontmatter(content: str, *, strict: bool = False) -> ParsedDocument:
    """Parse YAML frontmatter from markdown content.

    Catalog files come from third-party repositories, so by default malformed
    frontmatter (invalid YAML or a non-mapping document) degrades to an empty
    mapping. With ``strict=True`` a ValueError is raised instead.

    Example:
        >>> doc = parse_frontmatter('''---
        ... description: demo
        ... ---
        ... # Title
        ... ''')
        >>> doc.frontmatter['description']
        'demo'
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return ParsedDocument(frontmatter={}, content=content, raw_frontmatter="")

    raw_yaml = match.group(1)
    remaining = content[match.end():]

    try:
        parsed = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as e:
        if strict:
            raise ValueError(f"Invalid YAML in frontmatter: {e}") from e
        parsed = {}

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        if strict:
            raise ValueError(f"Frontmatter must be a YAML mapping, got {type(parsed).__name__}")
        parsed = {}

    return ParsedDocument(frontmatter=parsed, content=remaining, raw_frontmatter=raw_yaml)


def extract_title(content: str) -> Optional[str]:
    """Return the text of the first level-one markdown heading, if any."""
    match = _TITLE_PATTERN.search(content)
    if not match:
        return None
    title = match.group(1).strip()
    return title or None


def slug_to_title(slug: str) -> str:
    """Turn ``pr-review-helper`` into ``Pr Review Helper``."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


__all__ = ["ParsedDocument", "parse_frontmatter", "extract_title", "slug_to_title"]
