#!/usr/bin/env python3
"""
md.py
-------------------
Markdown parsing helpers for lesson and exercise documents.

Provides functions for:
- Heading outline extraction (level + text per heading)
- Inline link extraction ([text](target))
- GitHub-style heading anchors

Fenced code blocks are skipped when extracting headings and links, so a
``# comment`` line in a shell sample is not mistaken for a heading.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
FENCE_PATTERN = re.compile(r"^\s*```")
EXTERNAL_PREFIXES = ("http://", "https://", "mailto:")


@dataclass(frozen=True)
class Heading:
    """A markdown heading."""

    level: int
    text: str
    line_number: int


@dataclass(frozen=True)
class MarkdownLink:
    """An inline markdown link."""

    text: str
    target: str
    line_number: int

    @property
    def is_external(self) -> bool:
        """True for http(s) and mailto links."""
        return self.target.startswith(EXTERNAL_PREFIXES)

    @property
    def path_and_anchor(self) -> Tuple[str, str]:
        """Split the target into (path, anchor); either part may be empty."""
        path, _, anchor = self.target.partition("#")
        return path, anchor


def iter_prose_lines(content: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) pairs outside fenced code blocks.

    Args:
        content: Markdown document text

    Yields:
        1-indexed line number and the raw line
    """
    in_fence = False
    for line_number, line in enumerate(content.split("\n"), start=1):
        if FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if not in_fence:
            yield line_number, line.rstrip("\r")


def extract_headings(content: str) -> List[Heading]:
    """
    Extract the heading outline of a markdown document.

    Args:
        content: Markdown document text

    Returns:
        Headings in document order

    Examples:
        >>> [h.level for h in extract_headings("# A\\n## B\\ntext\\n### C")]
        [1, 2, 3]
    """
    headings = []
    for line_number, line in iter_prose_lines(content):
        match = HEADING_PATTERN.match(line)
        if match:
            headings.append(
                Heading(
                    level=len(match.group(1)),
                    text=match.group(2).strip(),
                    line_number=line_number,
                )
            )
    return headings


def level_sequence(headings: List[Heading]) -> List[int]:
    """Heading levels in order, ignoring text."""
    return [heading.level for heading in headings]


def extract_links(content: str) -> List[MarkdownLink]:
    """
    Extract inline links outside code blocks.

    Args:
        content: Markdown document text

    Returns:
        Links in document order
    """
    links = []
    for line_number, line in iter_prose_lines(content):
        for match in LINK_PATTERN.finditer(line):
            links.append(
                MarkdownLink(
                    text=match.group(1),
                    target=match.group(2).strip(),
                    line_number=line_number,
                )
            )
    return links


def heading_anchor(text: str) -> str:
    """
    Convert heading text to its anchor slug.

    Lowercase, drop characters other than word characters, whitespace and
    hyphens, then replace each whitespace run with one hyphen.

    Examples:
        >>> heading_anchor("Best Practices & Tips")
        'best-practices-tips'
    """
    slug = re.sub(r"[^\w\s-]", "", text.lower())
    return re.sub(r"\s+", "-", slug)
