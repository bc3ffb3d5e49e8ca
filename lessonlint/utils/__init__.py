"""
Utilities package for lessonlint.

- fs: Directory listing, tree walking and tolerant file reads
- md: Heading and link extraction, heading anchors

Import commonly-used utilities directly from this package:
    from lessonlint.utils import extract_headings, read_text

Or import specific modules:
    from lessonlint.utils import md, fs
"""

# Markdown utilities
from .md import (
    Heading,
    MarkdownLink,
    extract_headings,
    extract_links,
    heading_anchor,
    iter_prose_lines,
    level_sequence,
)

# Filesystem utilities
from .fs import (
    find_markdown_files,
    is_excluded,
    list_directories,
    list_files,
    read_text,
    walk_directories,
)

__all__ = [
    "Heading",
    "MarkdownLink",
    "extract_headings",
    "extract_links",
    "heading_anchor",
    "iter_prose_lines",
    "level_sequence",
    "find_markdown_files",
    "is_excluded",
    "list_directories",
    "list_files",
    "read_text",
    "walk_directories",
]
