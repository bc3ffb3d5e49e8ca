#!/usr/bin/env python3
"""
links.py
--------
Internal markdown link integrity across a curriculum module.

Every ``[text](target)`` outside code blocks is checked; http(s) and
mailto links are skipped. A target must exist relative to the linking
file, and a ``#anchor`` into a markdown file must match one of its
heading anchors.

Usage (through CLI):
    lessonlint links
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Set

from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.utils.fs import find_markdown_files, read_text
from lessonlint.utils.md import extract_headings, extract_links, heading_anchor
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import PropertyResult, SuiteResult


class AnchorIndex:
    """Lazily computed heading anchors per markdown file."""

    def __init__(self, logger: Optional[LessonLintLogger] = None) -> None:
        self.logger = logger
        self._anchors: Dict[Path, Set[str]] = {}

    def anchors(self, path: Path) -> Set[str]:
        if path not in self._anchors:
            content = read_text(path, self.logger)
            self._anchors[path] = (
                {heading_anchor(h.text) for h in extract_headings(content)}
                if content is not None
                else set()
            )
        return self._anchors[path]


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def check_internal_links(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Check that internal links resolve to files and headings.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per broken link or missing anchor
    """
    result = PropertyResult(key="links", title="Internal Link Validation")
    files = find_markdown_files(config.module_root, logger, config.ignored_paths)
    index = AnchorIndex(logger)
    links_checked = 0

    for source in files:
        content = read_text(source, logger)
        if content is None:
            continue
        source_label = _relative(source, config.module_root)

        for link in extract_links(content):
            if link.is_external:
                continue
            links_checked += 1
            link_path, anchor = link.path_and_anchor
            # Drop an optional link title: [text](path "title")
            link_path = link_path.split()[0] if link_path.strip() else ""

            target = source if not link_path else (source.parent / link_path).resolve()
            if not target.exists():
                result.add(
                    source_label,
                    f"File not found: [{link.text}]({link.target})",
                    file_path=source,
                    line_number=link.line_number,
                    suggestion=f"Target does not exist: {target}",
                )
                continue

            if anchor and target.is_file() and target.suffix == ".md":
                if anchor not in index.anchors(target):
                    result.add(
                        source_label,
                        f"Anchor '#{anchor}' not found in target file: [{link.text}]({link.target})",
                        file_path=source,
                        line_number=link.line_number,
                    )

    result.items_checked = links_checked
    result.notes.append(f"Scanned {len(files)} markdown files, {links_checked} internal links")
    safe_logger(logger).log_debug(
        "Internal links checked",
        {"files": len(files), "links": links_checked, "violations": len(result.errors)},
    )
    return result


def validate_links(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """Run the internal link check against the module."""
    return run_checks("links", [check_internal_links], config, logger)
