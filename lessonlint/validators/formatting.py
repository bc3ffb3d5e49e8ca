#!/usr/bin/env python3
"""
formatting.py
-------------
Markdown formatting consistency.

Checks:
- Heading hierarchy: no skipped levels going deeper (# then ###)
- Code blocks: fences closed, closing fence bare, language tag present
- Lists: indentation in multiples of two spaces

Skipped heading levels and broken fences are errors. Missing language
tags and odd list indentation are warnings and do not fail the run.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from typing import List, Optional

# --- Local imports ---
from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.utils.fs import find_markdown_files, read_text
from lessonlint.utils.md import extract_headings
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import PropertyResult, SuiteResult

LIST_ITEM = re.compile(r"^(\s*)([-*+]|\d+\.)\s+\S")


@dataclass
class FormattingIssue:
    """A formatting problem on one line."""

    line_number: int
    category: str  # heading, code-block, list
    message: str
    severity: str = "error"


def heading_issues(content: str) -> List[FormattingIssue]:
    """Report headings that skip a level relative to the previous heading."""
    issues = []
    previous_level = 0
    for heading in extract_headings(content):
        if previous_level and heading.level > previous_level + 1:
            issues.append(
                FormattingIssue(
                    heading.line_number,
                    "heading",
                    f"Heading level skipped from {previous_level} to {heading.level}",
                )
            )
        previous_level = heading.level
    return issues


def code_block_issues(content: str) -> List[FormattingIssue]:
    """Report unclosed fences, decorated closing fences and untagged blocks."""
    issues = []
    open_line: Optional[int] = None
    for line_number, line in enumerate(content.split("\n"), start=1):
        stripped = line.strip()
        if not stripped.startswith("```"):
            continue
        if open_line is None:
            open_line = line_number
            if not stripped[3:].strip():
                issues.append(
                    FormattingIssue(
                        line_number,
                        "code-block",
                        "Code block without language tag (consider adding for syntax highlighting)",
                        severity="warning",
                    )
                )
        else:
            if stripped != "```":
                issues.append(
                    FormattingIssue(
                        line_number, "code-block", "Code block closing fence should be just ```"
                    )
                )
            open_line = None

    if open_line is not None:
        issues.append(
            FormattingIssue(open_line, "code-block", "Code block opened but never closed")
        )
    return issues


def list_issues(content: str) -> List[FormattingIssue]:
    """Report list items indented by an odd number of spaces."""
    issues = []
    in_fence = False
    for line_number, line in enumerate(content.split("\n"), start=1):
        if line.strip().startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = LIST_ITEM.match(line)
        if match and len(match.group(1).expandtabs(4)) % 2:
            issues.append(
                FormattingIssue(
                    line_number,
                    "list",
                    "List indentation should be multiples of 2 spaces",
                    severity="warning",
                )
            )
    return issues


def formatting_issues(content: str) -> List[FormattingIssue]:
    """All formatting issues of a document, ordered by line."""
    issues = heading_issues(content) + code_block_issues(content) + list_issues(content)
    return sorted(issues, key=lambda issue: issue.line_number)


def check_markdown_formatting(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Check formatting consistency of every markdown file in the module.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one entry per issue
    """
    result = PropertyResult(key="formatting", title="Markdown Formatting Consistency")
    files = find_markdown_files(config.module_root, logger, config.ignored_paths)
    result.items_checked = len(files)
    files_with_issues = 0

    for path in files:
        content = read_text(path, logger)
        if content is None:
            continue
        issues = formatting_issues(content)
        if issues:
            files_with_issues += 1
        for issue in issues:
            result.add(
                str(path.relative_to(config.module_root)),
                f"Line {issue.line_number}: [{issue.category}] {issue.message}",
                severity=issue.severity,
                file_path=path,
                line_number=issue.line_number,
            )

    result.notes.append(f"Files checked: {len(files)}, files with issues: {files_with_issues}")
    safe_logger(logger).log_debug(
        "Markdown formatting checked",
        {"files": len(files), "files_with_issues": files_with_issues},
    )
    return result


def validate_formatting(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """Run the formatting check against the module."""
    return run_checks("formatting", [check_markdown_formatting], config, logger)
