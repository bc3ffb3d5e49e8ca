#!/usr/bin/env python3
"""
attribution.py
--------------
Source attribution for curriculum documents.

Content adapted from upstream repositories must say where it came from.
A document passes with any of: a "Source Attribution" heading, an
"adapted from" style phrase, or a ``repository:`` / ``source:`` line.
Short documents (placeholders, stubs) and index files are not checked.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.utils.fs import find_markdown_files, read_text
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import PropertyResult, SuiteResult
from lessonlint.validators.patterns import ATTRIBUTION_INDICATORS, ATTRIBUTION_URL

# Tooling documents that describe validators rather than content
TOOLING_PREFIXES = ("validate-", "check-")


def attribution_indicators(content: str) -> List[str]:
    """
    Names of the attribution indicators present in a document.

    "URL" is reported alongside but never counts as attribution on its own.
    """
    found = [name for name, pattern in ATTRIBUTION_INDICATORS.items() if pattern.search(content)]
    if found and ATTRIBUTION_URL.search(content):
        found.append("URL")
    return found


def check_source_attribution(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Check that substantial documents carry a source attribution.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per unattributed document
    """
    result = PropertyResult(
        key="attribution",
        title="Source Attribution Validation",
        requirements=["8.1", "8.3"],
    )
    excluded = set(config.attribution_excluded)
    attributed: Dict[str, List[str]] = {}

    for path in find_markdown_files(config.module_root, logger, config.ignored_paths):
        if path.name in excluded or path.name.startswith(TOOLING_PREFIXES):
            continue
        content = read_text(path, logger)
        if content is None or len(content) < config.min_attribution_length:
            continue

        result.items_checked += 1
        label = str(path.relative_to(config.module_root))
        indicators = attribution_indicators(content)
        if indicators:
            attributed[label] = indicators
        else:
            result.add(
                label,
                "Missing source attribution",
                file_path=path,
                suggestion="Add a Source Attribution section with repository, file path and URL",
            )

    result.notes.append(
        f"Files with attribution: {len(attributed)} of {result.items_checked}"
    )
    for label, indicators in list(attributed.items())[:10]:
        result.notes.append(f"{label} (indicators: {', '.join(indicators)})")
    if len(attributed) > 10:
        result.notes.append(f"... and {len(attributed) - 10} more files with attribution")

    safe_logger(logger).log_debug(
        "Source attribution checked",
        {"files": result.items_checked, "violations": len(result.errors)},
    )
    return result


def validate_attribution(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """Run the attribution check against the module."""
    return run_checks("attribution", [check_source_attribution], config, logger)
