#!/usr/bin/env python3
"""
navigation.py
-------------
Previous/next/home navigation between sequential lessons.

Lesson order is the lexicographic order of lesson directory names; the
two-digit prefix makes that numeric up to 99 lessons. Navigation lines
look like:

    **Previous**: [Fundamentals](../01-fundamentals/README.md)
    **Next**: [Structs](../03-structs-enums/README.md)
    **Module Home**: [Rust Basics](../README.md)

with the Indonesian labels Sebelumnya / Selanjutnya / Beranda Modul.

Validates:
- Property 8: navigation completeness (non-first lessons have Previous,
  non-last lessons have Next, all lessons have Module Home, and Previous
  and Next point at the sorted neighbours)
- Property 9: navigation bidirectionality; when A's Next resolves to B, B's Previous must
  resolve to A

Usage (through CLI):
    lessonlint navigation
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Tuple

# --- Local imports ---
from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.utils.fs import read_text
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import (
    NavigationLinkSet,
    NavLink,
    PropertyResult,
    SuiteResult,
)
from lessonlint.validators.patterns import LESSON_NAME, NAVIGATION_LABELS
from lessonlint.validators.structure import lesson_directories

LANGUAGE_LABELS = {"en": "EN", "id": "ID"}


def lesson_sequence(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[str]:
    """Lesson directory names in navigation order."""
    return [lesson.name for lesson in lesson_directories(config, logger)]


def extract_navigation_links(content: str) -> NavigationLinkSet:
    """
    Parse labelled navigation links from a lesson document.

    When a label appears more than once the last occurrence wins.

    Args:
        content: Lesson document text

    Returns:
        NavigationLinkSet with None for labels not found
    """
    links = NavigationLinkSet()
    for line in content.split("\n"):
        for slot, pattern in NAVIGATION_LABELS.items():
            match = pattern.search(line)
            if match:
                setattr(
                    links,
                    slot,
                    NavLink(
                        label=match.group(1),
                        text=match.group(2).strip(),
                        target=match.group(3).strip(),
                    ),
                )
    return links


def link_target_lesson(target: Optional[str]) -> Optional[str]:
    """
    Lesson directory a link target points into.

    Examples:
        >>> link_target_lesson("../02-ownership-borrowing/README.md")
        '02-ownership-borrowing'
        >>> link_target_lesson("../README.md") is None
        True
    """
    if not target:
        return None
    path = target.split("#", 1)[0]
    for part in PurePosixPath(path).parts:
        if LESSON_NAME.match(part):
            return part
    return None


def _document_paths(config: ValidatorConfig, lesson: str) -> List[Tuple[str, Path]]:
    lesson_dir = config.module_root / lesson
    return [
        ("en", lesson_dir / config.english_file),
        ("id", lesson_dir / config.indonesian_file),
    ]


def collect_navigation(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> Dict[Tuple[str, str], Optional[NavigationLinkSet]]:
    """
    Parse navigation links of every lesson document.

    Returns:
        Mapping (lesson, language) -> links, or None if the file is unreadable
    """
    navigation = {}
    for lesson in lesson_sequence(config, logger):
        for language, path in _document_paths(config, lesson):
            content = read_text(path, logger) if path.is_file() else None
            navigation[(lesson, language)] = (
                extract_navigation_links(content) if content is not None else None
            )
    return navigation


def check_navigation_completeness(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 8: every lesson carries the navigation its position requires.

    The first lesson is exempt from Previous and the last from Next,
    decided purely by sort position. Module Home is required everywhere
    but its target is not cross-validated.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per missing or misdirected link
    """
    result = PropertyResult(
        key="navigation",
        title="Property 8: Lesson Navigation Completeness",
        requirements=["9.4"],
    )
    lessons = lesson_sequence(config, logger)
    result.items_checked = len(lessons)
    if not lessons:
        result.warn(".", "No lesson directories found")
        return result

    result.notes.append(f"Found {len(lessons)} lesson directories to validate")
    result.notes.append(f"Lessons: {', '.join(lessons)}")
    navigation = collect_navigation(config, logger)

    for index, lesson in enumerate(lessons):
        expected_previous = lessons[index - 1] if index > 0 else None
        expected_next = lessons[index + 1] if index < len(lessons) - 1 else None

        for language, path in _document_paths(config, lesson):
            entity = f"{lesson} ({LANGUAGE_LABELS[language]})"
            links = navigation[(lesson, language)]
            if links is None:
                result.warn(entity, "Could not read file, skipping", file_path=path)
                continue

            for slot, label, expected in (
                ("previous", "Previous", expected_previous),
                ("next", "Next", expected_next),
            ):
                if expected is None:
                    continue
                link = getattr(links, slot)
                if link is None or not link.target:
                    result.add(entity, f"Missing **{label}** link", file_path=path)
                elif link_target_lesson(link.target) != expected:
                    result.add(
                        entity,
                        f"{label} link should point to {expected}",
                        file_path=path,
                        suggestion=f"Found: {link.target}",
                    )

            if links.home is None or not links.home.target:
                result.add(entity, "Missing **Module Home** link", file_path=path)

    safe_logger(logger).log_debug(
        "Navigation completeness checked",
        {"lessons": len(lessons), "violations": len(result.errors)},
    )
    return result


def check_navigation_consistency(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Check that Next and Previous links agree for adjacent lessons.

    For each adjacent pair (A, B) and each language: A's Next, when
    present, must resolve to B, and if it does, B's Previous must resolve
    back to A.
    """
    result = PropertyResult(key="consistency", title="Property 9: Navigation Bidirectionality")
    lessons = lesson_sequence(config, logger)
    navigation = collect_navigation(config, logger)
    adjacent = list(zip(lessons, lessons[1:]))
    result.items_checked = len(adjacent)

    for current, following in adjacent:
        for language in ("en", "id"):
            current_links = navigation[(current, language)]
            following_links = navigation[(following, language)]
            if current_links is None or following_links is None:
                continue

            tag = LANGUAGE_LABELS[language]
            next_target = current_links.next.target if current_links.next else None
            if next_target and link_target_lesson(next_target) != following:
                result.add(
                    f"{current} ({tag})",
                    f"Next link doesn't point to {following}",
                    suggestion=f"Found: {next_target}",
                )
                continue

            previous_target = (
                following_links.previous.target if following_links.previous else None
            )
            if link_target_lesson(next_target) == following and (
                link_target_lesson(previous_target) != current
            ):
                result.add(
                    f"{current} -> {following} ({tag})",
                    f"Inconsistent navigation: {current} links Next to {following} "
                    f"but {following} links Previous to {previous_target or 'nothing'}",
                    file_path=dict(_document_paths(config, following))[language],
                )

    if result.passed:
        result.notes.append("Navigation links are consistent across all lessons")
    return result


NAVIGATION_CHECKS = [check_navigation_completeness, check_navigation_consistency]


def validate_navigation(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """Run every navigation property against the module."""
    return run_checks("navigation", NAVIGATION_CHECKS, config, logger)
