#!/usr/bin/env python3
"""
structure.py
------------
Directory layout validation for a curriculum module.

Validates:
- Basic module structure (root README pair, exercises directory)
- Property 1: lesson directory naming convention (NN-topic-name)
- Property 2: bilingual file pairs (README.md <-> README_ID.md)

Usage (through CLI):
    lessonlint structure

Usage (programmatic):
    from lessonlint.validators.structure import validate_structure
    suite = validate_structure(config)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional

# --- Local imports ---
from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.utils.fs import list_directories, list_files, walk_directories
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import LessonDirectory, PropertyResult, SuiteResult
from lessonlint.validators.patterns import LESSON_NAME, LESSON_NAME_HINT


def lesson_candidates(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[str]:
    """Top-level directory names that are meant to be lessons."""
    excluded = set(config.excluded_dirs)
    ignored = set(config.ignored_paths)
    return [
        name
        for name in list_directories(config.module_root, logger)
        if name not in excluded
        and (config.module_root / name).resolve() not in ignored
    ]


def lesson_directories(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[LessonDirectory]:
    """Top-level directories whose names follow the lesson convention, sorted."""
    return [
        LessonDirectory(name=name, path=config.module_root / name)
        for name in sorted(lesson_candidates(config, logger))
        if LESSON_NAME.match(name)
    ]


def check_basic_structure(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Check that the module skeleton exists.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per missing item
    """
    result = PropertyResult(key="basic", title="Basic Structure Validation")
    root = config.module_root
    checks = [
        (root.is_dir(), "Module root directory", str(root)),
        ((root / config.english_file).is_file(), f"Main {config.english_file}", config.english_file),
        ((root / config.indonesian_file).is_file(), f"Main {config.indonesian_file}", config.indonesian_file),
        (config.exercises_root.is_dir(), "Exercises directory", config.exercises_dir),
    ]

    for exists, name, entity in checks:
        result.items_checked += 1
        if exists:
            result.notes.append(f"{name} exists")
        else:
            result.add(entity, f"{name} missing")

    safe_logger(logger).log_debug(
        "Basic structure checked", {"missing": len(result.errors)}
    )
    return result


def check_lesson_naming(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 1: every lesson directory name matches ^\\d{2}-[a-z-]+$.

    Every directory directly under the module root, other than the
    excluded tooling directories, is treated as a lesson.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult naming each offending directory
    """
    result = PropertyResult(
        key="naming",
        title="Property 1: Lesson Directory Naming Convention",
        requirements=["1.4"],
    )
    candidates = lesson_candidates(config, logger)
    result.items_checked = len(candidates)
    result.notes.append(f"Found {len(candidates)} potential lesson directories to validate")

    for name in candidates:
        if not LESSON_NAME.match(name):
            result.add(
                name,
                f"Invalid directory name: {name}",
                file_path=config.module_root / name,
                suggestion=f"Expected pattern: {LESSON_NAME_HINT}",
            )

    safe_logger(logger).log_debug(
        "Lesson naming checked",
        {"directories": len(candidates), "violations": len(result.errors)},
    )
    return result


def check_bilingual_pairs(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 2: README.md exists in a directory iff README_ID.md does.

    Applies to every directory of the tree (root included), not just
    lessons. Both directions are checked independently.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per unpaired directory
    """
    result = PropertyResult(
        key="bilingual",
        title="Property 2: Bilingual File Pairs",
        requirements=["2.1"],
    )
    directories = walk_directories(
        config.module_root, config.scan_excluded, logger, config.ignored_paths
    )
    result.items_checked = len(directories)
    result.notes.append(
        f"Checking {len(directories)} directories for bilingual file pairs"
    )

    for relative in directories:
        files = list_files(config.module_root / relative, logger)
        has_english = config.english_file in files
        has_indonesian = config.indonesian_file in files
        if has_english == has_indonesian:
            continue

        existing, missing = (
            (config.english_file, config.indonesian_file)
            if has_english
            else (config.indonesian_file, config.english_file)
        )
        label = "root" if relative == "." else relative
        result.add(
            label,
            f"Found {existing} but missing {missing}",
            file_path=config.module_root / relative / existing,
            suggestion=f"Add the {missing} translation",
        )

    safe_logger(logger).log_debug(
        "Bilingual pairs checked",
        {"directories": len(directories), "violations": len(result.errors)},
    )
    return result


STRUCTURE_CHECKS = [check_basic_structure, check_lesson_naming, check_bilingual_pairs]


def validate_structure(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """Run every structure property against the module."""
    return run_checks("structure", STRUCTURE_CHECKS, config, logger)
