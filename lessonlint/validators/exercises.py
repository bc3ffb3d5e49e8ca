#!/usr/bin/env python3
"""
exercises.py
------------
Validation of exercise directories under ``exercises/``.

Validates:
- Bilingual instructions: every exercise has README.md and README_ID.md
- Property 6: exercise instructions reference at least one lesson
- Property 7: exercise instructions state how a solution is judged
- starter/ and solution/ scaffolding (warnings only, never fails)

Usage (through CLI):
    lessonlint exercises
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.utils.fs import list_directories, list_files, read_text
from lessonlint.utils.md import extract_headings
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import ExerciseDirectory, PropertyResult, SuiteResult
from lessonlint.validators.patterns import (
    CRITERIA_HEADINGS,
    CRITERIA_KEYWORDS,
    LESSON_LINK,
    LESSON_NAME,
    LESSON_REFERENCE,
)


@dataclass(frozen=True)
class ExerciseDocument:
    """One language version of an exercise's instructions."""

    path: Path
    exercise: str
    language: str  # en, id


def find_exercises(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[ExerciseDirectory]:
    """Numbered exercise directories, sorted by name."""
    root = config.exercises_root
    if not root.is_dir():
        return []
    return [
        ExerciseDirectory(
            name=name,
            path=root / name,
            has_starter=(root / name / "starter").is_dir(),
            has_solution=(root / name / "solution").is_dir(),
        )
        for name in list_directories(root, logger)
        if LESSON_NAME.match(name)
    ]


def find_exercise_documents(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[ExerciseDocument]:
    """Every instruction file present in an exercise directory."""
    documents = []
    for exercise in find_exercises(config, logger):
        files = list_files(exercise.path, logger)
        for file_name, language in (
            (config.english_file, "en"),
            (config.indonesian_file, "id"),
        ):
            if file_name in files:
                documents.append(
                    ExerciseDocument(
                        path=exercise.path / file_name, exercise=exercise.name, language=language
                    )
                )
    return documents


def has_lesson_reference(content: str) -> bool:
    """True if the text names a lesson directory or links into one."""
    return bool(LESSON_REFERENCE.search(content) or LESSON_LINK.search(content))


def has_validation_criteria(content: str) -> bool:
    """True if the text has a criteria heading or a criteria keyword/checkmark."""
    section_titles = [h.text for h in extract_headings(content) if h.level == 2]
    if any(p.match(title) for p in CRITERIA_HEADINGS for title in section_titles):
        return True
    return any(p.search(content) for p in CRITERIA_KEYWORDS)


def check_exercise_instructions(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Each exercise carries instructions in both languages.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per missing file
    """
    result = PropertyResult(
        key="exercise-bilingual",
        title="Exercise Bilingual Instructions",
        requirements=["5.2"],
    )
    exercises = find_exercises(config, logger)
    result.items_checked = len(exercises)
    if not exercises:
        result.warn(config.exercises_dir, "No exercise directories found")
        return result

    result.notes.append(
        f"Checking {len(exercises)} exercise directories for bilingual instructions"
    )
    for exercise in exercises:
        files = list_files(exercise.path, logger)
        for file_name in (config.english_file, config.indonesian_file):
            if file_name not in files:
                result.add(
                    exercise.name,
                    f"Missing {file_name}",
                    file_path=exercise.path / file_name,
                )

    safe_logger(logger).log_debug(
        "Exercise instructions checked",
        {"exercises": len(exercises), "violations": len(result.errors)},
    )
    return result


def check_lesson_references(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 6: exercise instructions reference a lesson directory.

    "See Lesson 3" does not count; "03-structs-enums" or a link into
    ``../../03-structs-enums/`` does.
    """
    result = PropertyResult(
        key="exercise-references",
        title="Property 6: Exercise Lesson References",
        requirements=["5.4"],
    )
    documents = find_exercise_documents(config, logger)
    result.items_checked = len(documents)
    if not documents:
        result.warn(config.exercises_dir, "No exercise README files found")
        return result

    result.notes.append(f"Checking {len(documents)} exercise README files for lesson references")
    for document in documents:
        content = read_text(document.path, logger)
        if content is None:
            continue
        if not has_lesson_reference(content):
            result.add(
                f"{document.exercise} ({document.language})",
                "No lesson references found",
                file_path=document.path,
                suggestion="Link the related lesson, e.g. [Ownership](../../02-ownership/README.md)",
            )

    safe_logger(logger).log_debug(
        "Exercise lesson references checked",
        {"documents": len(documents), "violations": len(result.errors)},
    )
    return result


def check_validation_criteria(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """Property 7: exercise instructions describe validation criteria."""
    result = PropertyResult(
        key="exercise-criteria",
        title="Property 7: Exercise Validation Criteria",
        requirements=["5.3"],
    )
    documents = find_exercise_documents(config, logger)
    result.items_checked = len(documents)
    if not documents:
        result.warn(config.exercises_dir, "No exercise README files found")
        return result

    result.notes.append(f"Checking {len(documents)} exercise README files for validation criteria")
    for document in documents:
        content = read_text(document.path, logger)
        if content is None:
            continue
        if not has_validation_criteria(content):
            result.add(
                f"{document.exercise} ({document.language})",
                "No validation criteria found",
                file_path=document.path,
                suggestion='Expected: "Validation Criteria" section or validation keywords',
            )

    safe_logger(logger).log_debug(
        "Exercise validation criteria checked",
        {"documents": len(documents), "violations": len(result.errors)},
    )
    return result


def check_exercise_layout(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Report exercises without starter/ or solution/ directories.

    Some exercise types legitimately ship neither, so only warnings are
    recorded and the property always passes.
    """
    result = PropertyResult(key="exercise-layout", title="Basic Exercise Structure Validation")
    exercises = find_exercises(config, logger)
    result.items_checked = len(exercises)
    if not exercises:
        result.warn(config.exercises_dir, "No exercise directories found")
        return result

    result.notes.append(f"Checking {len(exercises)} exercises for starter and solution directories")
    for exercise in exercises:
        if exercise.has_starter and exercise.has_solution:
            result.notes.append(f"{exercise.name}: Has starter and solution directories")
            continue
        if not exercise.has_starter:
            result.warn(exercise.name, "Missing starter directory", file_path=exercise.path)
        if not exercise.has_solution:
            result.warn(exercise.name, "Missing solution directory", file_path=exercise.path)

    return result


EXERCISE_CHECKS = [
    check_exercise_layout,
    check_exercise_instructions,
    check_lesson_references,
    check_validation_criteria,
]


def validate_exercises(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """
    Run every exercise property against the module.

    A module without an exercises directory fails outright.
    """
    if not config.exercises_root.is_dir():
        safe_logger(logger).log_warning(
            "Exercises directory not found", {"path": config.exercises_root}
        )
        suite = SuiteResult(name="exercises", module_root=config.module_root)
        result = PropertyResult(key="exercises-root", title="Exercises Directory")
        result.items_checked = 1
        result.add(
            config.exercises_dir,
            f"Exercises directory not found: {config.exercises_root}",
            file_path=config.exercises_root,
        )
        suite.results.append(result)
        return suite
    return run_checks("exercises", EXERCISE_CHECKS, config, logger)
