#!/usr/bin/env python3
"""
content.py
----------
Markdown content validation for bilingual lesson documents.

Validates:
- Property 3: parallel heading structure between README.md and README_ID.md
- Property 4: each document links to its counterpart language
- Property 5: lesson documents carry the required sections

Heading parity compares levels only; translated heading text is expected
to differ. The level sequences must be identical, position by position.

Usage (through CLI):
    lessonlint content

Usage (programmatic):
    from lessonlint.validators.content import validate_content
    suite = validate_content(config)
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
from lessonlint.utils.fs import list_files, read_text, walk_directories
from lessonlint.utils.md import Heading, extract_headings
from lessonlint.validators.base import run_checks
from lessonlint.validators.models import DocumentPair, PropertyResult, SuiteResult
from lessonlint.validators.patterns import ALTERNATIVE_SECTIONS, REQUIRED_SECTIONS
from lessonlint.validators.structure import lesson_directories


@dataclass(frozen=True)
class LessonDocument:
    """One language version of a lesson."""

    path: Path
    lesson: str
    language: str  # en, id


def find_document_pairs(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[DocumentPair]:
    """
    Collect every directory holding both language documents.

    Exercise starter/solution trees are skipped.
    """
    excluded = list(config.scan_excluded) + list(config.pair_excluded)
    pairs = []
    for relative in walk_directories(config.module_root, excluded, logger, config.ignored_paths):
        directory = config.module_root / relative
        files = list_files(directory, logger)
        if config.english_file in files and config.indonesian_file in files:
            pairs.append(
                DocumentPair(
                    directory="root" if relative == "." else relative,
                    english=directory / config.english_file,
                    indonesian=directory / config.indonesian_file,
                )
            )
    return pairs


def find_lesson_documents(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> List[LessonDocument]:
    """Every README.md / README_ID.md directly inside a lesson directory."""
    documents = []
    for lesson in lesson_directories(config, logger):
        files = list_files(lesson.path, logger)
        for file_name, language in (
            (config.english_file, "en"),
            (config.indonesian_file, "id"),
        ):
            if file_name in files:
                documents.append(
                    LessonDocument(path=lesson.path / file_name, lesson=lesson.name, language=language)
                )
    return documents


def compare_outlines(english: List[Heading], indonesian: List[Heading]) -> Optional[str]:
    """
    Describe the first divergence between two heading outlines.

    Args:
        english: Headings of the English document
        indonesian: Headings of the Indonesian document

    Returns:
        None when the level sequences are identical, otherwise a message
        naming the 1-based heading position where they diverge
    """
    for position, (en, id_) in enumerate(zip(english, indonesian), start=1):
        if en.level != id_.level:
            return (
                f"Heading level mismatch at heading {position}: "
                f"EN level {en.level} ({en.text!r}, line {en.line_number}) vs "
                f"ID level {id_.level} ({id_.text!r}, line {id_.line_number})"
            )

    if len(english) != len(indonesian):
        return (
            f"Heading count mismatch (EN: {len(english)}, ID: {len(indonesian)}), "
            f"diverging at heading {min(len(english), len(indonesian)) + 1}"
        )
    return None


def check_parallel_structure(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 3: both documents of a pair share one heading level sequence.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per diverging pair
    """
    result = PropertyResult(
        key="parallel",
        title="Property 3: Parallel Markdown Structure",
        requirements=["2.2"],
    )
    pairs = find_document_pairs(config, logger)
    result.items_checked = len(pairs)
    result.notes.append(f"Checking {len(pairs)} bilingual file pairs for parallel structure")

    for pair in pairs:
        en_content = read_text(pair.english, logger)
        id_content = read_text(pair.indonesian, logger)
        if en_content is None or id_content is None:
            continue

        divergence = compare_outlines(
            extract_headings(en_content), extract_headings(id_content)
        )
        if divergence:
            result.add(
                pair.directory,
                divergence,
                file_path=pair.english,
                suggestion=f"Compare {pair.english} with {pair.indonesian}",
            )

    safe_logger(logger).log_debug(
        "Parallel structure checked",
        {"pairs": len(pairs), "violations": len(result.errors)},
    )
    return result


def check_language_links(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 4: each document of a pair mentions its counterpart file.

    Any textual mention of the counterpart filename counts; a markdown
    link is the usual form.
    """
    result = PropertyResult(
        key="language-links",
        title="Property 4: Language Navigation Links",
        requirements=["2.5"],
    )
    pairs = find_document_pairs(config, logger)
    result.items_checked = len(pairs)
    result.notes.append(f"Checking {len(pairs)} bilingual file pairs for language navigation links")

    for pair in pairs:
        for document, counterpart in (
            (pair.english, config.indonesian_file),
            (pair.indonesian, config.english_file),
        ):
            content = read_text(document, logger)
            if content is None:
                continue
            if counterpart not in content:
                result.add(
                    f"{pair.directory}/{document.name}",
                    f"Missing link to {counterpart}",
                    file_path=document,
                    suggestion=f"Add a language switcher such as [{counterpart}]({counterpart})",
                )

    safe_logger(logger).log_debug(
        "Language links checked",
        {"pairs": len(pairs), "violations": len(result.errors)},
    )
    return result


def missing_sections(content: str) -> List[str]:
    """
    List required section categories absent from a lesson document.

    Only level-2 headings count. The Best Practices / Common Mistakes
    pair is satisfied by either one.

    Args:
        content: Lesson document text

    Returns:
        Category names, in REQUIRED_SECTIONS order, then the alternative pair
    """
    section_titles = [h.text for h in extract_headings(content) if h.level == 2]

    def _present(pattern) -> bool:
        return any(pattern.match(title) for title in section_titles)

    missing = [name for name, pattern in REQUIRED_SECTIONS.items() if not _present(pattern)]
    if not any(_present(pattern) for pattern in ALTERNATIVE_SECTIONS.values()):
        missing.append(" OR ".join(ALTERNATIVE_SECTIONS))
    return missing


def check_required_sections(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> PropertyResult:
    """
    Property 5: lesson documents contain every required section.

    Args:
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        PropertyResult with one violation per missing category per file
    """
    result = PropertyResult(
        key="sections",
        title="Property 5: Required Lesson Sections",
        requirements=["4.1", "4.2", "4.3", "4.5", "4.6", "4.7"],
    )
    documents = find_lesson_documents(config, logger)
    result.items_checked = len(documents)
    result.notes.append(f"Checking {len(documents)} lesson files for required sections")

    for document in documents:
        content = read_text(document.path, logger)
        if content is None:
            continue
        for category in missing_sections(content):
            result.add(
                f"{document.lesson} ({document.language})",
                f'Missing "{category}" section',
                file_path=document.path,
            )

    safe_logger(logger).log_debug(
        "Required sections checked",
        {"documents": len(documents), "violations": len(result.errors)},
    )
    return result


CONTENT_CHECKS = [check_parallel_structure, check_language_links, check_required_sections]


def validate_content(
    config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """Run every content property against the module."""
    return run_checks("content", CONTENT_CHECKS, config, logger)
