#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem scanning for curriculum modules.

Every check reads the module tree through these helpers. None of them
raise on I/O errors: an unreadable directory yields no entries and an
unreadable file yields None, after the problem is logged (the logger's
console handler shows it as a warning). One bad path must never abort a
validation run. Hidden entries (dotfiles, .git, .github) are never listed.

Functions:
    list_directories: Names of subdirectories of a path
    list_files: Names of regular files in a path
    read_text: UTF-8 content of a file, or None
    walk_directories: Recursive relative directory paths under a root
    find_markdown_files: Recursive *.md discovery

Usage:
    from lessonlint.utils.fs import list_files, read_text

    if "README.md" in list_files(lesson_dir):
        content = read_text(lesson_dir / "README.md")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Set

# --- Local imports ---
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger


def _report_io_error(
    message: str, error: Exception, logger: Optional[LessonLintLogger]
) -> None:
    safe_logger(logger).log_warning(message, {"error": str(error)})


def list_directories(
    path: Path, logger: Optional[LessonLintLogger] = None
) -> List[str]:
    """
    List visible subdirectory names of a directory, sorted.

    Args:
        path: Directory to list
        logger: Optional logger instance

    Returns:
        Directory names, or an empty list if path is unreadable
    """
    try:
        return sorted(
            entry.name
            for entry in Path(path).iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )
    except OSError as e:
        _report_io_error(f"Error reading directory {path}", e, logger)
        return []


def list_files(path: Path, logger: Optional[LessonLintLogger] = None) -> List[str]:
    """
    List visible regular file names of a directory, sorted.

    Args:
        path: Directory to list
        logger: Optional logger instance

    Returns:
        File names, or an empty list if path is unreadable
    """
    try:
        return sorted(
            entry.name
            for entry in Path(path).iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        )
    except OSError as e:
        _report_io_error(f"Error reading directory {path}", e, logger)
        return []


def read_text(path: Path, logger: Optional[LessonLintLogger] = None) -> Optional[str]:
    """
    Read a UTF-8 text file.

    Callers treat None as "skip this check for this file", never as a
    hard error.

    Args:
        path: File to read
        logger: Optional logger instance

    Returns:
        File content, or None on permission errors, broken symlinks or
        invalid encoding
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _report_io_error(f"Error reading file {path}", e, logger)
        return None


def is_excluded(relative_path: str, excluded: Iterable[str]) -> bool:
    """Check whether any component of a relative path is excluded."""
    excluded_set = set(excluded)
    return any(part in excluded_set for part in PurePosixPath(relative_path).parts)


def walk_directories(
    root: Path,
    excluded: Iterable[str] = (),
    logger: Optional[LessonLintLogger] = None,
    ignored_paths: Iterable[Path] = (),
) -> List[str]:
    """
    Recursively collect directories under root.

    Args:
        root: Directory to walk
        excluded: Directory names whose subtrees are skipped
        logger: Optional logger instance
        ignored_paths: Resolved directories whose subtrees are skipped

    Returns:
        Relative POSIX paths, depth-first, with "." (the root itself) first
    """
    excluded_set = set(excluded)
    ignored: Set[Path] = {Path(p).resolve() for p in ignored_paths}
    found = ["."]

    def _walk(current: Path, prefix: PurePosixPath) -> None:
        for name in list_directories(current, logger):
            if name in excluded_set:
                continue
            if ignored and (current / name).resolve() in ignored:
                continue
            relative = prefix / name
            found.append(str(relative))
            _walk(current / name, relative)

    _walk(Path(root), PurePosixPath())
    return found


def find_markdown_files(
    root: Path,
    logger: Optional[LessonLintLogger] = None,
    ignored_paths: Iterable[Path] = (),
) -> List[Path]:
    """
    Find markdown files recursively, skipping hidden dirs and node_modules.

    Args:
        root: Directory to search
        logger: Optional logger instance
        ignored_paths: Resolved directories whose subtrees are skipped

    Returns:
        Sorted list of absolute markdown file paths
    """
    root = Path(root)
    if not root.is_dir():
        return []

    results: List[Path] = []
    for relative in walk_directories(root, ("node_modules",), logger, ignored_paths):
        directory = root / relative if relative != "." else root
        results.extend(
            directory / name for name in list_files(directory, logger) if name.endswith(".md")
        )
    return sorted(results)
