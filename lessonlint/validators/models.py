#!/usr/bin/env python3
"""
models.py
---------
Result and entity dataclasses shared by the curriculum validators.

Checks are pure functions returning a PropertyResult; a suite bundles the
results of one command. Nothing here is persisted: results are built per
run and discarded after the report is printed.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class Violation:
    """A rule broken by a directory, document or lesson."""

    entity: str
    message: str
    severity: str = "error"  # error, warning
    file_path: Optional[Path] = None
    line_number: Optional[int] = None
    suggestion: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


@dataclass
class PropertyResult:
    """
    Outcome of one property over every item it checked.

    Attributes:
        key: Short identifier used in summaries (e.g. "naming")
        title: Header shown in the report
        requirements: Requirement IDs the property covers
        items_checked: Number of directories/documents/lessons examined
        violations: Errors and warnings, in discovery order
        notes: Informational lines printed under the header
    """

    key: str
    title: str
    requirements: List[str] = field(default_factory=list)
    items_checked: int = 0
    violations: List[Violation] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def add(
        self,
        entity: str,
        message: str,
        severity: str = "error",
        **details,
    ) -> Violation:
        """Record a violation and return it."""
        violation = Violation(entity=entity, message=message, severity=severity, **details)
        self.violations.append(violation)
        return violation

    def warn(self, entity: str, message: str, **details) -> Violation:
        """Record a warning-severity entry."""
        return self.add(entity, message, severity="warning", **details)

    @property
    def errors(self) -> List[Violation]:
        return [v for v in self.violations if v.is_error]

    @property
    def warnings(self) -> List[Violation]:
        return [v for v in self.violations if not v.is_error]

    @property
    def passed(self) -> bool:
        """A property passes when it recorded no errors."""
        return not self.errors


@dataclass
class SuiteResult:
    """Results of every property run by one command."""

    name: str
    module_root: Path
    results: List[PropertyResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


# ----- Curriculum entities -----

@dataclass(frozen=True)
class LessonDirectory:
    """A numbered lesson (or exercise) directory."""

    name: str
    path: Path


@dataclass(frozen=True)
class DocumentPair:
    """English and Indonesian documents sharing a directory."""

    directory: str
    english: Path
    indonesian: Path


@dataclass(frozen=True)
class ExerciseDirectory:
    """An exercise directory and its optional code scaffolding."""

    name: str
    path: Path
    has_starter: bool
    has_solution: bool


@dataclass(frozen=True)
class NavLink:
    """A labelled navigation link such as **Next**: [text](target)."""

    label: str
    text: str
    target: str


@dataclass
class NavigationLinkSet:
    """Previous/next/home links detected in one lesson document."""

    previous: Optional[NavLink] = None
    next: Optional[NavLink] = None
    home: Optional[NavLink] = None
