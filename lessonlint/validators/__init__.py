#!/usr/bin/env python3
"""
validators
----------
Validation suites for curriculum modules.

Each suite module contains pure check functions that take a
ValidatorConfig and return a PropertyResult, plus a ``validate_*``
function that runs its checks as a SuiteResult:

- structure: Lesson naming, bilingual file pairs, module skeleton
- content: Heading parity, language links, required sections
- exercises: Exercise instructions, lesson references, criteria
- navigation: Previous/Next/Module Home links
- links, formatting, attribution: Checks over every markdown file

Usage:
    # Through CLI
    lessonlint structure
    lessonlint all --extended

    # Direct import for programmatic use
    from lessonlint.validators.structure import validate_structure
    from lessonlint.validators.runner import run_all
"""

__all__ = [
    "runner",
    "models",
    "report",
]
