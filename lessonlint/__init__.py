"""
LessonLint
==========

Validators for bilingual (English / Indonesian) markdown curriculum modules.

A module is a directory of numbered lessons (``01-introduction``,
``02-ownership`` ...), each holding a README.md and its README_ID.md
translation, plus an ``exercises/`` directory. The validators check that
layout, the parity of the two languages, lesson sections, exercises and
the navigation chain between lessons.

Main Components:
    - validators: Check suites, result models, report formatting and CLI
    - core: Logging, configuration, paths, exceptions
    - utils: Filesystem scanning and markdown parsing

Primary Interfaces:
    - lessonlint.validators.cli: ``lessonlint`` command
    - lessonlint.validators.runner.run_all: Programmatic entry point

Example Usage:
    >>> from pathlib import Path
    >>> from lessonlint.core.config import load_config
    >>> from lessonlint.validators.runner import run_all
    >>> suites = run_all(load_config(Path("rust-basics")))
    >>> all(suite.passed for suite in suites)
    True
"""

__version__ = "1.0.0"
