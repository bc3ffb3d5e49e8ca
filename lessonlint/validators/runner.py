#!/usr/bin/env python3
"""
runner.py
---------
Suite registry and orchestration.

Core suites cover the module conventions (structure, content, exercises,
navigation). Extended suites add link, formatting and attribution checks
over every markdown file in the module.

Usage:
    from lessonlint.validators.runner import run_all

    suites = run_all(config, logger)
    exit_code = 0 if all(s.passed for s in suites) else 1
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Callable, Dict, Iterable, List, Optional

# --- Local imports ---
from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.validators.attribution import validate_attribution
from lessonlint.validators.content import validate_content
from lessonlint.validators.exercises import validate_exercises
from lessonlint.validators.formatting import validate_formatting
from lessonlint.validators.links import validate_links
from lessonlint.validators.models import SuiteResult
from lessonlint.validators.navigation import validate_navigation
from lessonlint.validators.structure import validate_structure

Suite = Callable[[ValidatorConfig, Optional[LessonLintLogger]], SuiteResult]

SUITES: Dict[str, Suite] = {
    "structure": validate_structure,
    "content": validate_content,
    "exercises": validate_exercises,
    "navigation": validate_navigation,
    "links": validate_links,
    "formatting": validate_formatting,
    "attribution": validate_attribution,
}

CORE_SUITES = ["structure", "content", "exercises", "navigation"]
EXTENDED_SUITES = ["links", "formatting", "attribution"]


def run_suite(
    name: str, config: ValidatorConfig, logger: Optional[LessonLintLogger] = None
) -> SuiteResult:
    """
    Run one registered suite.

    Args:
        name: Key in SUITES
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        The suite's results

    Raises:
        KeyError: If name is not a registered suite
    """
    if name not in SUITES:
        raise KeyError(f"Unknown validation suite: {name}")
    safe_logger(logger).log_info(f"Running {name} validation", {"module_root": config.module_root})
    return SUITES[name](config, logger)


def run_all(
    config: ValidatorConfig,
    logger: Optional[LessonLintLogger] = None,
    names: Optional[Iterable[str]] = None,
) -> List[SuiteResult]:
    """
    Run several suites in order; a failing suite never stops the next.

    Args:
        config: Validator configuration
        logger: Optional logger instance
        names: Suites to run (default: CORE_SUITES)

    Returns:
        One SuiteResult per suite
    """
    config.ensure_module_root()
    return [run_suite(name, config, logger) for name in (names or CORE_SUITES)]
