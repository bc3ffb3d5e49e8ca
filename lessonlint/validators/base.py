#!/usr/bin/env python3
"""
base.py
-------
Shared execution for validator suites.

A suite is an ordered list of check functions, each taking
``(config, logger)`` and returning a PropertyResult. A check that raises
is recorded as a failed property and the remaining checks still run.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Callable, List, Optional

# --- Local imports ---
from lessonlint.core.config import ValidatorConfig
from lessonlint.core.logging_manager import LessonLintLogger, safe_logger
from lessonlint.validators.models import PropertyResult, SuiteResult

Check = Callable[[ValidatorConfig, Optional[LessonLintLogger]], PropertyResult]


def run_checks(
    name: str,
    checks: List[Check],
    config: ValidatorConfig,
    logger: Optional[LessonLintLogger] = None,
) -> SuiteResult:
    """
    Run checks in order and collect their results.

    Args:
        name: Suite name used in logs and the summary
        checks: Check functions to run
        config: Validator configuration
        logger: Optional logger instance

    Returns:
        SuiteResult with one PropertyResult per check
    """
    log = safe_logger(logger)
    suite = SuiteResult(name=name, module_root=config.module_root)
    log.log_operation("suite_start", {"suite": name, "module_root": config.module_root})

    for check in checks:
        try:
            result = check(config, logger)
        except Exception as e:
            log.log_error(e, {"suite": name, "check": check.__name__})
            result = PropertyResult(key=check.__name__, title=check.__name__)
            result.add(check.__name__, f"Check crashed: {type(e).__name__}: {e}")
        suite.results.append(result)

    log.log_operation(
        "suite_end",
        {"suite": name, "passed": suite.passed_count, "total": suite.total},
    )
    return suite
