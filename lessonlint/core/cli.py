#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for lessonlint commands.

Functions:
    setup_logger: Initialize LessonLintLogger for CLI operations

Classes:
    CheckStats: Counters and timing for one validation command

Usage:
    from lessonlint.core.cli import setup_logger, CheckStats

    logger = setup_logger(log_dir, "validators")
    stats = CheckStats()
    stats.properties_run += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from lessonlint.core.logging_manager import LessonLintLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> LessonLintLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a LessonLintLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically paths.default_log_dir())
        component_name: Component identifier for logging (e.g., 'validators')

    Returns:
        Configured LessonLintLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return LessonLintLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class CheckStats:
    """
    Statistics for a validation command.

    Attributes:
        suites_run: Number of suites executed
        properties_run: Number of properties evaluated
        properties_failed: Number of properties that reported errors
        items_checked: Directories, documents or lessons examined
        violations: Total error-severity violations
        warnings: Total warning-severity entries
        start_time: Command start timestamp
    """
    suites_run: int = 0
    properties_run: int = 0
    properties_failed: int = 0
    items_checked: int = 0
    violations: int = 0
    warnings: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def record(self, suite: Any) -> None:
        """
        Fold a SuiteResult into the counters.

        Args:
            suite: SuiteResult returned by the runner
        """
        self.suites_run += 1
        for result in suite.results:
            self.properties_run += 1
            self.items_checked += result.items_checked
            self.violations += len(result.errors)
            self.warnings += len(result.warnings)
            if not result.passed:
                self.properties_failed += 1

    def summary(self) -> str:
        """Human-readable summary of the run."""
        return (
            f"{self.suites_run} suites, "
            f"{self.properties_run} properties "
            f"({self.properties_failed} failed), "
            f"{self.items_checked} items checked, "
            f"{self.violations} violations, "
            f"{self.warnings} warnings, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for log output."""
        return {
            "suites_run": self.suites_run,
            "properties_run": self.properties_run,
            "properties_failed": self.properties_failed,
            "items_checked": self.items_checked,
            "violations": self.violations,
            "warnings": self.warnings,
            "duration": self.duration(),
        }
