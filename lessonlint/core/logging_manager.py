#!/usr/bin/env python3
"""
logging_manager.py
------------------
Logging for lessonlint validation runs.

A run writes two rotating files in its log directory:

    <component>.log   every operation, suite outcome and debug detail
    errors.log        crashed checks and CLI failures, with tracebacks

Only warnings reach the console; the coloured validation report is the
user-facing output.

Usage:
    from lessonlint.core.logging_manager import LessonLintLogger, safe_logger

    logger = LessonLintLogger(log_dir, "validators")
    logger.log_suite(suite)

    # in checks that accept logger=None
    safe_logger(logger).log_debug("Lesson naming checked", {"directories": 3})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LessonLintLogger:
    """
    File and console logging for one lessonlint component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Prefix of the logger names and of the main log file
        main_logger: Operations, suites, debug output (DEBUG and up)
        error_logger: Errors only, written to errors.log
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "lessonlint",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Component identifier, e.g. 'validators'
            max_bytes: Size at which a log file rotates (default: 5MB)
            backup_count: Rotated files kept per log (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._fresh_logger("operations", logging.DEBUG)
        self.error_logger = self._fresh_logger("errors", logging.ERROR)

        self._attach_file(self.main_logger, f"{component_name}.log", logging.DEBUG)
        self._attach_file(self.error_logger, "errors.log", logging.ERROR)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _fresh_logger(self, channel: str, level: int) -> logging.Logger:
        """Named logger for this component with any earlier handlers closed."""
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        return logger

    def _attach_file(self, logger: logging.Logger, filename: str, level: int) -> None:
        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    def _emit(
        self, level: int, tag: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        text = f"{tag} - {message}"
        if details:
            text = f"{text}: {json.dumps(details, default=str)}"
        # stacklevel points funcName/lineno at the caller of log_*
        self.main_logger.log(level, text, stacklevel=3)

    # ----- Public API -----

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a named step such as suite_start or structure_complete."""
        self._emit(logging.INFO, "OPERATION", operation, details or {})

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_suite(self, suite: Any) -> None:
        """
        Record the outcome of every property in a SuiteResult.

        Each property gets one INFO line with its item, error and warning counts.
        """
        for result in suite.results:
            details = {
                "suite": suite.name,
                "property": result.key,
                "items": result.items_checked,
                "errors": len(result.errors),
                "warnings": len(result.warnings),
            }
            outcome = "passed" if result.passed else "failed"
            self._emit(logging.INFO, "PROPERTY", f"{result.title} {outcome}", details)

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an exception, its context and the active traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Where it happened (suite, check, module root ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            pairs = ", ".join(f"{key}={value}" for key, value in context.items())
            self.error_logger.error(f"Context: {pairs}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error that ends a command and build its console message.

        Args:
            error: Exception that stopped the command
            context: Command context (operation, module root, config path)
            show_traceback: Append the traceback to the message (--verbose)

        Returns:
            One-line message, e.g. '❌ ModuleRootError: Module root not found: /x'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            message = f"{message}\n\n{traceback.format_exc()}"
        return message

    def close(self) -> None:
        """Close the file handlers so log files are released."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report an error that prevents a command from running and exit.

    The full error goes to errors.log; stderr gets the one-line message,
    plus the traceback when the group ran with --verbose.

    Args:
        ctx: Click context whose obj holds 'logger' and 'verbose'
        error: Exception raised before or while running suites
        operation: Command name (e.g. 'structure', 'all')
        additional_context: Extra fields for the log entry
        exit_code: Process exit code (default: 1)
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Stand-in used when a check runs without a LessonLintLogger."""

    def _ignore(self, *args: Any, **kwargs: Any) -> None:
        return None

    log_operation = log_debug = log_info = log_warning = _ignore
    log_suite = log_error = close = _ignore

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[LessonLintLogger]) -> LessonLintLogger:
    """
    The given logger, or a shared NullLogger when it is None.

    Lets checks write ``safe_logger(logger).log_debug(...)`` without
    guarding every call.
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
