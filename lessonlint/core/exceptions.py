#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for lessonlint.

Structural problems in the curriculum (bad names, missing translations,
broken navigation) are never raised: they are recorded as violations on a
PropertyResult. The exceptions below cover conditions that stop a command
before any check can run.

Exception Hierarchy:
    Exception (built-in)
    └── LessonLintError - Base for all lessonlint errors
        ├── ModuleRootError - Module root missing or not a directory
        └── ConfigError - Configuration file unreadable or malformed

Usage:
    from lessonlint.core.exceptions import ConfigError, ModuleRootError

    try:
        config = load_config(module_root, config_path)
    except ConfigError as e:
        handle_cli_error(ctx, e, "load_config")
"""


class LessonLintError(Exception):
    """
    Base exception for lessonlint errors.

    Catch this to handle any error raised by the package itself.
    """

    pass


class ModuleRootError(LessonLintError):
    """
    Raised when the curriculum module root does not exist.

    The module root must be present on disk before any check runs.

    Examples:
        >>> raise ModuleRootError("Module root not found: /tmp/rust-basics")
    """

    pass


class ConfigError(LessonLintError):
    """
    Raised when a lessonlint.yaml configuration file cannot be used.

    Covers YAML syntax errors, unknown keys and values of the wrong type.

    Examples:
        >>> raise ConfigError("Unknown configuration keys: excluded")
    """

    pass
