#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for lessonlint.

The validators run against a curriculum module checked out somewhere on
disk, so nothing here is tied to the package location. The module root
defaults to the current working directory. Logs go to the per-user
application directory (``click.get_app_dir``) unless ``LESSONLINT_LOG_DIR``
or ``--log-dir`` points elsewhere.

The curriculum module layout being validated:
    MODULE_ROOT/
    ├── README.md / README_ID.md     # Module home (English / Indonesian)
    ├── 01-fundamentals/             # Lessons: NN-topic-name
    ├── 02-ownership-borrowing/
    ├── exercises/
    │   └── 01-variables-functions/  # Exercises: NN-topic-name
    │       ├── starter/
    │       └── solution/
    └── validation/                  # Tooling, never validated
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path

# --- Third party imports ---
import click


# ----- Curriculum file names -----
ENGLISH_README = "README.md"
INDONESIAN_README = "README_ID.md"
EXERCISES_DIRNAME = "exercises"
CONFIG_FILENAME = "lessonlint.yaml"


def default_module_root() -> Path:
    """Module root used when none is given on the command line."""
    return Path.cwd()


def default_log_dir() -> Path:
    """
    Log directory, overridable through LESSONLINT_LOG_DIR.

    Defaults to the per-user application directory so a run from inside a
    module never writes into the tree it validates.
    """
    env_dir = os.environ.get("LESSONLINT_LOG_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path(click.get_app_dir("lessonlint")) / "logs"
