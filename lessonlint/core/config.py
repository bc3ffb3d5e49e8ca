#!/usr/bin/env python3
"""
config.py
---------
Validator configuration for a curriculum module.

Defaults describe the conventional bilingual module layout. A module can
adjust them with a ``lessonlint.yaml`` file at its root (or any file passed
with ``--config``):

    excluded_dirs:
      - exercises
      - validation
      - drafts
    min_attribution_length: 800

Only the keys of ValidatorConfig (other than module_root) are accepted.

Usage:
    from lessonlint.core.config import load_config

    config = load_config(Path("Learning_Module/rust-basics"))
    config.exercises_root  # .../rust-basics/exercises
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from lessonlint.core.exceptions import ConfigError, ModuleRootError
from lessonlint.core.paths import (
    CONFIG_FILENAME,
    ENGLISH_README,
    EXERCISES_DIRNAME,
    INDONESIAN_README,
)


@dataclass
class ValidatorConfig:
    """
    Settings shared by every check.

    Attributes:
        module_root: Root directory of the curriculum module under test
        english_file: Name of the English document in a directory
        indonesian_file: Name of the Indonesian counterpart
        exercises_dir: Directory (under module_root) holding exercises
        excluded_dirs: Top-level directories that are not lessons
        scan_excluded: Path components skipped when walking the tree
        pair_excluded: Extra components skipped when collecting document pairs
        attribution_excluded: File names exempt from the attribution check
        min_attribution_length: Shorter documents are not checked for attribution
        ignored_paths: Resolved directories inside the module that belong to
            the tool itself (a log directory), skipped by every scan
    """
    module_root: Path
    english_file: str = ENGLISH_README
    indonesian_file: str = INDONESIAN_README
    exercises_dir: str = EXERCISES_DIRNAME
    excluded_dirs: List[str] = field(
        default_factory=lambda: ["exercises", "validation", ".git", "node_modules"]
    )
    scan_excluded: List[str] = field(
        default_factory=lambda: ["validation", ".git", "node_modules"]
    )
    pair_excluded: List[str] = field(default_factory=lambda: ["starter", "solution"])
    attribution_excluded: List[str] = field(
        default_factory=lambda: ["GLOSSARY.md", "SOURCES.md", "CONTENT_INDEX.md", "tasks.md"]
    )
    min_attribution_length: int = 500
    ignored_paths: List[Path] = field(default_factory=list)

    @property
    def exercises_root(self) -> Path:
        """Absolute path of the exercises directory."""
        return self.module_root / self.exercises_dir

    def ensure_module_root(self) -> None:
        """
        Check the module root exists.

        Raises:
            ModuleRootError: If module_root is missing or not a directory
        """
        if not self.module_root.is_dir():
            raise ModuleRootError(f"Module root not found: {self.module_root}")

    def ignore_path(self, path: Path) -> None:
        """Skip path in every scan when it lies inside the module root."""
        resolved = Path(path).resolve()
        root = self.module_root.resolve()
        if resolved == root or not resolved.is_relative_to(root):
            return
        if resolved not in self.ignored_paths:
            self.ignored_paths.append(resolved)


_LIST_KEYS = {"excluded_dirs", "scan_excluded", "pair_excluded", "attribution_excluded"}
_STR_KEYS = {"english_file", "indonesian_file", "exercises_dir"}
_INT_KEYS = {"min_attribution_length"}


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration mapping.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(data).__name__}")
    return data


def _coerce(key: str, value: Any, config_path: Path) -> Any:
    """Validate one configuration value against its expected type."""
    if key in _LIST_KEYS:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"'{key}' in {config_path} must be a list of strings")
        return list(value)
    if key in _STR_KEYS:
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"'{key}' in {config_path} must be a non-empty string")
        return value.strip()
    if key in _INT_KEYS:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"'{key}' in {config_path} must be a non-negative integer")
        return value
    raise ConfigError(f"Unsupported configuration key '{key}' in {config_path}")


def load_config(
    module_root: Path, config_path: Optional[Path] = None
) -> ValidatorConfig:
    """
    Build a ValidatorConfig for a module.

    Args:
        module_root: Curriculum module root
        config_path: Explicit YAML file; defaults to <module_root>/lessonlint.yaml
            when that file exists

    Returns:
        ValidatorConfig with file overrides applied

    Raises:
        ConfigError: If the configuration file is invalid
    """
    module_root = Path(module_root).resolve()
    if config_path is None:
        candidate = module_root / CONFIG_FILENAME
        config_path = candidate if candidate.is_file() else None

    if config_path is None:
        return ValidatorConfig(module_root=module_root)

    config_path = Path(config_path)
    data = _read_yaml(config_path)

    known = {f.name for f in fields(ValidatorConfig)} - {"module_root", "ignored_paths"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys in {config_path}: {', '.join(unknown)}"
        )

    overrides = {key: _coerce(key, value, config_path) for key, value in data.items()}
    return ValidatorConfig(module_root=module_root, **overrides)
