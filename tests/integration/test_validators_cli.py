#!/usr/bin/env python3
"""
Integration tests for validators CLI.

Runs the lessonlint commands against a module built in a temporary
directory and checks output and exit codes.
"""
import os
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from lessonlint.validators.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, module_root, tmp_path):
    """Invoke the CLI against the valid module with logs under tmp_path."""

    def _invoke(*args, root=None):
        return runner.invoke(
            cli,
            [
                "--module-root",
                str(root or module_root),
                "--log-dir",
                str(tmp_path / "logs"),
                *args,
            ],
        )

    return _invoke


class TestValidatorsCLIBasics:
    """Test basic validators CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "curriculum" in result.output.lower()
        for command in ("structure", "content", "exercises", "navigation", "links", "all"):
            assert command in result.output

    def test_all_help_mentions_extended(self, runner):
        result = runner.invoke(cli, ["all", "--help"])
        assert result.exit_code == 0
        assert "--extended" in result.output


class TestValidModule:
    """Every command passes on a valid module."""

    @pytest.mark.parametrize(
        "command",
        ["structure", "content", "exercises", "navigation", "links", "formatting", "attribution"],
    )
    def test_single_suite_passes(self, invoke, command):
        result = invoke(command)
        assert result.exit_code == 0, result.output
        assert f"All {command} validations passed!" in result.output

    def test_all_core_suites(self, invoke):
        result = invoke("all")
        assert result.exit_code == 0, result.output
        assert "Overall Summary" in result.output
        assert "4/4 suites passed" in result.output

    def test_all_extended(self, invoke):
        result = invoke("all", "--extended")
        assert result.exit_code == 0, result.output
        assert "7/7 suites passed" in result.output

    def test_log_written(self, invoke, tmp_path):
        invoke("structure")
        log_file = tmp_path / "logs" / "operations" / "validators.log"
        assert log_file.is_file()
        assert "structure_complete" in log_file.read_text(encoding="utf-8")


class TestFailures:
    """Violations produce a report and exit code 1."""

    def test_missing_translation(self, invoke, module_root):
        (module_root / "01-fundamentals" / "README_ID.md").unlink()

        result = invoke("structure")
        assert result.exit_code == 1
        assert "01-fundamentals: Found README.md but missing README_ID.md" in result.output
        assert "Property 2: Bilingual File Pairs FAILED" in result.output

    def test_all_continues_after_failure(self, invoke, module_root):
        (module_root / "1-fundamentals").mkdir()

        result = invoke("all")
        assert result.exit_code == 1
        assert "Invalid directory name: 1-fundamentals" in result.output
        assert "All navigation validations passed!" in result.output
        assert "3/4 suites passed" in result.output

    def test_navigation_inconsistency(self, invoke, module_root, lesson_doc, write_file):
        write_file(
            module_root / "03-structs-enums" / "README.md",
            lesson_doc("03-structs-enums", "en", previous="01-fundamentals"),
        )

        result = invoke("navigation")
        assert result.exit_code == 1
        assert "Inconsistent navigation: 02-ownership-borrowing links Next to 03-structs-enums" in result.output

    def test_missing_module_root(self, invoke, tmp_path):
        result = invoke("structure", root=tmp_path / "missing")
        assert result.exit_code == 1
        assert "ModuleRootError" in result.output

    def test_invalid_config(self, invoke, module_root):
        (module_root / "lessonlint.yaml").write_text("unknown_key: 1\n", encoding="utf-8")

        result = invoke("structure")
        assert result.exit_code == 1
        assert "ConfigError" in result.output

    def test_explicit_config(self, runner, module_root, tmp_path):
        (module_root / "drafts").mkdir()
        config_file = tmp_path / "lessonlint.yaml"
        config_file.write_text(
            "excluded_dirs: [exercises, validation, drafts]\n", encoding="utf-8"
        )

        result = runner.invoke(
            cli,
            [
                "--module-root",
                str(module_root),
                "--config",
                str(config_file),
                "--log-dir",
                str(tmp_path / "logs"),
                "structure",
            ],
        )
        assert result.exit_code == 0, result.output


class TestLogLocation:
    """Logs never end up inside the module being validated."""

    def test_default_run_from_module_root(self, module_root, tmp_path):
        """`lessonlint structure` with no options, run inside the module."""
        env = {
            key: value for key, value in os.environ.items() if key != "LESSONLINT_LOG_DIR"
        }
        env["HOME"] = str(tmp_path / "home")
        env["XDG_CONFIG_HOME"] = str(tmp_path / "config")
        env["PYTHONIOENCODING"] = "utf-8"
        repo_root = str(Path(__file__).resolve().parents[2])
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [repo_root, env.get("PYTHONPATH")])
        )

        result = subprocess.run(
            [sys.executable, "-m", "lessonlint", "structure"],
            cwd=module_root,
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )

        assert result.returncode == 0, result.stdout + result.stderr
        assert "All structure validations passed!" in result.stdout
        assert not (module_root / "logs").exists()

    def test_log_dir_inside_module_is_skipped(self, runner, module_root):
        log_dir = module_root / "logs"

        result = runner.invoke(
            cli,
            ["--module-root", str(module_root), "--log-dir", str(log_dir), "all", "--extended"],
        )

        assert result.exit_code == 0, result.output
        assert "7/7 suites passed" in result.output
        assert (log_dir / "operations" / "validators.log").is_file()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
