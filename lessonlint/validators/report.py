#!/usr/bin/env python3
"""
report.py
---------
Console report formatting for validation results.

Each property prints a header naming it and the requirements it covers,
one line per violation (✗ error, ⚠ warning), and a PASSED/FAILED line.
Suites end with a summary table. Colours come from click.style and are
stripped by click.echo when the output is not a terminal.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List

# --- Third party imports ---
import click

# --- Local imports ---
from lessonlint.validators.models import PropertyResult, SuiteResult

RULE = "═" * 63


def _mark(ok: bool) -> str:
    return click.style("✓", fg="green") if ok else click.style("✗", fg="red")


def _status(ok: bool) -> str:
    return click.style("PASSED", fg="green") if ok else click.style("FAILED", fg="red")


def format_banner(suite_name: str, module_root) -> str:
    """Opening banner for a suite."""
    title = f"Curriculum Module - {suite_name.title()} Validation"
    lines = [
        click.style("╔" + "═" * 64 + "╗", fg="blue"),
        click.style(f"║  {title:<62}║", fg="blue"),
        click.style("╚" + "═" * 64 + "╝", fg="blue"),
        "",
        f"Module Path: {module_root}",
    ]
    return "\n".join(lines)


def format_property_report(result: PropertyResult) -> str:
    """
    Format one property's outcome.

    Args:
        result: Property result to format

    Returns:
        Multi-line report string
    """
    lines = ["", click.style(f"=== {result.title} ===", fg="cyan")]
    if result.requirements:
        lines.append(f"Validates: Requirements {', '.join(result.requirements)}")
    lines.append("")
    lines.extend(result.notes)

    for violation in result.violations:
        if violation.is_error:
            glyph = click.style("✗", fg="red")
        else:
            glyph = click.style("⚠", fg="yellow")
        location = f":{violation.line_number}" if violation.line_number and violation.file_path else ""
        lines.append(f"  {glyph} {violation.entity}{location}: {violation.message}")
        if violation.suggestion:
            lines.append(f"    {violation.suggestion}")

    if result.passed:
        lines.append(click.style(f"✓ {result.title} PASSED", fg="green"))
    else:
        lines.append(
            click.style(
                f"✗ {result.title} FAILED: {len(result.errors)} violation(s)", fg="red"
            )
        )
    return "\n".join(lines)


def format_suite_summary(suite: SuiteResult) -> str:
    """Summary block listing every property of a suite."""
    lines = ["", click.style(RULE, fg="blue"), click.style("Summary", fg="blue"), ""]
    for result in suite.results:
        lines.append(f"{result.title}: {_status(result.passed)}")

    lines.append("")
    lines.append(f"{suite.passed_count}/{suite.total} checks passed")
    if suite.passed:
        lines.append(click.style(f"\n✓ All {suite.name} validations passed!", fg="green"))
    else:
        lines.append(
            click.style(
                "\n✗ Some validations failed. Please review the output above.", fg="red"
            )
        )
    return "\n".join(lines)


def format_overall_summary(suites: List[SuiteResult]) -> str:
    """Aggregate table for a multi-suite run."""
    width = max((len(suite.name) for suite in suites), default=5) + 2
    lines = [
        "",
        click.style(RULE, fg="blue"),
        click.style("Overall Summary", fg="blue"),
        "",
        f"  {'Suite':<{width}}{'Checks':>8}  Status",
    ]
    for suite in suites:
        checks = f"{suite.passed_count}/{suite.total}"
        lines.append(f"{_mark(suite.passed)} {suite.name:<{width}}{checks:>8}  {_status(suite.passed)}")

    passed = sum(1 for suite in suites if suite.passed)
    lines.append("")
    lines.append(f"{passed}/{len(suites)} suites passed")
    return "\n".join(lines)


def format_suite_report(suite: SuiteResult) -> str:
    """Banner, every property report and the suite summary."""
    parts = [format_banner(suite.name, suite.module_root)]
    parts.extend(format_property_report(result) for result in suite.results)
    parts.append(format_suite_summary(suite))
    return "\n".join(parts)
