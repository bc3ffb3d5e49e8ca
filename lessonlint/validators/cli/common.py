"""
Shared execution path for validator commands.

Loads the module configuration from the group context, runs the requested
suites, prints their reports and exits 1 when any property failed.
"""
from typing import List

import click

from lessonlint.core.exceptions import LessonLintError
from lessonlint.core.logging_manager import handle_cli_error


def execute_suites(ctx: click.Context, names: List[str], operation: str) -> None:
    """
    Run suites for a command and report them.

    Args:
        ctx: Click context populated by the ``cli`` group
        names: Suite names from the runner registry, in run order
        operation: Command name used in logs and error output

    Raises:
        SystemExit: With code 1 when any property failed
    """
    from lessonlint.core.cli import CheckStats
    from lessonlint.core.config import load_config
    from lessonlint.validators.report import format_overall_summary, format_suite_report
    from lessonlint.validators.runner import run_all

    module_root = ctx.obj["module_root"]
    config_path = ctx.obj.get("config_path")
    logger = ctx.obj["logger"]
    stats = CheckStats()

    try:
        config = load_config(module_root, config_path)
        config.ignore_path(ctx.obj["log_dir"])
        suites = run_all(config, logger, names)
    except LessonLintError as e:
        handle_cli_error(
            ctx,
            e,
            operation,
            {"module_root": str(module_root), "config_path": str(config_path)},
        )
        return

    for suite in suites:
        stats.record(suite)
        logger.log_suite(suite)
        click.echo(format_suite_report(suite))

    if len(suites) > 1:
        click.echo(format_overall_summary(suites))

    logger.log_operation(f"{operation}_complete", stats.to_dict())
    click.echo(click.style(f"\n{stats.summary()}", dim=True))

    if not all(suite.passed for suite in suites):
        raise SystemExit(1)
