"""
Validators CLI Package
----------------------

Unified CLI for the curriculum validators.

Each command runs one suite of checks against a curriculum module and
exits 1 when any property fails. ``all`` runs the core suites together
and prints an aggregate summary.

Available commands:
    - structure: Lesson naming, bilingual file pairs, module skeleton
    - content: Heading parity, language links, required lesson sections
    - exercises: Exercise instructions, lesson references, criteria
    - navigation: Previous/Next/Module Home links between lessons
    - links: Internal markdown link integrity
    - formatting: Heading hierarchy, code fences, list indentation
    - attribution: Source attribution on substantial documents
    - all: Core suites (plus extended ones with --extended)

Usage:
    lessonlint --module-root Learning_Module/rust-basics structure
    lessonlint all --extended
"""
# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from lessonlint.core.paths import default_log_dir, default_module_root

from .module import structure, content, exercises, navigation, all_suites
from .markdown import links, formatting, attribution


@click.group()
@click.option(
    "--module-root",
    type=click.Path(file_okay=False),
    default=None,
    help="Curriculum module to validate (default: current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file (default: <module-root>/lessonlint.yaml)",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for log files (default: per-user lessonlint directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(
    ctx: click.Context,
    module_root: Optional[str],
    config_path: Optional[str],
    log_dir: Optional[str],
    verbose: bool,
) -> None:
    """
    Curriculum Validation Suite.

    Validate directory naming, bilingual document pairs, lesson sections,
    exercises and lesson navigation of a markdown curriculum module.
    """
    from lessonlint.core.cli import setup_logger

    ctx.ensure_object(dict)
    ctx.obj["module_root"] = Path(module_root) if module_root else default_module_root()
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["log_dir"] = Path(log_dir) if log_dir else default_log_dir()
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(ctx.obj["log_dir"], "validators")
    ctx.call_on_close(ctx.obj["logger"].close)


cli.add_command(structure)
cli.add_command(content)
cli.add_command(exercises)
cli.add_command(navigation)
cli.add_command(links)
cli.add_command(formatting)
cli.add_command(attribution)
cli.add_command(all_suites)


if __name__ == "__main__":
    cli()
