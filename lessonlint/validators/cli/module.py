"""
Module Convention Commands
--------------------------

Commands for the conventions every curriculum module follows.

Commands:
    - structure: Lesson directory naming and bilingual file pairs
    - content: Parallel headings, language links, required sections
    - exercises: Exercise instructions, lesson references, criteria
    - navigation: Previous/Next/Module Home links and their consistency
    - all: Run the core suites (and the markdown suites with --extended)
"""
import click

from .common import execute_suites


@click.command()
@click.pass_context
def structure(ctx: click.Context) -> None:
    """
    Validate directory structure.

    Checks for:
    - README.md / README_ID.md at the module root
    - Lesson directories named NN-kebab-case
    - Every directory with README.md also has README_ID.md (and vice versa)
    """
    execute_suites(ctx, ["structure"], "structure")


@click.command()
@click.pass_context
def content(ctx: click.Context) -> None:
    """
    Validate bilingual lesson content.

    Checks for:
    - Identical heading outline in English and Indonesian documents
    - Links between each document and its language counterpart
    - Required lesson sections in both languages
    """
    execute_suites(ctx, ["content"], "content")


@click.command()
@click.pass_context
def exercises(ctx: click.Context) -> None:
    """
    Validate exercises.

    Checks for:
    - README.md and README_ID.md in every exercise
    - References to the lessons an exercise practises
    - Validation or success criteria
    """
    execute_suites(ctx, ["exercises"], "exercises")


@click.command()
@click.pass_context
def navigation(ctx: click.Context) -> None:
    """
    Validate lesson navigation.

    Every lesson links to the previous lesson, the next lesson and the
    module home, in both languages, and consecutive lessons agree.
    """
    execute_suites(ctx, ["navigation"], "navigation")


@click.command(name="all")
@click.option(
    "--extended", is_flag=True, help="Also run links, formatting and attribution checks"
)
@click.pass_context
def all_suites(ctx: click.Context, extended: bool) -> None:
    """
    Run all validation suites.

    Structure, content, exercises and navigation run by default; each
    suite runs even when an earlier one fails.
    """
    from lessonlint.validators.runner import CORE_SUITES, EXTENDED_SUITES

    names = CORE_SUITES + (EXTENDED_SUITES if extended else [])
    execute_suites(ctx, names, "all")
