"""
Markdown Validation Commands
----------------------------

Commands that check every markdown file in the module, not only lessons.

Commands:
    - links: Broken internal links and missing anchors
    - formatting: Heading hierarchy, code fences, list indentation
    - attribution: Source attribution on substantial documents
"""
import click

from .common import execute_suites


@click.command()
@click.pass_context
def links(ctx: click.Context) -> None:
    """
    Check for broken internal markdown links.

    Validates that relative links point to existing files and that
    #anchors match a heading in the target. External links
    (http://, https://, mailto:) are skipped.
    """
    execute_suites(ctx, ["links"], "links")


@click.command()
@click.pass_context
def formatting(ctx: click.Context) -> None:
    """
    Check markdown formatting consistency.

    Skipped heading levels and broken code fences fail the check;
    untagged code blocks and odd list indentation are reported as warnings.
    """
    execute_suites(ctx, ["formatting"], "formatting")


@click.command()
@click.pass_context
def attribution(ctx: click.Context) -> None:
    """
    Check source attribution.

    Documents of substantial length must name the source they were
    adapted from. Glossary and index files are exempt.
    """
    execute_suites(ctx, ["attribution"], "attribution")
