"""
Tests for the module-wide markdown checks.

Covers internal link integrity, formatting consistency and source
attribution over every markdown file of a module.
"""
import pytest

from lessonlint.validators.attribution import (
    attribution_indicators,
    check_source_attribution,
)
from lessonlint.validators.formatting import (
    check_markdown_formatting,
    code_block_issues,
    formatting_issues,
    heading_issues,
    list_issues,
)
from lessonlint.validators.links import check_internal_links, validate_links


class TestInternalLinks:
    """Tests for check_internal_links."""

    def test_valid_module_passes(self, config):
        result = check_internal_links(config)
        assert result.passed
        assert result.items_checked > 0

    def test_broken_file_link(self, config, write_file):
        write_file(config.module_root / "GLOSSARY.md", "# Glossary\n\nSee [Traits](04-traits/README.md).\n")

        result = check_internal_links(config)
        assert len(result.errors) == 1
        violation = result.errors[0]
        assert violation.entity == "GLOSSARY.md"
        assert violation.message == "File not found: [Traits](04-traits/README.md)"
        assert violation.line_number == 3

    def test_anchor_resolution(self, config, write_file):
        write_file(
            config.module_root / "GLOSSARY.md",
            "# Glossary\n\n## Borrow Checker\n\n"
            "[Overview](01-fundamentals/README.md#overview)\n"
            "[Self](#borrow-checker)\n"
            "[Missing](01-fundamentals/README.md#lifetimes)\n",
        )

        result = check_internal_links(config)
        assert [v.message for v in result.errors] == [
            "Anchor '#lifetimes' not found in target file: "
            "[Missing](01-fundamentals/README.md#lifetimes)"
        ]

    def test_external_and_code_links_skipped(self, config, write_file):
        write_file(
            config.module_root / "SOURCES.md",
            "# Sources\n\n[Book](https://doc.rust-lang.org/book/)\n"
            "[Mail](mailto:team@example.com)\n\n```md\n[x](nowhere.md)\n```\n",
        )
        assert check_internal_links(config).passed

    def test_link_title_and_directory_targets(self, config, write_file):
        write_file(
            config.module_root / "SOURCES.md",
            '# Sources\n\n[Lesson](01-fundamentals/README.md "Fundamentals")\n'
            "[Exercises](exercises/)\n",
        )
        assert check_internal_links(config).passed

    def test_suite_wraps_check(self, config):
        suite = validate_links(config)
        assert suite.name == "links"
        assert [r.key for r in suite.results] == ["links"]


class TestFormattingRules:
    """Tests for the per-document formatting rules."""

    def test_skipped_heading_level(self):
        issues = heading_issues("# Title\n### Too deep\n## Fine\n#### Skip again\n")
        assert [(i.line_number, i.severity) for i in issues] == [(2, "error"), (4, "error")]
        assert issues[0].message == "Heading level skipped from 1 to 3"

    def test_going_back_up_is_fine(self):
        assert heading_issues("# A\n## B\n### C\n# D\n## E\n") == []

    def test_code_block_without_language_warns(self):
        issues = code_block_issues("```\ncode\n```\n")
        assert [(i.line_number, i.severity) for i in issues] == [(1, "warning")]

    def test_decorated_closing_fence(self):
        issues = code_block_issues("```rust\nfn main() {}\n```rust\n")
        assert [(i.line_number, i.severity) for i in issues] == [(3, "error")]

    def test_unclosed_fence(self):
        issues = code_block_issues("text\n```rust\nfn main() {}\n")
        assert [(i.line_number, i.message) for i in issues] == [
            (2, "Code block opened but never closed")
        ]

    @pytest.mark.parametrize(
        "line,flagged",
        [("- item", False), ("  - nested", False), (" - odd", True), ("   1. odd", True)],
    )
    def test_list_indentation(self, line, flagged):
        issues = list_issues(f"{line}\n")
        assert bool(issues) is flagged
        assert all(i.severity == "warning" for i in issues)

    def test_lists_in_code_blocks_ignored(self):
        assert list_issues("```yaml\n   - odd: indent\n```\n") == []

    def test_issues_sorted_by_line(self):
        content = " - odd\n# A\n### B\n```\nx\n```\n"
        assert [i.line_number for i in formatting_issues(content)] == [1, 3, 4]


class TestMarkdownFormatting:
    """Tests for check_markdown_formatting."""

    def test_valid_module_passes(self, config):
        result = check_markdown_formatting(config)
        assert result.passed
        assert result.violations == []

    def test_warnings_do_not_fail(self, config, write_file):
        write_file(config.module_root / "NOTES.md", "# Notes\n\n```\nplain\n```\n")

        result = check_markdown_formatting(config)
        assert result.passed
        assert [v.message for v in result.warnings] == [
            "Line 3: [code-block] Code block without language tag "
            "(consider adding for syntax highlighting)"
        ]

    def test_errors_fail(self, config, write_file):
        write_file(config.module_root / "NOTES.md", "# Notes\n\n### Deep\n")

        result = check_markdown_formatting(config)
        assert not result.passed
        assert result.errors[0].entity == "NOTES.md"
        assert result.errors[0].line_number == 3


class TestSourceAttribution:
    """Tests for the source attribution check."""

    def test_indicators(self):
        content = "## Source Attribution\n\nRepository: rust-lang/book\nhttps://github.com/rust-lang/book\n"
        assert attribution_indicators(content) == ["Source Section", "Repository", "URL"]

    def test_url_alone_is_not_attribution(self):
        assert attribution_indicators("See https://doc.rust-lang.org/book/\n") == []

    def test_adapted_from_phrase(self):
        assert attribution_indicators("This lesson is based on the Rust book.") == ["Adapted From"]

    def test_valid_module_passes(self, config):
        assert check_source_attribution(config).passed

    def test_long_document_without_attribution(self, config, write_file):
        write_file(config.module_root / "NOTES.md", "# Notes\n\n" + "Ownership rules. " * 40)

        result = check_source_attribution(config)
        assert [(v.entity, v.message) for v in result.errors] == [
            ("NOTES.md", "Missing source attribution")
        ]

    def test_short_and_excluded_documents_skipped(self, config, write_file):
        long_text = "# Terms\n\n" + "Borrowing means referencing. " * 40
        write_file(config.module_root / "GLOSSARY.md", long_text)
        write_file(config.module_root / "validation" / "validate-structure.md", long_text)
        write_file(config.module_root / "STUB.md", "# Stub\n")

        assert check_source_attribution(config).passed

    def test_threshold_configurable(self, config, write_file):
        write_file(config.module_root / "STUB.md", "# Stub\n\nShort page.\n")
        config.min_attribution_length = 10

        result = check_source_attribution(config)
        assert [v.entity for v in result.errors] == ["STUB.md"]
