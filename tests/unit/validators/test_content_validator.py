"""
Tests for the content validator.

Covers heading parity between language versions, language switcher
links and required lesson sections.
"""
import pytest
from hypothesis import given, strategies as st

from lessonlint.utils.md import Heading
from lessonlint.validators.content import (
    check_language_links,
    check_parallel_structure,
    check_required_sections,
    compare_outlines,
    find_document_pairs,
    find_lesson_documents,
    missing_sections,
    validate_content,
)


def outline(*levels):
    return [Heading(level=level, text=f"H{i}", line_number=i) for i, level in enumerate(levels, 1)]


class TestCompareOutlines:
    """Tests for compare_outlines."""

    def test_identical_levels(self):
        assert compare_outlines(outline(1, 2, 2, 3), outline(1, 2, 2, 3)) is None

    def test_text_differences_ignored(self):
        english = [Heading(1, "Ownership", 1), Heading(2, "Overview", 3)]
        indonesian = [Heading(1, "Kepemilikan", 1), Heading(2, "Gambaran Umum", 3)]
        assert compare_outlines(english, indonesian) is None

    def test_diverges_at_third_heading(self):
        message = compare_outlines(outline(1, 2, 2, 3), outline(1, 2, 3))
        assert message.startswith("Heading level mismatch at heading 3: EN level 2")
        assert "ID level 3" in message

    def test_count_mismatch(self):
        message = compare_outlines(outline(1, 2), outline(1, 2, 2))
        assert message == "Heading count mismatch (EN: 2, ID: 3), diverging at heading 3"

    def test_empty_outlines(self):
        assert compare_outlines([], []) is None
        assert compare_outlines([], outline(1)) is not None

    @given(
        st.lists(st.integers(min_value=1, max_value=6), max_size=12),
        st.lists(st.integers(min_value=1, max_value=6), max_size=12),
    )
    def test_passes_exactly_when_levels_equal(self, english, indonesian):
        result = compare_outlines(outline(*english), outline(*indonesian))
        assert (result is None) == (english == indonesian)

    @given(st.lists(st.integers(min_value=1, max_value=6), min_size=1, max_size=12), st.data())
    def test_reports_first_divergent_position(self, levels, data):
        position = data.draw(st.integers(min_value=0, max_value=len(levels) - 1))
        changed = list(levels)
        changed[position] = levels[position] % 6 + 1

        message = compare_outlines(outline(*levels), outline(*changed))
        assert f"at heading {position + 1}:" in message


class TestDocumentDiscovery:
    """Tests for pair and lesson document discovery."""

    def test_pairs_in_valid_module(self, config):
        directories = [pair.directory for pair in find_document_pairs(config)]
        assert directories == [
            "root",
            "01-fundamentals",
            "02-ownership-borrowing",
            "03-structs-enums",
            "exercises/01-variables-functions",
            "exercises/02-ownership-practice",
        ]

    def test_starter_and_solution_skipped(self, config, write_file):
        starter = config.exercises_root / "01-variables-functions" / "starter"
        write_file(starter / "README.md", "# Starter\n")
        write_file(starter / "README_ID.md", "# Awal\n## Extra\n")

        assert all("starter" not in pair.directory for pair in find_document_pairs(config))

    def test_lesson_documents_only_in_lessons(self, config):
        documents = find_lesson_documents(config)
        assert len(documents) == 6
        assert {doc.lesson for doc in documents} == {
            "01-fundamentals",
            "02-ownership-borrowing",
            "03-structs-enums",
        }
        assert {doc.language for doc in documents} == {"en", "id"}


class TestParallelStructure:
    """Tests for check_parallel_structure (Property 3)."""

    def test_valid_module_passes(self, config):
        result = check_parallel_structure(config)
        assert result.passed
        assert result.items_checked == 6

    def test_mismatch_reported_with_position(self, config, write_file):
        lesson = config.module_root / "02-ownership-borrowing"
        write_file(lesson / "README.md", "# A\n[ID](README_ID.md)\n## B\n## C\n### D\n")
        write_file(lesson / "README_ID.md", "# A\n[EN](README.md)\n## B\n### D\n")

        result = check_parallel_structure(config)
        assert len(result.errors) == 1
        violation = result.errors[0]
        assert violation.entity == "02-ownership-borrowing"
        assert "at heading 3" in violation.message
        assert violation.file_path == lesson / "README.md"
        assert str(lesson / "README_ID.md") in violation.suggestion

    def test_code_block_comments_not_headings(self, config, write_file):
        lesson = config.module_root / "01-fundamentals"
        write_file(lesson / "README.md", "# A\n```bash\n# comment\n```\n## B\n")
        write_file(lesson / "README_ID.md", "# A\n## B\n")

        assert check_parallel_structure(config).passed

    def test_unreadable_document_skipped(self, config):
        (config.module_root / "01-fundamentals" / "README_ID.md").write_bytes(b"\xff\xfe# A\n")
        assert check_parallel_structure(config).passed


class TestLanguageLinks:
    """Tests for check_language_links (Property 4)."""

    def test_valid_module_passes(self, config):
        assert check_language_links(config).passed

    def test_indonesian_without_english_link(self, config, write_file):
        path = config.module_root / "01-fundamentals" / "README_ID.md"
        write_file(path, "# Dasar\n\n**Selanjutnya**: [Lanjut](../02-ownership-borrowing/README_ID.md)\n")

        result = check_language_links(config)
        assert [(v.entity, v.message) for v in result.errors] == [
            ("01-fundamentals/README_ID.md", "Missing link to README.md")
        ]

    def test_english_without_indonesian_link(self, config, write_file):
        write_file(config.module_root / "README.md", "# Rust Basics\n")

        result = check_language_links(config)
        assert [(v.entity, v.message) for v in result.errors] == [
            ("root/README.md", "Missing link to README_ID.md")
        ]

    def test_plain_mention_counts(self, config, write_file):
        write_file(config.module_root / "README.md", "# Rust Basics\n\nTranslation: README_ID.md\n")
        assert check_language_links(config).passed


class TestMissingSections:
    """Tests for missing_sections."""

    def test_complete_english_lesson(self, lesson_doc):
        assert missing_sections(lesson_doc("01-fundamentals", "en")) == []

    def test_complete_indonesian_lesson(self, lesson_doc):
        assert missing_sections(lesson_doc("01-fundamentals", "id")) == []

    def test_missing_prerequisites(self, lesson_doc):
        content = lesson_doc(
            "x",
            sections=["Overview", "Learning Objectives", "Common Mistakes", "Next Steps", "Source Attribution"],
        )
        assert missing_sections(content) == ["Prerequisites"]

    def test_either_alternative_satisfies(self, lesson_doc):
        base = ["Overview", "Learning Objectives", "Prerequisites", "Next Steps", "Source Attribution"]
        assert missing_sections(lesson_doc("x", sections=base + ["Common Mistakes"])) == []
        assert missing_sections(lesson_doc("x", sections=base + ["Best Practice"])) == []
        assert missing_sections(lesson_doc("x", sections=base + ["Kesalahan Umum"])) == []

    def test_neither_alternative(self, lesson_doc):
        base = ["Overview", "Learning Objectives", "Prerequisites", "Next Steps", "Source Attribution"]
        assert missing_sections(lesson_doc("x", sections=base)) == [
            "Best Practices OR Common Mistakes"
        ]

    def test_mixed_language_headings_accepted(self, lesson_doc):
        content = lesson_doc(
            "x",
            sections=["Ringkasan", "Learning Objectives", "Prasyarat", "Best Practices", "Langkah Berikutnya", "Sumber Referensi"],
        )
        assert missing_sections(content) == []

    def test_only_level_two_headings_count(self):
        content = "# Overview\n### Learning Objectives\n## Prerequisites\n"
        assert "Overview" in missing_sections(content)
        assert "Learning Objectives" in missing_sections(content)
        assert "Prerequisites" not in missing_sections(content)

    def test_case_insensitive(self):
        content = "## OVERVIEW\n## learning objectives\n"
        missing = missing_sections(content)
        assert "Overview" not in missing
        assert "Learning Objectives" not in missing


class TestRequiredSections:
    """Tests for check_required_sections (Property 5)."""

    def test_valid_module_passes(self, config):
        result = check_required_sections(config)
        assert result.passed
        assert result.items_checked == 6

    def test_violation_names_category_and_file(self, config, lesson_doc, write_file):
        path = config.module_root / "03-structs-enums" / "README.md"
        sections = ["Overview", "Learning Objectives", "Prerequisites", "Best Practices", "Source Attribution"]
        write_file(path, lesson_doc("03-structs-enums", "en", sections=sections))

        result = check_required_sections(config)
        assert [(v.entity, v.message) for v in result.errors] == [
            ("03-structs-enums (en)", 'Missing "Next Steps" section')
        ]
        assert result.errors[0].file_path == path

    def test_exercises_and_root_not_checked(self, config, write_file):
        write_file(config.module_root / "README.md", "# Home\n[ID](README_ID.md)\n")
        assert check_required_sections(config).passed


class TestValidateContent:
    """Tests for the content suite."""

    def test_suite_order(self, config):
        suite = validate_content(config)
        assert [r.key for r in suite.results] == ["parallel", "language-links", "sections"]
        assert suite.passed
