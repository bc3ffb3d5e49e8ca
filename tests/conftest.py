"""
conftest.py
-----------
Shared pytest fixtures for lessonlint tests.

Provides fixtures for:
- A valid bilingual curriculum module (three lessons, two exercises)
- Document builders for lessons and exercises in both languages
- A file writer that creates parent directories
"""
import pytest
from pathlib import Path
from typing import Callable, Optional

from lessonlint.core.config import ValidatorConfig


LESSONS = ["01-fundamentals", "02-ownership-borrowing", "03-structs-enums"]
EXERCISES = ["01-variables-functions", "02-ownership-practice"]

# Lesson sections per language, in document order
LESSON_SECTIONS = {
    "en": [
        "Overview",
        "Learning Objectives",
        "Prerequisites",
        "Best Practices",
        "Next Steps",
        "Source Attribution",
    ],
    "id": [
        "Gambaran Umum",
        "Tujuan Pembelajaran",
        "Prasyarat",
        "Praktik Terbaik",
        "Langkah Selanjutnya",
        "Atribusi Sumber",
    ],
}

NAV_LABELS = {
    "en": ("Previous", "Next", "Module Home"),
    "id": ("Sebelumnya", "Selanjutnya", "Beranda Modul"),
}


def _file_name(language: str) -> str:
    return "README.md" if language == "en" else "README_ID.md"


def build_lesson(
    title: str,
    language: str = "en",
    previous: Optional[str] = None,
    next_: Optional[str] = None,
    home: bool = True,
    sections: Optional[list] = None,
) -> str:
    """Lesson document text; previous/next are lesson directory names."""
    own = _file_name(language)
    lines = [
        f"# {title}",
        "",
        "[English](README.md) | [Bahasa Indonesia](README_ID.md)",
        "",
    ]
    for section in LESSON_SECTIONS[language] if sections is None else sections:
        lines += [f"## {section}", "", f"Content for {section.lower()}.", ""]
        if section in ("Overview", "Gambaran Umum"):
            lines += ["```rust", 'fn main() { println!("hello"); }', "```", ""]
        if section in ("Source Attribution", "Atribusi Sumber"):
            lines += ["Adapted from the rust-basics curriculum.", ""]

    prev_label, next_label, home_label = NAV_LABELS[language]
    lines.append("---")
    lines.append("")
    if previous:
        lines.append(f"**{prev_label}**: [{previous}](../{previous}/{own})")
    if next_:
        lines.append(f"**{next_label}**: [{next_}](../{next_}/{own})")
    if home:
        lines.append(f"**{home_label}**: [Rust Basics](../{own})")
    return "\n".join(lines) + "\n"


def build_exercise(title: str, language: str = "en", lesson: str = LESSONS[0]) -> str:
    """Exercise instructions referencing a lesson and stating criteria."""
    own = _file_name(language)
    if language == "en":
        criteria, instructions = "Validation Criteria", "Instructions"
    else:
        criteria, instructions = "Kriteria Validasi", "Instruksi"
    return "\n".join(
        [
            f"# {title}",
            "",
            "[English](README.md) | [Bahasa Indonesia](README_ID.md)",
            "",
            f"Practice for [{lesson}](../../{lesson}/{own}).",
            "",
            f"## {instructions}",
            "",
            "1. Open `starter/main.rs`",
            "2. Complete the TODO items",
            "",
            f"## {criteria}",
            "",
            "- ✅ The program compiles",
            "- ✅ All tests pass",
            "",
            "Source: rust-basics exercises",
            "",
        ]
    )


def build_root_readme(language: str = "en") -> str:
    """Module home document."""
    own = _file_name(language)
    lines = [
        "# Rust Basics",
        "",
        "[English](README.md) | [Bahasa Indonesia](README_ID.md)",
        "",
        "## Lessons" if language == "en" else "## Pelajaran",
        "",
    ]
    lines += [f"- [{lesson}]({lesson}/{own})" for lesson in LESSONS]
    lines += ["", "Source: rust-basics curriculum", ""]
    return "\n".join(lines)


def write_valid_module(root: Path) -> Path:
    """Create a module that passes every suite."""
    root.mkdir(parents=True, exist_ok=True)
    for language in ("en", "id"):
        (root / _file_name(language)).write_text(build_root_readme(language), encoding="utf-8")

    for index, lesson in enumerate(LESSONS):
        previous = LESSONS[index - 1] if index > 0 else None
        next_ = LESSONS[index + 1] if index < len(LESSONS) - 1 else None
        (root / lesson).mkdir()
        for language in ("en", "id"):
            (root / lesson / _file_name(language)).write_text(
                build_lesson(lesson, language, previous, next_), encoding="utf-8"
            )

    for exercise in EXERCISES:
        exercise_dir = root / "exercises" / exercise
        for sub in ("starter", "solution"):
            (exercise_dir / sub).mkdir(parents=True)
            (exercise_dir / sub / "main.rs").write_text("fn main() {}\n", encoding="utf-8")
        for language in ("en", "id"):
            (exercise_dir / _file_name(language)).write_text(
                build_exercise(exercise, language), encoding="utf-8"
            )
    return root


# ----- Module Fixtures -----

@pytest.fixture
def module_root(tmp_path):
    """A valid curriculum module in a temporary directory."""
    return write_valid_module(tmp_path / "rust-basics")


@pytest.fixture
def config(module_root):
    """Default configuration for the valid module."""
    return ValidatorConfig(module_root=module_root)


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    """Write text to a path, creating parent directories."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# ----- Document Builders -----

@pytest.fixture
def lesson_doc():
    """Builder for lesson documents."""
    return build_lesson


@pytest.fixture
def exercise_doc():
    """Builder for exercise documents."""
    return build_exercise
