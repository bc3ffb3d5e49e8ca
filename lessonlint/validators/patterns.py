#!/usr/bin/env python3
"""
patterns.py
-----------
Naming and bilingual keyword patterns used by the validators.

Every accepted English and Indonesian phrasing lives here so new
translations can be added without touching check logic.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Dict, List, Pattern

# ----- Naming -----
LESSON_NAME = re.compile(r"^\d{2}-[a-z-]+$")
LESSON_REFERENCE = re.compile(r"\d{2}-[a-z-]+")
LESSON_LINK = re.compile(r"\[.*?\]\(.*?/\d{2}-[a-z-]+.*?\)")
LESSON_NAME_HINT = r'\d{2}-[a-z-]+ (e.g., "01-fundamentals")'


def _headings(*phrases: str) -> Pattern[str]:
    """Pattern matching level-2 heading text that starts with a phrase."""
    return re.compile(r"^(?:%s)" % "|".join(phrases), re.IGNORECASE)


# ----- Required lesson sections (category -> accepted heading text) -----
REQUIRED_SECTIONS: Dict[str, Pattern[str]] = {
    "Overview": _headings("Overview", "Ringkasan", "Ikhtisar", "Gambaran Umum"),
    "Learning Objectives": _headings(
        "Learning Objectives", "Tujuan Pembelajaran", "Objektif Pembelajaran"
    ),
    "Prerequisites": _headings("Prerequisites", "Prasyarat", "Persyaratan"),
    "Next Steps": _headings("Next Steps", "Langkah Selanjutnya", "Langkah Berikutnya"),
    "Source Attribution": _headings(
        "Source Attribution", "Atribusi Sumber", "Sumber Referensi"
    ),
}

# At least one of these must be present
ALTERNATIVE_SECTIONS: Dict[str, Pattern[str]] = {
    "Best Practices": _headings(
        "Best Practices?", "Praktik Terbaik", "Praktik yang Baik"
    ),
    "Common Mistakes": _headings(
        "Common Mistakes", "Kesalahan Umum", "Kesalahan yang Sering Terjadi"
    ),
}

# ----- Exercise validation criteria -----
CRITERIA_HEADINGS: List[Pattern[str]] = [
    _headings("Validation Criteria", "Kriteria Validasi"),
    _headings("Success Criteria", "Kriteria Keberhasilan"),
    _headings("Expected Output", "Output yang Diharapkan"),
    _headings("Requirements", "Persyaratan"),
]

CRITERIA_KEYWORDS: List[Pattern[str]] = [
    re.compile(r"validation criteria", re.IGNORECASE),
    re.compile(r"kriteria validasi", re.IGNORECASE),
    re.compile(r"your solution is correct when", re.IGNORECASE),
    re.compile(r"solusi anda benar jika", re.IGNORECASE),
    re.compile(r"expected output", re.IGNORECASE),
    re.compile(r"output yang diharapkan", re.IGNORECASE),
    re.compile(r"should produce", re.IGNORECASE),
    re.compile(r"harus menghasilkan", re.IGNORECASE),
    re.compile("✅"),
    re.compile("✓"),
]

# ----- Navigation -----
NAVIGATION_LABELS: Dict[str, Pattern[str]] = {
    "previous": re.compile(r"\*\*(Previous|Sebelumnya)\*\*:\s*\[([^\]]+)\]\(([^)]*)\)"),
    "next": re.compile(r"\*\*(Next|Selanjutnya)\*\*:\s*\[([^\]]+)\]\(([^)]*)\)"),
    "home": re.compile(r"\*\*(Module Home|Beranda Modul)\*\*:\s*\[([^\]]+)\]\(([^)]*)\)"),
}

# ----- Source attribution -----
ATTRIBUTION_INDICATORS: Dict[str, Pattern[str]] = {
    "Source Section": re.compile(r"##\s*(source\s+attribution|atribusi\s+sumber)", re.IGNORECASE),
    "Adapted From": re.compile(r"(?:adapted|extracted|derived|based)\s+(?:from|on)", re.IGNORECASE),
    "Repository": re.compile(r"(?:repository|repo|source):\s*[^\n]+", re.IGNORECASE),
}
ATTRIBUTION_URL = re.compile(r"https?://[^\s)]+", re.IGNORECASE)
