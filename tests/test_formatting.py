"""
Tests for the text formatting helpers.
"""

from datetime import datetime

import pytest

from termfolio.core.formatting import (
    BORDER,
    PROGRESS_WIDTH,
    center,
    completed_progress,
    loading_frame,
    platform_icon,
    proficiency_bar,
    proficiency_level,
    progress_bar,
    project_banner,
    section,
    short_date,
    status_marker,
    truncate,
    wrap_bordered,
)


class TestBars:
    """Progress and proficiency bars."""

    def test_progress_bar_bounds(self):
        assert progress_bar(0) == "░" * PROGRESS_WIDTH
        assert progress_bar(100) == "█" * PROGRESS_WIDTH
        assert progress_bar(250) == "█" * PROGRESS_WIDTH
        assert progress_bar(-5) == "░" * PROGRESS_WIDTH

    def test_progress_bar_half(self):
        bar = progress_bar(50)
        assert bar.count("█") == PROGRESS_WIDTH // 2
        assert len(bar) == PROGRESS_WIDTH

    def test_loading_frame(self):
        assert loading_frame("Loading...", 35) == f"Loading...\n[{progress_bar(35)}] 35%"

    def test_completed_progress_ends_with_newline(self):
        assert completed_progress("Done") == f"Done\n[{'█' * PROGRESS_WIDTH}] 100%\n"

    @pytest.mark.parametrize("value,expected", [
        (100, "██████████"),
        (85, "████████▌░"),
        (84, "████████░░"),
        (5, "▌░░░░░░░░░"),
    ])
    def test_proficiency_bar(self, value, expected):
        assert proficiency_bar(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (95, "Expert"),
        (80, "Advanced"),
        (60, "Intermediate"),
        (40, "Competent"),
        (39, "Beginner"),
    ])
    def test_proficiency_level(self, value, expected):
        assert proficiency_level(value) == expected


class TestMarkers:
    """Status markers and icons."""

    def test_status_marker(self):
        assert status_marker("production") == "✅ Production Ready"
        assert status_marker("development") == "🚧 In Development"

    def test_unknown_status_reads_as_archived(self):
        assert status_marker("mystery") == "📦 Archived"

    def test_platform_icon_case_insensitive(self):
        assert platform_icon("Twitter") == "🐦"
        assert platform_icon("myspace") == "🔗"


class TestLayout:
    """Sections, centering and wrapping."""

    def test_section(self):
        text = section("👤 Current User", ["Jane Doe", "", "Dev"])
        assert text.split("\n") == ["👤 Current User", BORDER, "│ Jane Doe", BORDER, "│ Dev", BORDER]

    def test_section_without_closing_border(self):
        assert section("T", ["x"], close=False) == "T\n│\n│ x"

    def test_center(self):
        assert center("ab", width=6) == "  ab  "
        assert center("abc", width=6) == " abc  "

    def test_center_text_wider_than_width(self):
        assert center("abcdef", width=4) == "abcdef"

    def test_wrap_bordered(self):
        rows = wrap_bordered("one two three four five six", width=16)
        assert all(row.startswith("│ ") for row in rows)
        assert all(len(row) <= 16 for row in rows)
        assert " ".join(row[2:].strip() for row in rows) == "one two three four five six"

    def test_wrap_bordered_long_first_word(self):
        rows = wrap_bordered("supercalifragilistic short", width=10)
        assert rows[0].startswith("│ supercalifragilistic")

    def test_project_banner(self):
        lines = project_banner("demo", width=20).split("\n")
        assert len(lines) == 3
        assert "DEMO" in lines[1]
        assert all(len(line) == 20 for line in lines)


class TestText:
    """Dates and truncation."""

    def test_short_date(self):
        assert short_date(datetime(2024, 1, 5)) == "1/5/2024"
        assert short_date(None) == "Unknown"

    def test_truncate(self):
        assert truncate("hello", 10) == "hello"
        assert truncate("hello world", 5) == "hello..."
